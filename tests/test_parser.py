"""Unit tests for the timed-text parser.

WHY: The parser is the only way caption text enters the internal format.
Noisy input must not crash it, and valid blocks must come through with
exact timing and lines.

HOW: Tests cover lenient parsing with skip counts, strict parsing,
line-ending normalization, and timestamp errors in matched headers.
"""

import pytest

from scc_converter.core.errors import BlockParseError, TimeParseError
from scc_converter.core.ir import CaptionBlock
from scc_converter.core.parser import parse, parse_strict, parse_with_stats, split_blocks


class TestParse:

    def test_single_block(self):
        blocks = parse("00:00:01,000 --> 00:00:02,500\nHello")
        assert blocks == [CaptionBlock(start=1.0, end=2.5, lines=["Hello"])]

    def test_sample(self, sample_timed_text, sample_blocks):
        blocks = parse(sample_timed_text)
        assert len(blocks) == 2
        assert blocks[0] == sample_blocks[0]
        assert blocks[1].start == pytest.approx(sample_blocks[1].start)
        assert blocks[1].end == pytest.approx(sample_blocks[1].end)
        assert blocks[1].lines == ["Two lines", "of text"]

    def test_index_line_before_header_is_ignored(self):
        blocks = parse("7\n00:00:03,000 --> 00:00:04,000\nText")
        assert blocks[0].lines == ["Text"]
        assert blocks[0].start == pytest.approx(3.0)

    def test_blocks_without_header_are_dropped(self):
        content = "garbage\n\n00:00:01,000 --> 00:00:02,000\nOK\n\ntrailing"
        assert len(content.strip().split("\n\n")) == 3
        blocks = parse(content)
        assert [b.lines for b in blocks] == [["OK"]]

    def test_header_without_text_is_dropped(self):
        assert parse("00:00:01,000 --> 00:00:02,000") == []

    def test_crlf_line_endings(self):
        content = "00:00:01,000 --> 00:00:02,000\r\nOne\r\nTwo\r\n\r\n00:00:03,000 --> 00:00:04,000\r\nThree"
        blocks = parse(content)
        assert [b.lines for b in blocks] == [["One", "Two"], ["Three"]]

    def test_empty_content(self):
        assert parse("") == []
        assert parse("\n\n  \n") == []

    def test_order_and_overlaps_preserved(self):
        content = (
            "00:00:05,000 --> 00:00:09,000\nFirst\n\n"
            "00:00:01,000 --> 00:00:06,000\nSecond"
        )
        blocks = parse(content)
        assert [b.lines[0] for b in blocks] == ["First", "Second"]
        assert blocks[1].start < blocks[0].start

    def test_malformed_time_in_header_raises(self):
        with pytest.raises(TimeParseError):
            parse("xx:yy --> 00:00:02,000\nHi")


class TestParseWithStats:

    def test_counts_skipped_blocks(self, sample_timed_text):
        result = parse_with_stats(sample_timed_text)
        assert len(result.blocks) == 2
        assert result.skipped == 1

    def test_nothing_skipped(self):
        result = parse_with_stats("00:00:01,000 --> 00:00:02,000\nOK")
        assert result.skipped == 0


class TestParseStrict:

    def test_valid_content(self):
        blocks = parse_strict("00:00:01,000 --> 00:00:02,000\nOK")
        assert len(blocks) == 1

    def test_rejects_block_without_header(self, sample_timed_text):
        with pytest.raises(BlockParseError) as exc_info:
            parse_strict(sample_timed_text)
        assert exc_info.value.index == 2
        assert "no time range" in exc_info.value.block


class TestSplitBlocks:

    def test_trims_and_splits(self):
        assert split_blocks("\n\na\n\nb\n\n") == ["a", "b"]
