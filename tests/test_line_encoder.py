"""Unit tests for the line encoder.

WHY: Row splitting, row preambles and the filler rule decide where and
whether text appears on screen.

HOW: Exercises encode_chars() for the filler rule and encode_line() for
row splitting, preambles, and multi-line input.
"""

from scc_converter.core.line_encoder import (
    ROW_POSITION_CODES,
    encode_chars,
    encode_line,
    split_rows,
)


def _row_of_a(count):
    """Expected encoding for ``count`` letters "a" (code 61)."""
    return encode_chars("a" * count)


class TestEncodeChars:

    def test_even_length_gets_filler(self):
        assert encode_chars("HI") == "c849 80"

    def test_odd_length_has_no_filler(self):
        assert encode_chars("Hello") == "c8e5 ecec ef"
        assert encode_chars("A") == "c1"

    def test_regroups_into_four_digit_words(self):
        assert encode_chars("abcd") == "6162 e364 80"

    def test_unsupported_character(self):
        assert encode_chars("€") == "7f"

    def test_extended_character_codes(self):
        # ♪ = 9137, a = 61
        assert encode_chars("♪a") == "9137 6180"


class TestSplitRows:

    def test_splits_at_width(self):
        assert split_rows("abcdef", 4) == ["abcd", "ef"]

    def test_default_width_is_32(self):
        rows = split_rows("x" * 70)
        assert [len(r) for r in rows] == [32, 32, 6]

    def test_empty(self):
        assert split_rows("") == []


class TestEncodeLine:

    def test_single_row(self):
        assert encode_line("HI") == "1340 1340 c849 80"

    def test_empty_text(self):
        assert encode_line("") == ""

    def test_two_rows(self):
        expected = "1340 1340 {} 13e0 13e0 {}".format(_row_of_a(32), _row_of_a(8))
        assert encode_line("a" * 40) == expected
        assert _row_of_a(8) == "6161 6161 6161 6161 80"

    def test_rows_past_fourth_have_no_preamble(self):
        result = encode_line("a" * 160)
        row = _row_of_a(32)
        expected = " ".join([
            ROW_POSITION_CODES[0], row,
            ROW_POSITION_CODES[1], row,
            ROW_POSITION_CODES[2], row,
            ROW_POSITION_CODES[3], row,
            row,
        ])
        assert result == expected

    def test_line_breaks_are_encoded_as_characters(self):
        # \r and \n are not in the table and encode as 7f
        assert encode_line("Hello\r\nWorld") == "1340 1340 c8e5 ecec ef7f 7f57 eff2 ec64 80"
