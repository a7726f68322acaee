"""Shared test fixtures for the scc_converter test suite.

WHY: Parser, emitter and converter tests all need the same small
timed-text sample and its expected caption blocks. Centralizing them
keeps the expected values in one place.

RULES:
- SAMPLE_TIMED_TEXT includes an index line per block and one junk block
  so lenient parsing is exercised by default.
- Expected blocks match SAMPLE_TIMED_TEXT exactly.
"""

from typing import List

import pytest

from scc_converter.core.ir import CaptionBlock


SAMPLE_TIMED_TEXT = (
    "1\n"
    "00:00:01,000 --> 00:00:02,500\n"
    "Hello\n"
    "\n"
    "2\n"
    "00:02:17,440 --> 00:02:19,000\n"
    "Two lines\n"
    "of text\n"
    "\n"
    "this block has no time range\n"
)

SAMPLE_BLOCKS: List[CaptionBlock] = [
    CaptionBlock(start=1.0, end=2.5, lines=["Hello"]),
    CaptionBlock(start=137.44, end=139.0, lines=["Two lines", "of text"]),
]


@pytest.fixture
def sample_timed_text():
    """Two valid blocks followed by one block without a header."""
    return SAMPLE_TIMED_TEXT


@pytest.fixture
def sample_blocks():
    """Caption blocks expected from SAMPLE_TIMED_TEXT."""
    return [
        CaptionBlock(start=b.start, end=b.end, lines=list(b.lines))
        for b in SAMPLE_BLOCKS
    ]
