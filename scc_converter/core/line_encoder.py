"""Line encoder: caption text to SCC row code words.

WHY: An SCC caption is a run of 4-hex-digit code words. Text must be cut
into rows the decoder can display, each row positioned with a preamble
code, and every character replaced by its CEA-608 code.

HOW: split_rows() cuts the text into 32-character rows. Rows 0-3 get a
row-position code pair; encode_chars() encodes a row's characters,
applies the filler rule, and regroups the hex string into code words.

RULES:
- Row width is 32 characters; line breaks inside the text are ordinary
  characters and count toward the width
- Row preambles, in order: 1340, 13e0, 9440, 94e0 (each sent twice)
- Rows after the fourth get no preamble
- Even-length rows get the "80" filler appended before regrouping
- Unsupported characters encode as "7f"
"""

from __future__ import annotations

from typing import List

from scc_converter.config import FILLER_CODE, ROW_WIDTH
from scc_converter.core.charset import lookup

ROW_POSITION_CODES = (
    "1340 1340",
    "13e0 13e0",
    "9440 9440",
    "94e0 94e0",
)

_CODE_WORD_DIGITS = 4


def split_rows(text: str, width: int = ROW_WIDTH) -> List[str]:
    """Split text into consecutive chunks of at most ``width`` characters."""
    return [text[i:i + width] for i in range(0, len(text), width)]


def encode_chars(chunk: str) -> str:
    """Encode one row's characters as space-separated 4-digit code words."""
    hex_codes = "".join(lookup(char) for char in chunk)
    if len(chunk) % 2 == 0:
        hex_codes += FILLER_CODE
    return " ".join(
        hex_codes[i:i + _CODE_WORD_DIGITS]
        for i in range(0, len(hex_codes), _CODE_WORD_DIGITS)
    )


def encode_line(text: str) -> str:
    """Encode caption text into positioned SCC code words.

    Example: ``"HI"`` -> ``"1340 1340 c849 80"``

    Args:
        text: Caption text. Multi-line captions are passed already
              joined; the separators are encoded like any character.

    Returns:
        Space-separated code words, or an empty string for empty text.
    """
    parts: List[str] = []
    for index, row in enumerate(split_rows(text)):
        # TODO: position rows past the fourth once a layout for them is chosen
        if index < len(ROW_POSITION_CODES):
            parts.append(ROW_POSITION_CODES[index])
        parts.append(encode_chars(row))
    return " ".join(parts).strip()
