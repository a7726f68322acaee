"""Timed-text parser: file content to internal-format caption blocks.

WHY: Caption files arriving for SCC conversion are timed text: a
``start --> end`` header line followed by caption lines, with blocks
separated by a blank line. Real files are noisy (stray index lines,
trailing junk, partial blocks), so the default parser keeps whatever
it can read and drops the rest.

HOW: Line endings are normalized, the content is trimmed and split on
blank lines. Each candidate block is searched for the header pattern;
matches become CaptionBlocks, misses are counted and skipped.

RULES:
- Lenient by default: blocks without a header are dropped, not reported
- parse_strict() raises BlockParseError on the first such block
- Malformed timestamps in a matched header always raise TimeParseError
- Source order is preserved; timestamps are not cross-checked
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from scc_converter.core.errors import BlockParseError
from scc_converter.core.ir import CaptionBlock
from scc_converter.core.timecode import text_to_seconds

logger = logging.getLogger(__name__)

BLOCK_RE = re.compile(
    r"(?P<start>[^\n]*) --> (?P<end>[^\n]*)\n(?P<text>.*)",
    re.DOTALL,
)


@dataclass
class ParseResult:
    """Parsed blocks plus the number of candidate blocks that were dropped."""

    blocks: list[CaptionBlock] = field(default_factory=list)
    skipped: int = 0


def split_blocks(content: str) -> List[str]:
    """Normalize line endings, trim, and split content on blank lines."""
    content = content.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not content:
        return []
    return content.split("\n\n")


def _block_from_match(match: re.Match[str]) -> CaptionBlock:
    return CaptionBlock(
        start=text_to_seconds(match.group("start")),
        end=text_to_seconds(match.group("end")),
        lines=match.group("text").split("\n"),
    )


def _parse(content: str, strict: bool) -> ParseResult:
    result = ParseResult()
    for index, raw_block in enumerate(split_blocks(content)):
        match: Optional[re.Match[str]] = BLOCK_RE.search(raw_block)
        if match is None:
            if strict:
                raise BlockParseError(index, raw_block)
            logger.debug("Skipping block %d without time range: %r", index, raw_block[:40])
            result.skipped += 1
            continue
        result.blocks.append(_block_from_match(match))

    logger.debug(
        "Parsed %d caption blocks (%d skipped)", len(result.blocks), result.skipped,
    )
    return result


def parse_with_stats(content: str) -> ParseResult:
    """Leniently parse timed text and report how many blocks were dropped."""
    return _parse(content, strict=False)


def parse(content: str) -> List[CaptionBlock]:
    """Parse timed-text content into caption blocks.

    Example::

        >>> parse("00:00:01,000 --> 00:00:02,500\\nHello")
        [CaptionBlock(start=1.0, end=2.5, lines=['Hello'])]

    Blocks without a ``start --> end`` header are silently skipped.

    Raises:
        TimeParseError: If a header carries a malformed timestamp.
    """
    return _parse(content, strict=False).blocks


def parse_strict(content: str) -> List[CaptionBlock]:
    """Parse timed text, rejecting any block without a time-range header.

    Raises:
        BlockParseError: On the first candidate block with no header.
        TimeParseError: If a header carries a malformed timestamp.
    """
    return _parse(content, strict=True).blocks
