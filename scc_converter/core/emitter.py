"""SCC emitter: internal-format caption blocks to Scenarist SCC content.

WHY: Broadcast encoders ingest captions as SCC files. Each caption
becomes a pop-on sequence at its start time and an erase at its end
time, built from fixed CEA-608 control codes around the encoded text.

HOW: For each block the lines are joined with CRLF, encoded as one
string by the line encoder, and wrapped in the control-code sequence.
The file header comes first and trailing whitespace is trimmed.

RULES:
- Header: "Scenarist_SCC V1.0" followed by CRLF and a blank line
- Start line: 94ae (resume caption loading), 9420 (pop-on mode),
  text, 942c (erase displayed memory), 8080 (padding), 942f (display)
- End line: 942c (erase displayed memory)
- Every control code is doubled, as broadcast decoders expect
- Block order is preserved; no block is merged or dropped
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Union

from scc_converter.config import SCC_HEADER
from scc_converter.core.ir import CaptionBlock, coerce_blocks
from scc_converter.core.line_encoder import encode_line
from scc_converter.core.timecode import seconds_to_text

logger = logging.getLogger(__name__)

RESUME_CAPTION_LOADING = "94ae 94ae"
POP_ON_MODE = "9420 9420"
ERASE_DISPLAYED_MEMORY = "942c 942c"
PADDING = "8080 8080"
DISPLAY_CAPTION = "942f 942f"

LINE_SEPARATOR = "\r\n"
ENTRY_TERMINATOR = "\r\n\n"


def _start_entry(block: CaptionBlock) -> str:
    encoded = encode_line(LINE_SEPARATOR.join(block.lines))
    codes = [RESUME_CAPTION_LOADING, POP_ON_MODE]
    if encoded:
        codes.append(encoded)
    codes.extend([ERASE_DISPLAYED_MEMORY, PADDING, DISPLAY_CAPTION])
    return "{}\t{}".format(seconds_to_text(block.start), " ".join(codes))


def _end_entry(block: CaptionBlock) -> str:
    return "{}\t{}".format(seconds_to_text(block.end), ERASE_DISPLAYED_MEMORY)


def emit(
    internal: Iterable[Union[CaptionBlock, Dict[str, Any]]],
    validate: bool = True,
) -> str:
    """Write caption blocks as SCC file content.

    Args:
        internal: Caption blocks in display order. Dicts in the
                  ``{"start", "end", "lines"}`` shape are accepted.
        validate: Schema-check dict input before emitting.

    Returns:
        Complete SCC content, ready to be written verbatim.

    Raises:
        InternalFormatError: If dict input fails validation.
        TimeFormatError: If a block has a negative time.
    """
    blocks = coerce_blocks(internal, validate=validate)

    entries: List[str] = [SCC_HEADER + ENTRY_TERMINATOR]
    for block in blocks:
        entries.append(_start_entry(block) + ENTRY_TERMINATOR)
        entries.append(_end_entry(block) + ENTRY_TERMINATOR)

    logger.debug("Emitted %d caption blocks as SCC", len(blocks))
    return "".join(entries).strip()
