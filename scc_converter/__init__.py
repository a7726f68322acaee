"""SCC Converter: timed text to Scenarist SCC closed captions.

WHY: Broadcast closed-caption equipment ingests Scenarist SCC files,
hex-encoded CEA-608 byte pairs with SMPTE-style timecodes. Subtitle
tooling works with timed text. This package bridges the two through a
shared internal format of caption blocks.

HOW: Two pipelines around one internal format: parse (timed text ->
caption blocks) and emit (caption blocks -> SCC). SccConverter wraps
both behind the converter contract shared by sibling codecs.

RULES:
- Both directions are pure string/structure transformations
- Parsing is lenient by default; malformed blocks are dropped
- Unsupported characters never fail; they encode as the "7f" code
"""

from scc_converter.converters.scc import SccConverter
from scc_converter.core.emitter import emit
from scc_converter.core.errors import (
    BlockParseError,
    InternalFormatError,
    ParseError,
    SccError,
    TimeFormatError,
    TimeParseError,
)
from scc_converter.core.ir import CaptionBlock
from scc_converter.core.parser import parse, parse_strict, parse_with_stats

__version__ = "0.1.0"

__all__ = [
    "SccConverter",
    "CaptionBlock",
    "parse",
    "parse_strict",
    "parse_with_stats",
    "emit",
    "SccError",
    "ParseError",
    "TimeParseError",
    "BlockParseError",
    "TimeFormatError",
    "InternalFormatError",
]
