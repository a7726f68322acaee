"""Exception types raised by the SCC converter.

WHY: Callers need to tell "the input was malformed" apart from bugs.
Every error here also subclasses ValueError so code written against
plain ValueError keeps working.

RULES:
- Unsupported characters never raise (they degrade to the fallback code)
- Blocks without a time-range header only raise in strict parsing
"""

from __future__ import annotations


class SccError(Exception):
    """Base class for all converter errors."""


class ParseError(SccError, ValueError):
    """Timed-text input could not be parsed."""


class TimeParseError(ParseError):
    """A timestamp string is not a valid ``HH:MM:SS,fff`` value."""

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        self.reason = reason
        message = "Invalid timestamp {!r}".format(text)
        if reason:
            message += ": {}".format(reason)
        super().__init__(message)


class BlockParseError(ParseError):
    """A caption block has no ``start --> end`` header (strict mode only)."""

    def __init__(self, index: int, block: str) -> None:
        self.index = index
        self.block = block
        preview = block if len(block) <= 40 else block[:37] + "..."
        super().__init__(
            "Block {} has no time-range header: {!r}".format(index, preview)
        )


class TimeFormatError(SccError, ValueError):
    """A seconds value cannot be written as an SCC timestamp."""


class InternalFormatError(SccError, ValueError):
    """Internal-format data does not match the expected shape."""
