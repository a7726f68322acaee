"""Timestamp conversion between text timecodes and float seconds.

WHY: Timed-text input carries ``HH:MM:SS,fff`` timestamps while SCC
output wants ``HH:MM:SS:ff`` with a two-digit frame field. Both sides
meet at the internal format's float seconds.

HOW: The clock part is parsed and formatted through datetime on the
fixed reference date 1970-01-01, so only time-of-day matters. The
fractional part is handled as a digit string.

RULES:
- text_to_seconds() reads the fraction as a decimal ("44" -> 0.44),
  not as a millisecond count
- seconds_to_text() rescales up to 3 fraction digits with
  floor(digits * 100 / 40), keeps 2 characters, right-pads with "0"
- Whole seconds >= 86400 wrap around midnight (day rollover)
- The two functions are not inverses; precision is lost both ways
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Tuple

from scc_converter.core.errors import TimeFormatError, TimeParseError

_REFERENCE_DATE = datetime(1970, 1, 1)
_SECONDS_PER_DAY = 86400


def text_to_seconds(text: str) -> float:
    """Convert a ``HH:MM:SS,fff`` timestamp to seconds since midnight.

    Example: ``"00:02:17,440"`` -> ``137.44``

    Args:
        text: Timestamp string. The ``,fff`` part is optional and may
              have any number of digits.

    Returns:
        Float seconds.

    Raises:
        TimeParseError: If the clock or fraction part is malformed.
    """
    value = text.strip()
    clock, sep, fraction = value.partition(",")

    try:
        parsed = datetime.strptime(
            "{} {}".format(_REFERENCE_DATE.strftime("%Y-%m-%d"), clock.strip()),
            "%Y-%m-%d %H:%M:%S",
        )
    except ValueError as exc:
        raise TimeParseError(text, str(exc)) from exc

    fraction = fraction.strip()
    if sep and not (fraction.isascii() and fraction.isdigit()):
        raise TimeParseError(text, "fraction must be digits")

    whole = (parsed - _REFERENCE_DATE).total_seconds()
    return whole + (float("0." + fraction) if fraction else 0.0)


def _split_seconds(seconds: float) -> Tuple[int, str]:
    """Split seconds into whole seconds and the decimal fraction digits."""
    text = repr(float(seconds))
    if "e" in text or "E" in text:
        text = "{:f}".format(seconds).rstrip("0")
    whole, _, fraction = text.partition(".")
    return int(whole), fraction.rstrip("0")


def frame_field(fraction: str) -> str:
    """Rescale decimal fraction digits into the two-digit SCC frame field."""
    digits = fraction[:3]
    if not digits:
        return "00"
    value = int(digits) * 100 // 40
    return str(value)[:2].ljust(2, "0")


def seconds_to_text(seconds: float) -> str:
    """Convert seconds to an SCC ``HH:MM:SS:ff`` timecode.

    Example: ``137.44`` -> ``"00:02:17:11"``

    Raises:
        TimeFormatError: If ``seconds`` is negative or not finite.
    """
    if not math.isfinite(seconds):
        raise TimeFormatError(
            "Cannot format non-finite time {!r}".format(seconds)
        )
    if seconds < 0:
        raise TimeFormatError(
            "Cannot format negative time {!r}".format(seconds)
        )

    whole, fraction = _split_seconds(seconds)
    clock = (_REFERENCE_DATE + timedelta(seconds=whole % _SECONDS_PER_DAY)).strftime("%H:%M:%S")
    return "{}:{}".format(clock, frame_field(fraction))
