"""Configuration constants, wire-format codes, and .env loading.

WHY: Centralizes the values that shape SCC output and the few runtime
switches the converter honours, so they are easy to find and override.
Wire constants are plain module-level strings, not buried in logic, so
both humans and coding agents can check them against CEA-608 tables.

HOW: python-dotenv loads the .env file on import. Wire constants are
fixed; behaviour switches read environment variables through env_flag().

RULES:
- Wire constants (header, row width, fallback/filler codes) are never
  read from the environment: playback hardware depends on them
- SCC_STRICT_PARSING defaults to false (lenient parser)
- SCC_VALIDATE_INTERNAL_FORMAT defaults to true (schema-check dict input)
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# SCC wire format
# ---------------------------------------------------------------------------

SCC_HEADER = "Scenarist_SCC V1.0"
"""First line of every SCC file."""

SCC_EXTENSION = ".scc"
SCC_MEDIA_TYPE = "text/x-scc"

ROW_WIDTH = 32
"""Maximum characters per physical caption row."""

FALLBACK_CODE = "7f"
"""Code emitted for characters missing from the character table."""

FILLER_CODE = "80"
"""Pad byte appended to even-length rows."""


# ---------------------------------------------------------------------------
# Runtime switches
# ---------------------------------------------------------------------------

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean switch from the environment.

    Unset or blank variables fall back to ``default``; otherwise only
    ``1``, ``true``, ``yes`` and ``on`` (any case) count as true.
    """
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUE_VALUES


STRICT_PARSING = env_flag("SCC_STRICT_PARSING", False)
VALIDATE_INTERNAL_FORMAT = env_flag("SCC_VALIDATE_INTERNAL_FORMAT", True)
