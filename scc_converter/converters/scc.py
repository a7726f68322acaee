"""Scenarist SCC converter.

WHY: The converter family talks to each codec through BaseConverter.
This class is the SCC member: it reads timed text into the internal
format and writes the internal format out as SCC.

HOW: Delegates to core.parser (lenient or strict) for reading and to
core.emitter for writing. Defaults for parsing strictness and dict
validation come from config and can be overridden per instance.

RULES:
- Reading and writing are not inverses: input is timed text
  (``start --> end``), output is SCC code words
- Never mutates the blocks it is given
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from scc_converter import config
from scc_converter.converters.base import BaseConverter
from scc_converter.core.emitter import emit
from scc_converter.core.ir import CaptionBlock
from scc_converter.core.parser import parse_strict, parse_with_stats

logger = logging.getLogger(__name__)


class SccConverter(BaseConverter):
    """Converter between timed text and Scenarist SCC.

    Args:
        strict: Reject blocks without a time-range header instead of
                skipping them. Defaults to ``SCC_STRICT_PARSING``.
        validate: Schema-check dict input before emitting. Defaults to
                  ``SCC_VALIDATE_INTERNAL_FORMAT``.
    """

    def __init__(self, strict: Optional[bool] = None, validate: Optional[bool] = None) -> None:
        self.strict = config.STRICT_PARSING if strict is None else strict
        self.validate = config.VALIDATE_INTERNAL_FORMAT if validate is None else validate
        self.last_skipped = 0

    @property
    def name(self) -> str:
        return "Scenarist SCC"

    @property
    def extension(self) -> str:
        return config.SCC_EXTENSION

    @property
    def media_type(self) -> str:
        return config.SCC_MEDIA_TYPE

    def file_content_to_internal_format(self, file_content: str) -> List[CaptionBlock]:
        """Parse timed-text content into caption blocks.

        In lenient mode the number of dropped blocks is kept on
        ``last_skipped`` for diagnostics. The attribute is overwritten by
        every call and is not synchronized: when one converter is shared
        between threads, use ``parse_with_stats()`` for a per-call count.
        """
        if self.strict:
            self.last_skipped = 0
            return parse_strict(file_content)

        result = parse_with_stats(file_content)
        self.last_skipped = result.skipped
        if result.skipped:
            logger.info("Dropped %d block(s) without a time range", result.skipped)
        return result.blocks

    def internal_format_to_file_content(
        self,
        internal_format: Iterable[Union[CaptionBlock, Dict[str, Any]]],
    ) -> str:
        return emit(internal_format, validate=self.validate)
