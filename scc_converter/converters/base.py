"""Abstract base converter.

WHY: Every subtitle codec in the family reads file content into the
same internal format and writes it back out. This base class pins that
two-method contract so callers can drive any codec generically.

HOW: BaseConverter is an ABC with ``name``, ``extension`` and
``media_type`` properties and the two conversion methods.

RULES:
- Subclasses MUST implement all five abstract members
- Both conversion methods are pure: no file I/O, no shared state
- ``extension`` starts with a dot, e.g. ``".scc"``

To add a new codec:
1. Create a new file in converters/
2. Subclass BaseConverter
3. Implement the conversion methods, ``name``, ``extension`` and ``media_type``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Union

from scc_converter.core.ir import CaptionBlock


class BaseConverter(ABC):
    """Abstract base for all subtitle codecs."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Scenarist SCC'."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension including the dot."""

    @property
    @abstractmethod
    def media_type(self) -> str:
        """MIME type of the file content, e.g. ``"text/x-scc"``."""

    @abstractmethod
    def file_content_to_internal_format(self, file_content: str) -> List[CaptionBlock]:
        """Convert file content into the internal format.

        Args:
            file_content: Full content of the source file.

        Returns:
            Caption blocks in display order.
        """

    @abstractmethod
    def internal_format_to_file_content(
        self,
        internal_format: Iterable[Union[CaptionBlock, Dict[str, Any]]],
    ) -> str:
        """Convert the internal format into file content.

        Args:
            internal_format: Caption blocks in display order.

        Returns:
            The complete file content as a string.
        """
