"""Converter classes implementing the shared two-method codec contract."""

from scc_converter.converters.base import BaseConverter
from scc_converter.converters.scc import SccConverter

__all__ = ["BaseConverter", "SccConverter"]
