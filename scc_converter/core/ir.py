"""Internal format: the caption-block representation shared by all codecs.

WHY: Every subtitle codec in the family converts to and from the same
ordered list of caption blocks. Keeping that shape in one module gives
the parser and the emitter a single, well-typed contract, and lets
sibling codecs hand over plain dicts that are checked before use.

HOW: CaptionBlock is a dataclass holding start/end seconds and the text
lines of one displayed caption. Dict input is validated against
INTERNAL_FORMAT_SCHEMA with jsonschema, then converted block by block.

RULES:
- All times are float seconds since midnight
- List order is display order; overlapping ranges are legal and preserved
- Blocks produced by the parser always have at least one line
- Dict shape is {"start": number, "end": number, "lines": [str, ...]}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Union

import jsonschema

from scc_converter.core.errors import InternalFormatError


@dataclass
class CaptionBlock:
    """One displayed caption event.

    Attributes:
        start: Start time in seconds.
        end: End time in seconds.
        lines: Text lines, top to bottom.
    """

    start: float
    end: float
    lines: list[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "end": self.end, "lines": list(self.lines)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CaptionBlock":
        return cls(
            start=float(data["start"]),
            end=float(data["end"]),
            lines=[str(line) for line in data["lines"]],
        )


InternalFormat = List[CaptionBlock]


INTERNAL_FORMAT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Internal caption format",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["start", "end", "lines"],
        "properties": {
            "start": {"type": "number", "minimum": 0},
            "end": {"type": "number", "minimum": 0},
            "lines": {"type": "array", "items": {"type": "string"}},
        },
    },
}


def validate_internal_format(data: Any) -> None:
    """Check dict-shaped internal-format data against the schema.

    Raises:
        InternalFormatError: If the data does not match
            INTERNAL_FORMAT_SCHEMA. The jsonschema error is chained.
    """
    try:
        jsonschema.validate(instance=data, schema=INTERNAL_FORMAT_SCHEMA)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise InternalFormatError(
            "Invalid internal format at {}: {}".format(location, exc.message)
        ) from exc


def blocks_from_dicts(data: List[Dict[str, Any]], validate: bool = True) -> InternalFormat:
    """Build CaptionBlocks from dict-shaped internal-format data."""
    if validate:
        validate_internal_format(data)
    return [CaptionBlock.from_dict(item) for item in data]


def coerce_blocks(
    internal: Iterable[Union[CaptionBlock, Dict[str, Any]]],
    validate: bool = True,
) -> InternalFormat:
    """Accept a mix of CaptionBlocks and dicts; return CaptionBlocks only.

    Dicts are schema-checked (when ``validate`` is true) before conversion;
    CaptionBlock instances are passed through unchanged.
    """
    items = list(internal)
    dicts = [item for item in items if not isinstance(item, CaptionBlock)]
    if validate and dicts:
        validate_internal_format(dicts)

    blocks: InternalFormat = []
    for item in items:
        if isinstance(item, CaptionBlock):
            blocks.append(item)
        else:
            blocks.append(CaptionBlock.from_dict(item))
    return blocks
