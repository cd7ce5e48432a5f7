from __future__ import annotations
from typing import Any
from pydantic import BaseModel, Field, field_serializer


def _jsonable(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return {"hex": bytes(value).hex()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def nesting_depth(value: Any) -> int:
    """Array nesting depth of a decoded value (scalars are 0), walked level by level."""
    depth = 0
    level = [value]
    while True:
        arrays = [v for v in level if isinstance(v, list)]
        if not arrays:
            return depth
        depth += 1
        level = [v for a in arrays for v in a]


class DecodedItem(BaseModel):
    index: int = Field(..., ge=0)
    major_type: int = Field(..., ge=0, le=4)
    offset: int = Field(..., ge=0)   # byte offset of the item head
    value: Any

    @field_serializer("value")
    def _serialize_value(self, value: Any) -> Any:
        return _jsonable(value)
