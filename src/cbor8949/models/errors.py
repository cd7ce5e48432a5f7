from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class CborError(BaseModel):
    """Base of the closed set of decode failures. Returned, never raised."""
    model_config = ConfigDict(frozen=True)

    def describe(self) -> str:
        return type(self).__name__


class PrematureEOF(CborError):
    """Not enough bits left for a tag, an argument extension or a payload."""


class InvalidMajorArg(CborError):
    # raw 5-bit additional info (28..30); the byte/text/array decoders
    # also report a wrong 3-bit major type through this kind
    x: int = Field(..., ge=0, le=31)

    def describe(self) -> str:
        return f"InvalidMajorArg({self.x})"


class IncorrectType(CborError):
    major_type: int = Field(..., ge=0, le=7)

    def describe(self) -> str:
        return f"IncorrectType({self.major_type})"


class MalformedUTF8(CborError):
    pass
