from __future__ import annotations
from typing import Generic, TypeVar, Union
from pydantic import BaseModel, ConfigDict
from cbor8949.binary.codecs.bitcursor import Bits
from .errors import CborError

T = TypeVar("T")


class Ok(BaseModel, Generic[T]):
    """A decoded value and the unconsumed remainder of the input."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T
    remainder: Bits


DecodeResult = Union[Ok[T], CborError]
