from __future__ import annotations
from typing import Callable, Generic, Iterator, Optional, TypeVar
from .bitcursor import Bits, BitUnderrun
from .major_type import MajorType, read_major_type
from .argument import decode_positive_int
from cbor8949.models.errors import CborError, InvalidMajorArg, PrematureEOF
from cbor8949.models.result import DecodeResult, Ok

T = TypeVar("T")
ElementDecoder = Callable[[Bits], "DecodeResult[T]"]


class ListDecoder(Generic[T]):
    """
    Lazy, pull-based view over the elements of a CBOR array.

    Each ``next()`` runs the element decoder on the bits left by the
    previous element. At most ``count`` items are produced; an error is
    always the last one.
    """
    __slots__ = ("count", "_decode", "_remaining", "_cursor", "_failed")

    def __init__(self, count: int, cursor: Bits, decode: ElementDecoder):
        self.count = count
        self._decode = decode
        self._remaining = count
        self._cursor = cursor
        self._failed = False

    def __iter__(self) -> Iterator[DecodeResult[T]]:
        return self

    def __next__(self) -> DecodeResult[T]:
        if self._failed or self._remaining == 0:
            raise StopIteration
        result = self._decode(self._cursor)
        if not isinstance(result, Ok):
            # cursor stays frozen on the failing element
            self._failed = True
            return result
        self._remaining -= 1
        self._cursor = result.remainder
        return result

    @property
    def remaining(self) -> int:
        return 0 if self._failed else self._remaining

    @property
    def cursor(self) -> Bits:
        """Bits where the next element starts."""
        return self._cursor

    @property
    def remainder(self) -> Optional[Bits]:
        """Bits after the array, once every element decoded; None before that or after a failure."""
        if self._failed or self._remaining:
            return None
        return self._cursor


def decode_list(bits: Bits, decode: ElementDecoder) -> ListDecoder[T] | CborError:
    """
    Major type 4 array. Only the header (tag and element count) is read
    here; elements are decoded on demand by iterating the result.
    """
    try:
        tag, rest = read_major_type(bits)
    except BitUnderrun:
        return PrematureEOF()
    if tag != MajorType.ARRAY:
        return InvalidMajorArg(x=tag)

    count = decode_positive_int(rest)
    if not isinstance(count, Ok):
        return count
    return ListDecoder(count.value, count.remainder, decode)
