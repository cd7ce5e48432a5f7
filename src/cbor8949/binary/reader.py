from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from .codecs.bitcursor import Bits, BitUnderrun
from .codecs.major_type import MajorType, read_major_type
from .codecs.int_codec import decode_int
from .codecs.string_codec import decode_bytes, decode_string
from .codecs.list_codec import ListDecoder, decode_list

from cbor8949.models.errors import CborError, IncorrectType, PrematureEOF
from cbor8949.models.result import DecodeResult, Ok

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


class ParseError(ValueError):
    def __init__(self, error: CborError, *, offset: int | None = None):
        self.error = error
        self.offset = offset
        where = f" at bit {offset}" if offset is not None else ""
        super().__init__(f"CBOR decode failed{where}: {error.describe()}")


# -----------------------------
# Helpers
# -----------------------------

def _load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


def _as_bits(inp: Union[Bits, BytesLike]) -> Bits:
    return inp if isinstance(inp, Bits) else Bits(_load_bytes(inp))


def unwrap(result: DecodeResult[object], *, offset: int | None = None) -> Tuple[object, Bits]:
    """(value, remainder) of a successful decode, or ParseError."""
    if isinstance(result, Ok):
        return result.value, result.remainder
    raise ParseError(result, offset=offset)


# -----------------------------
# Generic item decode
# -----------------------------

_SCALARS = {
    MajorType.UNSIGNED_INT: decode_int,
    MajorType.NEGATIVE_INT: decode_int,
    MajorType.BYTE_STRING: decode_bytes,
    MajorType.TEXT_STRING: decode_string,
}


def _decode_head(bits: Bits) -> DecodeResult[object] | ListDecoder:
    """A scalar, or the ListDecoder of an array whose elements are still unread."""
    try:
        tag, _ = read_major_type(bits)
    except BitUnderrun:
        return PrematureEOF()
    if tag == MajorType.ARRAY:
        return decode_list(bits, decode_item)
    decoder = _SCALARS.get(tag)
    if decoder is None:
        return IncorrectType(major_type=tag)
    return decoder(bits)


def decode_item(bits: Bits) -> DecodeResult[object]:
    """
    Decode one item of any supported major type (0..4), arrays included
    and fully materialised. Maps, tags and simple values give IncorrectType.

    Nested arrays are tracked on an explicit stack, so nesting depth is
    bounded only by the input length.
    """
    frames: list[tuple[int, list]] = []   # (declared count, values so far), innermost last
    cursor = bits
    while True:
        result = _decode_head(cursor)
        if isinstance(result, CborError):
            return result
        if isinstance(result, ListDecoder):
            if result.count:
                frames.append((result.count, []))
                cursor = result.cursor
                continue
            result = Ok(value=[], remainder=result.cursor)

        # hand the finished item to the enclosing arrays, closing full ones
        while frames:
            count, values = frames[-1]
            values.append(result.value)
            if len(values) < count:
                break
            frames.pop()
            result = Ok(value=values, remainder=result.remainder)

        if not frames:
            return result
        cursor = result.remainder


# -----------------------------
# CBOR sequences (RFC 8742)
# -----------------------------

def iter_items(
    data: Union[Bits, BytesLike],
    *,
    max_items: Optional[int] = None,
) -> Iterator[DecodeResult[object]]:
    """
    Stream back-to-back top-level items. Stops after the first error,
    after `max_items`, or when less than one byte is left.
    """
    bits = _as_bits(data)
    emitted = 0
    while len(bits) >= 8:
        if max_items is not None and emitted >= max_items:
            return
        result = decode_item(bits)
        yield result
        emitted += 1
        if not isinstance(result, Ok):
            return
        bits = result.remainder


def summarize_file(
    data: Union[Bits, BytesLike],
    max_items: Optional[int] = None,
) -> Tuple[int, int]:
    """
    Returns (items, bytes_consumed) for the leading run of decodable items.
    Raises ParseError on the first malformed item.
    """
    bits = _as_bits(data)
    items = 0
    consumed = 0
    for result in iter_items(bits, max_items=max_items):
        _, rest = unwrap(result, offset=consumed)
        consumed = rest.tell() - bits.tell()
        items += 1
    return items, consumed // 8
