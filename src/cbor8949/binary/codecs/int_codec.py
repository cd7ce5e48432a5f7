from __future__ import annotations
from .bitcursor import Bits, BitUnderrun
from .major_type import MajorType, read_major_type
from .argument import decode_negative_int, decode_positive_int
from cbor8949.models.errors import IncorrectType, PrematureEOF
from cbor8949.models.result import DecodeResult


def decode_int(bits: Bits) -> DecodeResult[int]:
    """Major type 0 or 1 integer; any other tag is IncorrectType(tag)."""
    try:
        tag, rest = read_major_type(bits)
    except BitUnderrun:
        return PrematureEOF()

    if tag == MajorType.UNSIGNED_INT:
        return decode_positive_int(rest)
    if tag == MajorType.NEGATIVE_INT:
        return decode_negative_int(rest)
    return IncorrectType(major_type=tag)
