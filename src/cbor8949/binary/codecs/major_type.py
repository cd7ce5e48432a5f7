from __future__ import annotations
from .bitcursor import Bits


class MajorType:
    UNSIGNED_INT = 0
    NEGATIVE_INT = 1
    BYTE_STRING = 2
    TEXT_STRING = 3
    ARRAY = 4
    # never matched by any decoder here
    MAP = 5
    TAG = 6
    SIMPLE_FLOAT = 7


MAJOR_TYPE_BITS = 3
ADDITIONAL_INFO_BITS = 5


def read_major_type(bits: Bits) -> tuple[int, Bits]:
    """
    Leading 3-bit major type tag (RFC 8949 §3.1).
    Raises BitUnderrun when fewer than 3 bits remain.
    """
    return bits.take(MAJOR_TYPE_BITS)
