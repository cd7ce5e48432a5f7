from __future__ import annotations
from typing import Callable
from .bitcursor import Bits, BitUnderrun
from .major_type import ADDITIONAL_INFO_BITS
from cbor8949.models.errors import InvalidMajorArg, PrematureEOF
from cbor8949.models.result import DecodeResult, Ok

# additional info -> number of big-endian extension bytes
EXTENSION_BYTES = {24: 1, 25: 2, 26: 4, 27: 8}
RESERVED_INFO = (28, 29, 30)
INDEFINITE_LENGTH = 31  # reported as PrematureEOF


def _decode_argument(bits: Bits, transform: Callable[[int], int]) -> DecodeResult[int]:
    """
    Parse the 5-bit additional information field and, for 24..27, the
    1/2/4/8 extension bytes that hold the real argument.
    """
    try:
        info, rest = bits.take(ADDITIONAL_INFO_BITS)
        if info < 24:
            return Ok(value=transform(info), remainder=rest)
        width = EXTENSION_BYTES.get(info)
        if width is not None:
            raw, rest = rest.take(width * 8)
            return Ok(value=transform(raw), remainder=rest)
    except BitUnderrun:
        return PrematureEOF()

    if info in RESERVED_INFO:
        return InvalidMajorArg(x=info)
    assert info == INDEFINITE_LENGTH
    # no break-terminated items; reported like a truncated head
    return PrematureEOF()


def decode_positive_int(bits: Bits) -> DecodeResult[int]:
    return _decode_argument(bits, lambda n: n)


def decode_negative_int(bits: Bits) -> DecodeResult[int]:
    """
    Same matching as decode_positive_int, value mapped through ``1 - n``.
    RFC 8949 reads a major type 1 argument n as ``-1 - n``; this decoder
    keeps ``1 - n`` so raw 0 decodes to 1.
    """
    return _decode_argument(bits, lambda n: 1 - n)
