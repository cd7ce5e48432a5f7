from __future__ import annotations
from .bitcursor import Bits, BitUnderrun
from .major_type import MajorType, read_major_type
from .argument import decode_positive_int
from cbor8949.models.errors import InvalidMajorArg, MalformedUTF8, PrematureEOF
from cbor8949.models.result import DecodeResult, Ok


def _decode_payload(bits: Bits, major: int) -> DecodeResult[bytes]:
    """
    Length-prefixed payload shared by byte and text strings:
    tag, byte count, then exactly that many whole bytes.
    A tag other than `major` is reported as InvalidMajorArg(tag).
    """
    try:
        tag, rest = read_major_type(bits)
    except BitUnderrun:
        return PrematureEOF()
    if tag != major:
        return InvalidMajorArg(x=tag)

    count = decode_positive_int(rest)
    if not isinstance(count, Ok):
        return count

    try:
        payload, rest = count.remainder.take_bytes(count.value)
    except BitUnderrun:
        return PrematureEOF()
    return Ok(value=payload, remainder=rest)


def decode_bytes(bits: Bits) -> DecodeResult[bytes]:
    return _decode_payload(bits, MajorType.BYTE_STRING)


def decode_string(bits: Bits) -> DecodeResult[str]:
    raw = _decode_payload(bits, MajorType.TEXT_STRING)
    if not isinstance(raw, Ok):
        return raw
    try:
        text = raw.value.decode("utf-8")
    except UnicodeDecodeError:
        return MalformedUTF8()
    return Ok(value=text, remainder=raw.remainder)
