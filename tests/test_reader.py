import pytest

from cbor8949.binary.codecs.bitcursor import Bits
from cbor8949.binary.reader import ParseError, decode_item, iter_items, summarize_file, unwrap
from cbor8949.models.errors import IncorrectType, InvalidMajorArg, MalformedUTF8, PrematureEOF
from cbor8949.models.result import Ok

# [1, [2, 3], "a", h'ff', negative raw 4]
NESTED = b"\x85\x01\x82\x02\x03\x61a\x41\xFF\x24"


def test_decode_item_nested_array():
    r = decode_item(Bits(NESTED + b"\x00"))
    assert r == Ok(value=[1, [2, 3], "a", b"\xFF", -3], remainder=Bits(b"\x00"))


def test_decode_item_propagates_inner_error():
    assert decode_item(Bits(b"\x82\x01\x82\x61\xFF")) == MalformedUTF8()
    assert decode_item(Bits(b"\x82\x01")) == PrematureEOF()


@pytest.mark.parametrize("head, major", [(b"\xA0", 5), (b"\xC0", 6), (b"\xF6", 7)])
def test_decode_item_rejects_unsupported_major_types(head, major):
    assert decode_item(Bits(head)) == IncorrectType(major_type=major)


def test_iter_items_sequence():
    out = list(iter_items(b"\x01\x62hi\x80"))
    assert [r.value for r in out] == [1, "hi", []]


def test_iter_items_stops_after_error():
    out = list(iter_items(b"\x01\xA0\x02"))
    assert out[0].value == 1
    assert out[1] == IncorrectType(major_type=5)
    assert len(out) == 2


def test_iter_items_limit():
    assert len(list(iter_items(b"\x01\x02\x03", max_items=2))) == 2


def test_summarize_file_from_path(tmp_path):
    p = tmp_path / "seq.cbor"
    p.write_bytes(NESTED + b"\x18\x2A")
    assert summarize_file(p) == (2, len(NESTED) + 2)
    assert summarize_file(str(p), max_items=1) == (1, len(NESTED))


def test_summarize_file_raises_on_malformed():
    with pytest.raises(ParseError) as ei:
        summarize_file(b"\x01\x7C")
    assert ei.value.error.x == 28
    assert "InvalidMajorArg(28)" in str(ei.value)


def test_unwrap():
    value, rest = unwrap(decode_item(Bits(b"\x17\x01")))
    assert value == 23 and rest == Bits(b"\x01")
    with pytest.raises(ValueError):
        unwrap(PrematureEOF())


def test_decode_item_mixed_nesting():
    r = decode_item(Bits(b"\x82\x82\x01\x80\x02\x17"))
    assert r == Ok(value=[[1, []], 2], remainder=Bits(b"\x17"))


def test_decode_item_deep_nesting_does_not_recurse():
    depth = 5000
    r = decode_item(Bits(b"\x81" * depth + b"\x00" + b"\x01"))
    assert isinstance(r, Ok)
    assert r.remainder == Bits(b"\x01")
    value = r.value
    for _ in range(depth):
        assert isinstance(value, list) and len(value) == 1
        value = value[0]
    assert value == 0


def test_decode_item_deep_nesting_errors_are_values():
    assert decode_item(Bits(b"\x81" * 5000)) == PrematureEOF()
    assert decode_item(Bits(b"\x81" * 5000 + b"\x7C")) == InvalidMajorArg(x=28)


def test_summarize_deeply_nested_item():
    assert summarize_file(b"\x81" * 5000 + b"\x00") == (1, 5001)
