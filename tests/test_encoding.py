"""Primitive Borsh encoding: integers, fixed arrays, byte vectors, strings, options."""

from __future__ import annotations

import pytest

from engine_codec.config import U64_MAX
from engine_codec.encoding import (
    Reader,
    Writer,
    read_fixed_bytes,
    read_optional,
    read_string,
    read_vec_u8,
    write_fixed_bytes,
    write_optional,
    write_string,
    write_vec_u8,
)
from engine_codec.errors import CodecError, ErrorCode


def _writer() -> Writer:
    return Writer(bytearray())


def test_integers_are_little_endian() -> None:
    w = _writer()
    w.write_u8(0xAB)
    w.write_u32(0x01020304)
    w.write_u64(0x0102030405060708)
    assert w.getvalue() == bytes.fromhex("ab" "04030201" "0807060504030201")

    r = Reader(w.getvalue())
    assert r.read_u8() == 0xAB
    assert r.read_u32() == 0x01020304
    assert r.read_u64() == 0x0102030405060708
    assert r.remaining == 0


def test_u64_max_fits() -> None:
    w = _writer()
    w.write_u64(U64_MAX)
    assert w.getvalue() == b"\xff" * 8


@pytest.mark.parametrize("value", [U64_MAX + 1, 2**128, -1])
def test_u64_out_of_range(value: int) -> None:
    with pytest.raises(CodecError) as exc:
        _writer().write_u64(value)
    assert exc.value.code == ErrorCode.INTEGER_OVERFLOW


def test_u8_out_of_range() -> None:
    with pytest.raises(CodecError) as exc:
        _writer().write_u8(256)
    assert exc.value.code == ErrorCode.INTEGER_OVERFLOW


@pytest.mark.parametrize("value", [True, False])
def test_integer_rejects_bool(value: bool) -> None:
    with pytest.raises(CodecError) as exc:
        _writer().write_u64(value)
    assert exc.value.code == ErrorCode.INVALID_TYPE


def test_integer_rejects_non_int() -> None:
    with pytest.raises(CodecError) as exc:
        _writer().write_u64("5")
    assert exc.value.code == ErrorCode.INVALID_TYPE


@pytest.mark.parametrize("size", [20, 32, 64])
def test_fixed_bytes_exact_width(size: int) -> None:
    w = _writer()
    write_fixed_bytes(w, "field", bytes(range(size)), size)
    assert w.getvalue() == bytes(range(size))
    assert read_fixed_bytes(Reader(w.getvalue()), "field", size) == bytes(range(size))


@pytest.mark.parametrize("size", [20, 32, 64])
@pytest.mark.parametrize("delta", [-1, 1])
def test_fixed_bytes_width_mismatch(size: int, delta: int) -> None:
    with pytest.raises(CodecError) as exc:
        write_fixed_bytes(_writer(), "field", b"\x01" * (size + delta), size)
    assert exc.value.code == ErrorCode.WIDTH_MISMATCH


def test_fixed_bytes_short_read() -> None:
    with pytest.raises(CodecError) as exc:
        read_fixed_bytes(Reader(b"\x00" * 19), "address", 20)
    assert exc.value.code == ErrorCode.UNEXPECTED_END


def test_fixed_bytes_rejects_str() -> None:
    with pytest.raises(CodecError) as exc:
        write_fixed_bytes(_writer(), "field", "ab" * 10, 20)
    assert exc.value.code == ErrorCode.INVALID_TYPE


def test_vec_u8_length_prefix() -> None:
    w = _writer()
    write_vec_u8(w, "data", b"\xde\xad\xbe\xef")
    assert w.getvalue() == b"\x04\x00\x00\x00\xde\xad\xbe\xef"
    assert read_vec_u8(Reader(w.getvalue()), "data") == b"\xde\xad\xbe\xef"


def test_vec_u8_empty() -> None:
    w = _writer()
    write_vec_u8(w, "data", b"")
    assert w.getvalue() == b"\x00\x00\x00\x00"


def test_vec_u8_truncated_payload() -> None:
    with pytest.raises(CodecError) as exc:
        read_vec_u8(Reader(b"\x05\x00\x00\x00abc"), "data")
    assert exc.value.code == ErrorCode.UNEXPECTED_END


def test_vec_u8_truncated_prefix() -> None:
    with pytest.raises(CodecError) as exc:
        read_vec_u8(Reader(b"\x05\x00"), "data")
    assert exc.value.code == ErrorCode.UNEXPECTED_END


def test_string_utf8() -> None:
    w = _writer()
    write_string(w, "name", "Ether Ξ")
    encoded = "Ether Ξ".encode("utf-8")
    assert w.getvalue() == len(encoded).to_bytes(4, "little") + encoded
    assert read_string(Reader(w.getvalue()), "name") == "Ether Ξ"


def test_string_invalid_utf8_on_decode() -> None:
    with pytest.raises(CodecError) as exc:
        read_string(Reader(b"\x02\x00\x00\x00\xc3\x28"), "name")
    assert exc.value.code == ErrorCode.INVALID_UTF8


def test_string_lone_surrogate_on_encode() -> None:
    with pytest.raises(CodecError) as exc:
        write_string(_writer(), "name", "\ud800")
    assert exc.value.code == ErrorCode.INVALID_UTF8


def test_optional_none_and_some() -> None:
    w = _writer()
    write_optional(w, None, lambda ww, v: ww.write_u8(v))
    write_optional(w, 9, lambda ww, v: ww.write_u8(v))
    assert w.getvalue() == b"\x00\x01\x09"

    r = Reader(w.getvalue())
    assert read_optional(r, "opt", lambda rr: rr.read_u8()) is None
    assert read_optional(r, "opt", lambda rr: rr.read_u8()) == 9


def test_optional_bad_presence_byte() -> None:
    with pytest.raises(CodecError) as exc:
        read_optional(Reader(b"\x02\x09"), "opt", lambda rr: rr.read_u8())
    assert exc.value.code == ErrorCode.UNKNOWN_VARIANT


def test_reader_trailing_bytes() -> None:
    r = Reader(b"\x01\x02")
    r.read_u8()
    with pytest.raises(CodecError) as exc:
        r.expect_end()
    assert exc.value.code == ErrorCode.TRAILING_BYTES


def test_error_string_format() -> None:
    error = CodecError(ErrorCode.UNEXPECTED_END, "boom")
    assert str(error) == "UNEXPECTED_END(0x0200): boom"
    assert ErrorCode.UNEXPECTED_END.category.name == "DECODE"


def test_every_error_code_has_a_category() -> None:
    for code in ErrorCode:
        assert code.category.name in ("ENCODE", "DECODE", "INTERNAL")
    assert ErrorCode.INVALID_VERSION.category.name == "DECODE"
