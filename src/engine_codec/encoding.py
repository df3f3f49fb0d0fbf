"""Borsh primitive encoding: little-endian integers, fixed arrays, vectors, strings, options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from .config import U8_MAX, U32_MAX, U64_MAX
from .errors import CodecError, ErrorCode

T = TypeVar("T")

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _check_uint(name: str, value: int, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CodecError(ErrorCode.INVALID_TYPE, f"{name} must be int, got {type(value).__name__}")
    if value < 0 or value > maximum:
        raise CodecError(ErrorCode.INTEGER_OVERFLOW, f"{name} {value} does not fit {maximum.bit_length()} bits")
    return value


def _as_bytes(name: str, value) -> bytes:
    if not isinstance(value, _BYTES_LIKE):
        raise CodecError(ErrorCode.INVALID_TYPE, f"{name} must be bytes, got {type(value).__name__}")
    return bytes(value)


@dataclass
class Writer:
    buf: bytearray

    def write_u8(self, v: int, name: str = "u8") -> None:
        self.buf.extend(_check_uint(name, v, U8_MAX).to_bytes(1, "little"))

    def write_u32(self, v: int, name: str = "u32") -> None:
        self.buf.extend(_check_uint(name, v, U32_MAX).to_bytes(4, "little"))

    def write_u64(self, v: int, name: str = "u64") -> None:
        self.buf.extend(_check_uint(name, v, U64_MAX).to_bytes(8, "little"))

    def write_bytes(self, b: bytes) -> None:
        self.buf.extend(b)

    def getvalue(self) -> bytes:
        return bytes(self.buf)


@dataclass
class Reader:
    """Cursor over an in-memory buffer. Every read advances ``pos``."""

    data: bytes
    pos: int = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.pos

    def read_bytes(self, size: int, name: str = "bytes") -> bytes:
        if size > self.remaining:
            raise CodecError(
                ErrorCode.UNEXPECTED_END,
                f"{name} needs {size} bytes at offset {self.pos}, {self.remaining} left",
            )
        out = self.data[self.pos:self.pos + size]
        self.pos += size
        return out

    def read_u8(self, name: str = "u8") -> int:
        return self.read_bytes(1, name)[0]

    def read_u32(self, name: str = "u32") -> int:
        return int.from_bytes(self.read_bytes(4, name), "little")

    def read_u64(self, name: str = "u64") -> int:
        return int.from_bytes(self.read_bytes(8, name), "little")

    def expect_end(self) -> None:
        if self.remaining:
            raise CodecError(
                ErrorCode.TRAILING_BYTES,
                f"unexpected {self.remaining} bytes after deserialized data",
            )


def _expect_len(name: str, value: bytes, size: int) -> None:
    if len(value) != size:
        raise CodecError(ErrorCode.WIDTH_MISMATCH, f"{name} must be {size} bytes, got {len(value)}")


def write_fixed_bytes(w: Writer, name: str, value: bytes, size: int) -> None:
    data = _as_bytes(name, value)
    _expect_len(name, data, size)
    w.write_bytes(data)


def read_fixed_bytes(r: Reader, name: str, size: int) -> bytes:
    return r.read_bytes(size, name)


def write_vec_u8(w: Writer, name: str, value: bytes) -> None:
    data = _as_bytes(name, value)
    w.write_u32(len(data), f"{name} length")
    w.write_bytes(data)


def read_vec_u8(r: Reader, name: str) -> bytes:
    size = r.read_u32(f"{name} length")
    return r.read_bytes(size, name)


def write_string(w: Writer, name: str, value: str) -> None:
    if not isinstance(value, str):
        raise CodecError(ErrorCode.INVALID_TYPE, f"{name} must be str, got {type(value).__name__}")
    try:
        data = value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise CodecError(ErrorCode.INVALID_UTF8, f"{name} is not valid UTF-8: {exc.reason}") from exc
    write_vec_u8(w, name, data)


def read_string(r: Reader, name: str) -> str:
    data = read_vec_u8(r, name)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CodecError(ErrorCode.INVALID_UTF8, f"{name} is not valid UTF-8: {exc.reason}") from exc


def write_optional(w: Writer, value: Optional[T], write_item: Callable[[Writer, T], None]) -> None:
    if value is None:
        w.write_u8(0)
        return
    w.write_u8(1)
    write_item(w, value)


def read_optional(r: Reader, name: str, read_item: Callable[[Reader], T]) -> Optional[T]:
    flag = r.read_u8(f"{name} presence")
    if flag == 0:
        return None
    if flag != 1:
        raise CodecError(ErrorCode.UNKNOWN_VARIANT, f"{name} presence byte must be 0 or 1, got {flag}")
    return read_item(r)
