"""Engine codec error codes and exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ErrorCategory(IntEnum):
    ENCODE = 0x01
    DECODE = 0x02
    INTERNAL = 0xFF


class ErrorCode(IntEnum):
    # Encode
    WIDTH_MISMATCH = 0x0100
    INTEGER_OVERFLOW = 0x0101
    INVALID_TYPE = 0x0102

    # Decode
    UNEXPECTED_END = 0x0200
    INVALID_UTF8 = 0x0201
    UNKNOWN_VARIANT = 0x0202
    TRAILING_BYTES = 0x0203
    INVALID_VERSION = 0x0204

    # Internal
    INTERNAL_ERROR = 0xFF00

    @property
    def category(self) -> ErrorCategory:
        return ErrorCategory(self.value >> 8)


@dataclass(frozen=True)
class CodecError(Exception):
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.name}({self.code:#06x}): {self.message}"


# Allow Python's Exception machinery to set __traceback__/__context__/__cause__
# while keeping dataclass fields frozen (Python 3.13 contextlib compat).
_EXCEPTION_ATTRS = frozenset(("__traceback__", "__context__", "__cause__"))
_frozen_setattr = CodecError.__setattr__


def _codec_error_setattr(self: CodecError, name: str, value: object) -> None:
    if name in _EXCEPTION_ATTRS:
        object.__setattr__(self, name, value)
    else:
        _frozen_setattr(self, name, value)


CodecError.__setattr__ = _codec_error_setattr  # type: ignore[method-assign]
