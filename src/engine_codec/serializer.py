"""Schema-driven Borsh serializer and deserializer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, Type, TypeVar

from .encoding import (
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
from .errors import CodecError, ErrorCode
from .schema import ENUM, STRUCT, SchemaRegistry, is_byte_vec, is_fixed_array, is_option, is_vec

T = TypeVar("T")


class BinarySerializer:
    def __init__(self, schema: SchemaRegistry):
        self.schema = schema

    def serialize(self, value: Any, cls: Optional[type] = None) -> bytes:
        w = Writer(bytearray())
        self.serialize_struct(w, value, cls or type(value))
        return w.getvalue()

    def serialize_struct(self, w: Writer, value: Any, cls: type) -> None:
        descriptor = self.schema.describe(cls)
        if descriptor["kind"] == ENUM:
            self._serialize_enum(w, value, cls, descriptor)
            return
        if not isinstance(value, cls):
            raise CodecError(
                ErrorCode.INVALID_TYPE, f"expected {cls.__name__}, got {type(value).__name__}"
            )
        for name, field_type in descriptor["fields"]:
            self.serialize_field(w, f"{cls.__name__}.{name}", getattr(value, name), field_type)

    def _serialize_enum(self, w: Writer, value: Any, cls: type, descriptor) -> None:
        for index, (_, variant) in enumerate(descriptor["values"]):
            if type(value) is variant:
                w.write_u8(index)
                self.serialize_struct(w, value, variant)
                return
        raise CodecError(
            ErrorCode.INVALID_TYPE, f"{type(value).__name__} is not a variant of {cls.__name__}"
        )

    def serialize_field(self, w: Writer, name: str, value: Any, field_type: Any) -> None:
        if field_type == "u8":
            w.write_u8(value, name)
        elif field_type == "u32":
            w.write_u32(value, name)
        elif field_type == "u64":
            w.write_u64(value, name)
        elif field_type == "string":
            write_string(w, name, value)
        elif is_fixed_array(field_type):
            write_fixed_bytes(w, name, value, field_type[0])
        elif is_byte_vec(field_type):
            write_vec_u8(w, name, value)
        elif is_vec(field_type):
            if not isinstance(value, (list, tuple)):
                raise CodecError(ErrorCode.INVALID_TYPE, f"{name} must be a list")
            w.write_u32(len(value), f"{name} length")
            for item in value:
                self.serialize_field(w, name, item, field_type[0])
        elif is_option(field_type):
            write_optional(
                w, value, lambda ww, v: self.serialize_field(ww, name, v, field_type["type"])
            )
        elif isinstance(field_type, type):
            self.serialize_struct(w, value, field_type)
        else:
            raise CodecError(ErrorCode.INTERNAL_ERROR, f"{name}: unsupported field type {field_type!r}")


class BinaryDeserializer:
    def __init__(self, schema: SchemaRegistry):
        self.schema = schema

    def deserialize(self, cls: Type[T], data: bytes) -> T:
        """Decode ``data`` as ``cls``; the whole buffer must be consumed."""
        r = Reader(bytes(data))
        value = self.deserialize_struct(r, cls)
        r.expect_end()
        return value

    def deserialize_struct(self, r: Reader, cls: type) -> Any:
        descriptor = self.schema.describe(cls)
        if descriptor["kind"] == ENUM:
            values = descriptor["values"]
            index = r.read_u8(f"{cls.__name__} discriminant")
            if index >= len(values):
                raise CodecError(
                    ErrorCode.UNKNOWN_VARIANT,
                    f"{cls.__name__} discriminant {index} out of range ({len(values)} variants)",
                )
            return self.deserialize_struct(r, values[index][1])
        if descriptor["kind"] != STRUCT:
            raise CodecError(ErrorCode.INTERNAL_ERROR, f"{cls.__name__}: unknown kind")
        kwargs = {}
        for name, field_type in descriptor["fields"]:
            kwargs[name] = self.deserialize_field(r, f"{cls.__name__}.{name}", field_type)
        return cls(**kwargs)

    def deserialize_field(self, r: Reader, name: str, field_type: Any) -> Any:
        if field_type == "u8":
            return r.read_u8(name)
        if field_type == "u32":
            return r.read_u32(name)
        if field_type == "u64":
            return r.read_u64(name)
        if field_type == "string":
            return read_string(r, name)
        if is_fixed_array(field_type):
            return read_fixed_bytes(r, name, field_type[0])
        if is_byte_vec(field_type):
            return read_vec_u8(r, name)
        if is_vec(field_type):
            count = r.read_u32(f"{name} length")
            return [self.deserialize_field(r, name, field_type[0]) for _ in range(count)]
        if is_option(field_type):
            return read_optional(
                r, name, lambda rr: self.deserialize_field(rr, name, field_type["type"])
            )
        if isinstance(field_type, type):
            return self.deserialize_struct(r, field_type)
        raise CodecError(ErrorCode.INTERNAL_ERROR, f"{name}: unsupported field type {field_type!r}")


@dataclass(frozen=True)
class DecodeAttempt(Generic[T]):
    """Outcome of a trial decode: exactly one of ``value`` / ``error`` is set."""

    value: Optional[T] = None
    error: Optional[CodecError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def serialize(schema: SchemaRegistry, value: Any, cls: Optional[type] = None) -> bytes:
    return BinarySerializer(schema).serialize(value, cls)


def deserialize(schema: SchemaRegistry, cls: Type[T], data: bytes) -> T:
    return BinaryDeserializer(schema).deserialize(cls, data)


def try_deserialize(schema: SchemaRegistry, cls: Type[T], data: bytes) -> DecodeAttempt[T]:
    try:
        return DecodeAttempt(value=deserialize(schema, cls, data))
    except CodecError as exc:
        return DecodeAttempt(error=exc)
