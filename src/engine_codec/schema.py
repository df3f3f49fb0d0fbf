"""Declarative Borsh schema registry.

A schema maps each structured type to a descriptor, using the same table shape
as the nearcore Python serializer:

    {"kind": "struct", "fields": [[name, field_type], ...]}
    {"kind": "enum", "values": [[variant_name, variant_class], ...]}

Field types:

    "u8" | "u32" | "u64" | "string"     primitive
    [N]                                 fixed array of N bytes
    ["u8"]                              variable-length bytes
    [T]                                 vector of T (u32 count prefix)
    {"kind": "option", "type": T}       presence byte then T
    SomeClass                           nested struct or enum

Field order is wire order. Registries are frozen on construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Tuple

PRIMITIVES = frozenset({"u8", "u32", "u64", "string"})

STRUCT = "struct"
ENUM = "enum"
OPTION = "option"


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


def is_fixed_array(field_type: Any) -> bool:
    return isinstance(field_type, tuple) and len(field_type) == 1 and isinstance(field_type[0], int)


def is_byte_vec(field_type: Any) -> bool:
    return isinstance(field_type, tuple) and len(field_type) == 1 and field_type[0] == "u8"


def is_vec(field_type: Any) -> bool:
    return isinstance(field_type, tuple) and len(field_type) == 1


def is_option(field_type: Any) -> bool:
    return isinstance(field_type, Mapping) and field_type.get("kind") == OPTION


class SchemaRegistry(Mapping):
    """Immutable type -> descriptor table."""

    def __init__(self, entries: Iterable[Tuple[type, dict]]):
        table = {}
        for cls, descriptor in entries:
            if cls in table:
                raise ValueError(f"{cls.__name__} declared twice")
            table[cls] = _freeze(descriptor)
        self._table = MappingProxyType(table)
        for cls, descriptor in self._table.items():
            self._validate(cls, descriptor)

    def __getitem__(self, cls: type) -> Mapping:
        return self._table[cls]

    def __iter__(self) -> Iterator[type]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        names = ", ".join(cls.__name__ for cls in self._table)
        return f"SchemaRegistry({names})"

    def describe(self, cls: type) -> Mapping:
        try:
            return self._table[cls]
        except KeyError:
            raise KeyError(f"{getattr(cls, '__name__', cls)!r} is not declared in the schema") from None

    def _validate(self, cls: type, descriptor: Mapping) -> None:
        kind = descriptor.get("kind")
        if kind == STRUCT:
            seen = set()
            for name, field_type in descriptor["fields"]:
                if name in seen:
                    raise ValueError(f"{cls.__name__}.{name} declared twice")
                seen.add(name)
                self._validate_type(f"{cls.__name__}.{name}", field_type)
        elif kind == ENUM:
            values = descriptor["values"]
            if not values or len(values) > 256:
                raise ValueError(f"{cls.__name__} must have between 1 and 256 variants")
            for name, variant in values:
                if variant not in self._table:
                    raise ValueError(f"{cls.__name__}::{name} refers to undeclared {variant!r}")
        else:
            raise ValueError(f"{cls.__name__} has unknown schema kind {kind!r}")

    def _validate_type(self, where: str, field_type: Any) -> None:
        if isinstance(field_type, str):
            if field_type not in PRIMITIVES:
                raise ValueError(f"{where}: unknown primitive {field_type!r}")
            return
        if is_fixed_array(field_type):
            if field_type[0] <= 0:
                raise ValueError(f"{where}: fixed array width must be positive")
            return
        if is_vec(field_type):
            self._validate_type(where, field_type[0])
            return
        if is_option(field_type):
            self._validate_type(where, field_type["type"])
            return
        if isinstance(field_type, type):
            if field_type not in self._table:
                raise ValueError(f"{where}: {field_type.__name__} is not declared")
            return
        raise ValueError(f"{where}: unsupported field type {field_type!r}")
