"""Helpers to serialize/deserialize codec fixtures as JSON."""

from __future__ import annotations

from typing import Any, Optional

from engine_codec.results import ExecutionOutcome, LegacyStatusFalse
from engine_codec.schema import ENUM, is_byte_vec, is_fixed_array, is_option, is_vec
from engine_codec.types import (
    SCHEMA,
    CallTooDeep,
    OutOfFund,
    OutOfGas,
    OutOfOffset,
    RevertStatus,
)

TYPES_BY_NAME: dict[str, type] = {cls.__name__: cls for cls in SCHEMA}

ERROR_NAMES: dict[type, str] = {
    RevertStatus: "Revert",
    OutOfGas: "OutOfGas",
    OutOfFund: "OutOfFund",
    OutOfOffset: "OutOfOffset",
    CallTooDeep: "CallTooDeep",
    LegacyStatusFalse: "LegacyStatusFalse",
}


def _hex_to_bytes(v: str) -> bytes:
    return bytes.fromhex(v[2:] if v.startswith(("0x", "0X")) else v)


def _bytes_to_hex(v: bytes) -> str:
    return bytes(v).hex()


def value_to_json(value: Any, cls: Optional[type] = None) -> dict[str, Any]:
    cls = cls or type(value)
    descriptor = SCHEMA.describe(cls)
    if descriptor["kind"] == ENUM:
        for name, variant in descriptor["values"]:
            if type(value) is variant:
                out: dict[str, Any] = {"variant": name}
                out.update(value_to_json(value, variant))
                return out
        raise ValueError(f"{type(value).__name__} is not a variant of {cls.__name__}")
    return {
        name: _field_to_json(getattr(value, name), field_type)
        for name, field_type in descriptor["fields"]
    }


def _field_to_json(value: Any, field_type: Any) -> Any:
    if value is None:
        return None
    if isinstance(field_type, str):
        return value
    if is_fixed_array(field_type) or is_byte_vec(field_type):
        return _bytes_to_hex(value)
    if is_vec(field_type):
        return [_field_to_json(item, field_type[0]) for item in value]
    if is_option(field_type):
        return _field_to_json(value, field_type["type"])
    return value_to_json(value, field_type)


def value_from_json(cls: type, data: dict[str, Any]) -> Any:
    descriptor = SCHEMA.describe(cls)
    if descriptor["kind"] == ENUM:
        variants = dict(descriptor["values"])
        variant = variants.get(data.get("variant"))
        if variant is None:
            raise ValueError(f"unknown {cls.__name__} variant: {data.get('variant')}")
        return value_from_json(variant, data)
    return cls(**{
        name: _field_from_json(data[name], field_type)
        for name, field_type in descriptor["fields"]
    })


def _field_from_json(value: Any, field_type: Any) -> Any:
    if value is None:
        return None
    if field_type == "string":
        return str(value)
    if isinstance(field_type, str):
        return int(value)
    if is_fixed_array(field_type) or is_byte_vec(field_type):
        return _hex_to_bytes(value)
    if is_vec(field_type):
        return [_field_from_json(item, field_type[0]) for item in value]
    if is_option(field_type):
        return _field_from_json(value, field_type["type"])
    return value_from_json(field_type, value)


def result_to_json(result: Any) -> dict[str, Any]:
    out: dict[str, Any] = {"kind": type(result).__name__}
    out.update(value_to_json(result))
    return out


def outcome_to_json(outcome: ExecutionOutcome) -> dict[str, Any]:
    if outcome.ok:
        return {"ok": True, "output": _bytes_to_hex(outcome.output)}
    out: dict[str, Any] = {"ok": False, "error": ERROR_NAMES[type(outcome.error)]}
    if isinstance(outcome.error, RevertStatus):
        out["output"] = _bytes_to_hex(outcome.error.output)
    return out
