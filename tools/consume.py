"""Consume generated fixtures and validate them against the codec."""

from __future__ import annotations

import json
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from engine_codec.errors import CodecError  # noqa: E402
from engine_codec.results import decode_submit_result  # noqa: E402
from tools.config import ToolConfig  # noqa: E402
from tools.fixtures_io import (  # noqa: E402
    TYPES_BY_NAME,
    outcome_to_json,
    result_to_json,
    value_from_json,
)


def _check_wire_vectors(path: Path) -> list[str]:
    failures: list[str] = []
    data = json.loads(path.read_text())
    for vec in data.get("vectors", []):
        cls = TYPES_BY_NAME.get(vec["type"])
        if cls is None:
            failures.append(f"{vec['name']}: unknown_type")
            continue
        value = value_from_json(cls, vec["value"])
        try:
            encoded = value.encode()
        except CodecError as exc:
            failures.append(f"{vec['name']}: encode_error {exc}")
            continue
        if encoded.hex() != vec["expected_hex"]:
            failures.append(f"{vec['name']}: wire_mismatch")
            continue
        if cls.decode(encoded) != value:
            failures.append(f"{vec['name']}: roundtrip_mismatch")
    return failures


def _check_result_vectors(path: Path) -> list[str]:
    failures: list[str] = []
    data = json.loads(path.read_text())
    for vec in data.get("vectors", []):
        try:
            decoded = decode_submit_result(bytes.fromhex(vec["input_hex"]))
        except CodecError as exc:
            failures.append(f"{vec['name']}: decode_error {exc}")
            continue
        expected = vec["expected"]
        if result_to_json(decoded.result) != expected["result"]:
            failures.append(f"{vec['name']}: result_mismatch")
        elif outcome_to_json(decoded.output()) != expected["outcome"]:
            failures.append(f"{vec['name']}: outcome_mismatch")
    return failures


def main() -> None:
    config = ToolConfig.from_env()

    failures: list[str] = []

    wire = config.wire_vectors
    if wire.exists():
        failures.extend(_check_wire_vectors(wire))

    results = config.result_vectors
    if results.exists():
        failures.extend(_check_result_vectors(results))

    if failures:
        for f in failures:
            print("FAIL", f)
        raise SystemExit(1)

    print("All fixtures passed")


if __name__ == "__main__":
    main()
