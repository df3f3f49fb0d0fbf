"""Pytest hooks to generate codec fixtures (EEST-style)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from engine_codec.results import decode_submit_result
from tools.fixtures_io import outcome_to_json, result_to_json, value_to_json

_WIRE_VECTORS: list[dict[str, Any]] = []
_RESULT_VECTORS: list[dict[str, Any]] = []


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--output",
        action="store",
        default=None,
        help="Output directory for generated fixtures",
    )


@pytest.fixture
def wire_vector() -> Callable[[str, Any], bytes]:
    """Encode an argument structure, record the vector and return the bytes."""

    def _wire_vector(name: str, value: Any) -> bytes:
        encoded = value.encode()
        _WIRE_VECTORS.append(
            {
                "name": name,
                "type": type(value).__name__,
                "value": value_to_json(value),
                "expected_hex": encoded.hex(),
            }
        )
        return encoded

    return _wire_vector


@pytest.fixture
def result_vector() -> Callable[[str, bytes], Any]:
    """Decode a `submit` response, record the vector and return the result."""

    def _result_vector(name: str, data: bytes):
        decoded = decode_submit_result(data)
        _RESULT_VECTORS.append(
            {
                "name": name,
                "input_hex": bytes(data).hex(),
                "expected": {
                    "result": result_to_json(decoded.result),
                    "outcome": outcome_to_json(decoded.output()),
                },
            }
        )
        return decoded

    return _result_vector


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    output_dir = session.config.getoption("--output")
    if not output_dir:
        return

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    if _WIRE_VECTORS:
        (out / "wire_format.json").write_text(
            json.dumps({"vectors": _WIRE_VECTORS}, indent=2)
        )
    if _RESULT_VECTORS:
        (out / "submit_results.json").write_text(
            json.dumps({"vectors": _RESULT_VECTORS}, indent=2)
        )
