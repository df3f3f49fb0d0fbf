"""Render decoded `submit` results as YAML or JSON reports."""

from __future__ import annotations

import json
from typing import Any

import yaml

from engine_codec.results import SubmitResult
from tools.fixtures_io import outcome_to_json, result_to_json

FORMATS = ("yaml", "json")


class ReportDumper(yaml.SafeDumper):
    """Safe dumper that prints raw bytes as hex and never emits aliases."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def _bytes_representer(dumper: yaml.SafeDumper, data: bytes) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:str", data.hex())


ReportDumper.add_representer(bytes, _bytes_representer)


def build_report(decoded: SubmitResult) -> dict[str, Any]:
    return {
        "result": result_to_json(decoded.result),
        "outcome": outcome_to_json(decoded.output()),
    }


def render_report(report: dict[str, Any], output_format: str = "yaml") -> str:
    if output_format == "json":
        return json.dumps(report, indent=2) + "\n"
    if output_format != "yaml":
        raise ValueError(f"unknown report format: {output_format}")
    return yaml.dump(report, Dumper=ReportDumper, sort_keys=False, width=4096)
