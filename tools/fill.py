"""Generate codec fixtures by running the test suite with fixture recording enabled."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tools.config import ROOT, ToolConfig  # noqa: E402


def fill_command(config: ToolConfig) -> list[str]:
    return [
        sys.executable,
        "-m",
        "pytest",
        str(ROOT / "tests"),
        "-q",
        "--output",
        str(config.fixtures_dir),
    ]


def main() -> int:
    config = ToolConfig.from_env()
    env = dict(os.environ, PYTHONPATH=config.pythonpath())
    cmd = fill_command(config)
    print("Running:", " ".join(cmd))
    return subprocess.call(cmd, env=env, cwd=str(ROOT))


if __name__ == "__main__":
    raise SystemExit(main())
