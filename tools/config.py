"""
Environment settings shared by the fixture and decoding tools.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

_TRUTHY = ("true", "1", "yes")


@dataclass
class ToolConfig:
    """Where fixtures live and how reports are printed."""
    fixtures_dir: Path = field(default_factory=lambda: ROOT / "fixtures")
    output_format: str = "yaml"
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "ToolConfig":
        """Load configuration from ENGINE_CODEC_* environment variables."""
        config = cls()

        fixtures = os.environ.get("ENGINE_CODEC_FIXTURES")
        if fixtures:
            config.fixtures_dir = Path(fixtures)

        config.output_format = os.environ.get("ENGINE_CODEC_FORMAT", "yaml").lower()
        config.verbose = os.environ.get("ENGINE_CODEC_VERBOSE", "").lower() in _TRUTHY

        return config

    @property
    def wire_vectors(self) -> Path:
        return self.fixtures_dir / "wire_format.json"

    @property
    def result_vectors(self) -> Path:
        return self.fixtures_dir / "submit_results.json"

    def pythonpath(self) -> str:
        return os.pathsep.join([str(ROOT / "src"), str(ROOT)])
