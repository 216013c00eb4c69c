"""
Application Settings

Defaults, environment overrides and YAML configuration files.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings."""

    # Where the report CSV files live / are generated
    data_dir: str = "results"
    # Where HTML reports and benchmark output are written
    output_dir: str = "output"

    # Timing harness
    benchmark_iterations: int = 100

    # HTTP API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    log_level: str = "INFO"

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir)

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            data_dir=os.getenv("FIBBENCH_DATA_DIR", "results"),
            output_dir=os.getenv("FIBBENCH_OUTPUT_DIR", "output"),
            benchmark_iterations=int(os.getenv("FIBBENCH_ITERATIONS", "100")),
            api_host=os.getenv("FIBBENCH_API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("FIBBENCH_API_PORT", "8000")),
            log_level=os.getenv("FIBBENCH_LOG_LEVEL", "INFO"),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Build settings from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))
        return cls(**{k: v for k, v in data.items() if k in known})

    def validate(self) -> None:
        if self.benchmark_iterations < 1:
            raise ValueError(f"benchmark_iterations must be at least 1, got {self.benchmark_iterations}")
        if not 0 < self.api_port < 65536:
            raise ValueError(f"api_port out of range: {self.api_port}")


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a YAML file, or from the environment when no file is
    given. The YAML document may hold the keys at top level or under a
    ``fibbench:`` section.
    """
    if path is None:
        settings = Settings.from_env()
    else:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        if "fibbench" in data:
            data = data["fibbench"] or {}
        settings = Settings.from_dict(data)

    settings.validate()
    return settings
