"""
Run configuration.

A GenerationConfig comes from defaults, optionally overlaid with a YAML file,
then with explicit command-line flags. Unknown keys in the file are errors.

Example config file:
    scale: 1
    output_dir: ./data
    tables: [date_dim, time_dim, cc]   # names or abbreviations
    parallelism: 4
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError, DsgenError
from .generators import registered_tables
from .scaling import validate_scale
from .tables import get_table

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class GenerationConfig:
    """Settings for one generation run."""

    scale: float = 1.0
    output_dir: Path = Path(".")
    tables: list[str] = field(default_factory=registered_tables)
    parallelism: int = 1
    overwrite: bool = False
    buffer_size_mb: float = 10.0
    log_level: str = "INFO"

    def validate(self) -> "GenerationConfig":
        """
        Check every setting.

        Raises:
            ConfigError: If any setting is invalid
        """
        try:
            self.scale = validate_scale(self.scale)
        except DsgenError as e:
            raise ConfigError(str(e)) from e
        if not isinstance(self.parallelism, int) or self.parallelism < 1:
            raise ConfigError(f"parallelism must be a positive integer, got {self.parallelism!r}")
        if self.buffer_size_mb <= 0:
            raise ConfigError(f"buffer_size_mb must be positive, got {self.buffer_size_mb!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        if not self.tables:
            raise ConfigError("no tables selected")
        try:
            self.tables = [get_table(t).name for t in self.tables]
        except DsgenError as e:
            raise ConfigError(str(e)) from e
        available = registered_tables()
        unknown = [t for t in self.tables if t not in available]
        if unknown:
            raise ConfigError(f"unsupported tables {unknown}; available: {available}")
        self.output_dir = Path(self.output_dir)
        return self

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["output_dir"] = str(self.output_dir)
        return data

    def with_overrides(self, **overrides: Any) -> "GenerationConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: Path | str | None = None, **overrides: Any) -> GenerationConfig:
    """
    Build a validated config from an optional YAML file plus overrides.

    Args:
        path: YAML file with any GenerationConfig keys
        **overrides: Values that win over the file (None means unset)

    Raises:
        ConfigError: If the file is missing, malformed, or has bad values
    """
    config = GenerationConfig()
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"config file not found: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{path} must contain a mapping")

        known = {f.name for f in fields(GenerationConfig)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ConfigError(f"unknown config keys {unknown} in {path}")
        if isinstance(raw.get("tables"), str):
            raw["tables"] = [raw["tables"]]
        config = replace(config, **raw)

    config = config.with_overrides(**overrides).validate()
    logger.debug("Resolved config %s", config.to_dict())
    return config
