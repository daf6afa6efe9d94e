"""Loader configuration for plwordnet."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from plwordnet.exceptions import ConfigError

# Environment variable naming the default plWordNet XML file.
PATH_ENV_VAR = "PLWORDNET_PATH"

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Settings that control how a plWordNet document is loaded."""

    root_tag: str = "array-list"
    progress_interval: int = 100_000
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not self.root_tag:
            raise ConfigError("root_tag cannot be empty")
        if isinstance(self.progress_interval, bool) or self.progress_interval <= 0:
            raise ConfigError("progress_interval must be a positive integer")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log_level: {self.log_level!r}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())


def load_config(path: str | Path) -> LoaderConfig:
    """Load a :class:`LoaderConfig` from a YAML file.

    Args:
        path: Path to a YAML mapping whose keys are LoaderConfig fields.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the YAML is invalid or contains unknown keys.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return LoaderConfig()
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping (dictionary)")
    return config_from_dict(data)


def config_from_dict(data: dict[str, Any]) -> LoaderConfig:
    known = {f.name for f in fields(LoaderConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    interval = data.get("progress_interval", 1)
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise ConfigError("progress_interval must be an integer")
    for key in ("root_tag", "log_level"):
        if key in data and not isinstance(data[key], str):
            raise ConfigError(f"{key} must be a string")

    return LoaderConfig(**data)


def default_source() -> Path | None:
    """Return the path named by ``PLWORDNET_PATH``, if set."""
    value = os.environ.get(PATH_ENV_VAR)
    return Path(value) if value else None
