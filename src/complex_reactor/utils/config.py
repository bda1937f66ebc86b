"""Configuration management for ComplexReactor.

A config file holds reactor parameters, the starting reagent quantities and
logging options. Run results are never written to it.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from complex_reactor.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# ${VAR} or ${VAR:default}
ENV_REFERENCE = re.compile(r"\$\{(?P<name>\w+)(?::(?P<default>[^}]*))?\}")


class ReactorConfig(BaseModel):
    """Reactor parameters and starting inputs."""

    conversion: float = Field(default=0.5, ge=0.0, le=1.0, description="Conversion fraction")
    two_outputs: bool = Field(default=False, description="Produce R and S instead of R only")
    split_ratio: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Fraction of reacted mass routed to R"
    )
    input_a: float = Field(default=0.0, ge=0.0, description="Quantity of reagent A")
    input_b: float = Field(default=0.0, ge=0.0, description="Quantity of reagent B")


class LoggingConfig(BaseModel):
    """Arguments for :func:`complex_reactor.utils.logging.setup_logging`."""

    level: str = Field(default="INFO", description="Log level")
    format: Literal["text", "json"] = Field(default="text", description="Log format")
    log_file: str | None = Field(None, description="Log file path")
    module_levels: dict[str, str] = Field(
        default_factory=dict,
        description="Per-module log levels",
    )


class AppConfig(BaseModel):
    """Top-level configuration."""

    reactor: ReactorConfig = Field(default_factory=ReactorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def expand_env_vars(text: str) -> str:
    """Substitute ``${VAR}`` / ``${VAR:default}`` references from the environment.

    References with no matching variable and no default are left as written.
    """

    def _lookup(match: re.Match[str]) -> str:
        value = os.environ.get(match["name"], match["default"])
        return match.group(0) if value is None else value

    return ENV_REFERENCE.sub(_lookup, text)


def read_config_data(path: str | Path) -> dict[str, Any]:
    """Read a YAML config file into a plain mapping (empty file -> ``{}``).

    Raises:
        ConfigurationError: If the file is missing, not YAML, or not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(expand_env_vars(path.read_text()))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid config structure: expected a mapping in {path}")
    return data


def load_config(path: str | Path) -> AppConfig:
    """Load and validate a YAML config file.

    Raises:
        ConfigurationError: If the file cannot be read or fails validation.
    """
    data = read_config_data(path)
    try:
        config = AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config structure: {exc}") from exc

    logger.info(f"Loaded config from {path}")
    return config


def save_config(config: AppConfig, path: str | Path) -> None:
    """Write ``config`` as YAML, creating parent directories.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(config.model_dump(), sort_keys=False))
    except OSError as exc:
        raise ConfigurationError(f"Failed to save config to {path}: {exc}") from exc

    logger.info(f"Saved config to {path}")


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``; nested dicts merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


__all__ = [
    "ReactorConfig",
    "LoggingConfig",
    "AppConfig",
    "expand_env_vars",
    "read_config_data",
    "load_config",
    "save_config",
    "merge_configs",
]
