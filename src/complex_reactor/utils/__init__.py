"""Configuration and logging utilities."""

from __future__ import annotations

from complex_reactor.utils.config import (
    AppConfig,
    LoggingConfig,
    ReactorConfig,
    expand_env_vars,
    load_config,
    merge_configs,
    read_config_data,
    save_config,
)
from complex_reactor.utils.logging import JSONFormatter, ReactionTextFormatter, setup_logging

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "ReactorConfig",
    "expand_env_vars",
    "load_config",
    "merge_configs",
    "read_config_data",
    "save_config",
    "JSONFormatter",
    "ReactionTextFormatter",
    "setup_logging",
]
