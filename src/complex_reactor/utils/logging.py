"""Logging setup for ComplexReactor.

Reactor events attach a ``reaction`` mapping to their records
(``logger.debug(..., extra={"reaction": {...}})``). The JSON formatter emits it
under its own key; the text formatter appends it as ``key=value`` pairs.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

from complex_reactor.exceptions import ConfigurationError

PACKAGE_LOGGER = "complex_reactor"
TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def reaction_fields(record: logging.LogRecord) -> dict[str, Any] | None:
    """Reactor state attached to ``record``, if any."""
    fields = getattr(record, "reaction", None)
    return fields if isinstance(fields, dict) else None


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with reactor state under ``"reaction"``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields = reaction_fields(record)
        if fields:
            payload["reaction"] = fields
        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ReactionTextFormatter(logging.Formatter):
    """Pipe-separated text lines, followed by reactor state when present."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = reaction_fields(record)
        if fields:
            line += " | " + " ".join(f"{key}={value}" for key, value in fields.items())
        return line


_FORMATTERS: dict[str, type[logging.Formatter]] = {
    "text": ReactionTextFormatter,
    "json": JSONFormatter,
}


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: str | None = None,
    module_levels: dict[str, str] | None = None,
) -> logging.Logger:
    """Attach handlers to the ``complex_reactor`` logger.

    Repeated calls replace the previous handlers.

    Args:
        level: Package log level (e.g. 'DEBUG', 'INFO').
        log_format: 'text' or 'json'.
        log_file: Optional file to log to in addition to stderr.
        module_levels: Per-module levels, e.g. {'complex_reactor.reactor': 'DEBUG'}.

    Returns:
        The configured package logger.

    Raises:
        ConfigurationError: For an unknown level or format.
    """
    if log_format not in _FORMATTERS:
        raise ConfigurationError(
            f"Unknown log format: {log_format} (expected one of {sorted(_FORMATTERS)})"
        )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(_parse_level(level))
    package_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(_FORMATTERS[log_format]())
        package_logger.addHandler(handler)

    for module, mod_level in (module_levels or {}).items():
        logging.getLogger(module).setLevel(_parse_level(mod_level))

    package_logger.debug(f"Logging configured: level={level}, format={log_format}")
    return package_logger


__all__ = ["JSONFormatter", "ReactionTextFormatter", "reaction_fields", "setup_logging"]
