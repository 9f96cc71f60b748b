"""Configuration and logging entry points for FountainKit."""

from __future__ import annotations

from typing import Any

import structlog

from fountainkit.config.logging import configure_logging
from fountainkit.config.settings import (
    FountainKitSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
    set_settings,
)

__all__ = [
    "FountainKitSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "reset_settings",
    "set_settings",
]

_loggers: dict[str, Any] = {}
_logging_configured = False


def get_logger(name: str) -> Any:
    """Return the structlog logger for ``name``.

    The first call configures logging from the global settings. Loggers are
    cached per name.
    """
    global _logging_configured
    logger = _loggers.get(name)
    if logger is None:
        if not _logging_configured:
            configure_logging(get_settings())
            _logging_configured = True
        logger = _loggers[name] = structlog.get_logger(name)
    return logger


def reset_settings() -> None:
    """Forget the global settings, the logging setup and cached loggers."""
    global _logging_configured
    clear_settings_cache()
    _logging_configured = False
    _loggers.clear()
