"""structlog setup: renderers, stdlib handlers and the processor chain."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import (
    CallsiteParameter,
    CallsiteParameterAdder,
    TimeStamper,
    add_log_level,
    dict_tracebacks,
    format_exc_info,
)
from structlog.stdlib import ProcessorFormatter, add_logger_name, filter_by_level

if TYPE_CHECKING:
    from fountainkit.config.settings import FountainKitSettings

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def _level_number(level_name: str) -> int:
    levels = logging.getLevelNamesMapping()
    try:
        return levels[level_name.upper()]
    except KeyError as e:
        valid = sorted(name for name in levels if name != "NOTSET")
        raise ValueError(
            f"Invalid log level '{level_name}'. Valid levels are: {', '.join(valid)}"
        ) from e


def _build_formatter(log_format: str) -> ProcessorFormatter:
    """Stdlib formatter rendering both structlog events and foreign records."""
    renderer: Any
    exception_processors: list[Any]
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
        exception_processors = [dict_tracebacks]
    elif log_format == "structured":
        renderer = structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "logger", "event"],
            drop_missing=True,
        )
        exception_processors = [format_exc_info]
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.rich_traceback,
        )
        exception_processors = []

    return ProcessorFormatter(
        processors=[
            ProcessorFormatter.remove_processors_meta,
            *exception_processors,
            renderer,
        ],
        foreign_pre_chain=[TimeStamper(fmt="iso"), add_log_level, add_logger_name],
    )


def _build_handlers(settings: FountainKitSettings, level: int) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                settings.log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )

    formatter = _build_formatter(settings.log_format)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def configure_logging(settings: FountainKitSettings) -> None:
    """Configure stdlib logging and structlog from ``settings``.

    Raises:
        ValueError: If the log level is not known to the logging module.
    """
    level = _level_number(settings.log_level)
    logging.basicConfig(
        level=level, handlers=_build_handlers(settings, level), force=True
    )

    processors: list[Any] = [
        merge_contextvars,
        filter_by_level,
        add_logger_name,
        add_log_level,
        TimeStamper(fmt="iso"),
    ]
    if settings.debug:
        processors.append(
            CallsiteParameterAdder(
                parameters=[
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.LINENO,
                    CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    # Rendering happens in the handler formatters
    processors.append(ProcessorFormatter.wrap_for_formatter)

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
