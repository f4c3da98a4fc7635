"""Logging setup for shobergen.

Level and format come from ``ShoberSettings`` (SHOBER_LOG_LEVEL and
SHOBER_LOG_FORMAT) unless passed explicitly.

Usage:
    from shobergen.logging_config import configure_logging
    configure_logging()  # Call once at application startup
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from shobergen.config import ShoberSettings

ROOT_LOGGER = "shobergen"

# Attributes every LogRecord carries; anything else was passed via ``extra``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
    | {"message", "asctime", "taskName"}
)


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with ``extra`` fields under ``"extra"``."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON string with log data.
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.levelno in (logging.DEBUG, logging.ERROR, logging.CRITICAL):
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """``TIMESTAMP LEVEL [LOGGER] MESSAGE``, with file:line for DEBUG and errors."""

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[1;31m",  # Bold red
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%d %H:%M:%S.%f")
        level = record.levelname

        if self.use_colors:
            level_str = f"{self.LEVEL_COLORS.get(level, '')}{level:8s}{self.RESET}"
        else:
            level_str = f"{level:8s}"

        logger_name = record.name.removeprefix(f"{ROOT_LOGGER}.")

        parts = [f"{timestamp[:-3]} {level_str} [{logger_name}] {record.getMessage()}"]

        if record.levelno in (logging.DEBUG, logging.ERROR, logging.CRITICAL):
            parts.append(f" ({record.filename}:{record.lineno})")

        if record.exc_info:
            parts.append(f"\n{self.formatException(record.exc_info)}")

        return "".join(parts)


def configure_logging(
    level: int | None = None,
    format_type: str | None = None,
    use_colors: bool = True,
    settings: ShoberSettings | None = None,
) -> None:
    """Configure the ``shobergen`` logger and the uvicorn access log.

    Should be called once at application startup before any logging.

    Args:
        level: Log level (logging.DEBUG, logging.INFO, ...).
               If None, taken from settings.
        format_type: 'text' or 'json'. If None, taken from settings.
        use_colors: Whether to use colors in text format (only if stderr is TTY).
        settings: Settings to read defaults from. If None, uses ``get_settings()``.
    """
    if level is None or format_type is None:
        if settings is None:
            from shobergen.config import get_settings

            settings = get_settings()
        if level is None:
            level = settings.log_level_value
        if format_type is None:
            format_type = settings.log_format

    handler = logging.StreamHandler(sys.stderr)
    if format_type == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter(use_colors=use_colors))

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.propagate = False

    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.handlers.clear()
    uvicorn_access.addHandler(handler)
    uvicorn_access.setLevel(level)
    uvicorn_access.propagate = False

    root_logger.debug(
        "Logging configured: level=%s, format=%s",
        logging.getLevelName(level),
        format_type,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``shobergen`` namespace.

    Args:
        name: Module name (typically __name__).

    Returns:
        Logger instance.
    """
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
