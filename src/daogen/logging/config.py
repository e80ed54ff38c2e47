"""
Logging configuration for daogen.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any, TextIO

from daogen.logging.context import ContextFilter
from daogen.logging.formatters import JSONFormatter, TextFormatter

ROOT_LOGGER = "daogen"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    TEXT = "text"


class DaoGenLogger:
    """
    Logger wrapper that accepts structured fields as keyword arguments.

    Example:
        logger = DaoGenLogger("daogen.introspection")
        logger.info("Discovered table", table="user", columns=2)
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    def _log(
        self,
        level: int,
        msg: str,
        *args: Any,
        exc_info: bool | BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        self._logger.log(level, msg, *args, exc_info=exc_info, extra=kwargs.copy())

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(
        self,
        msg: str,
        *args: Any,
        exc_info: bool | BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        """Log an error message."""
        self._log(logging.ERROR, msg, *args, exc_info=exc_info, **kwargs)

    def is_enabled_for(self, level: int | LogLevel) -> bool:
        """Check if logger is enabled for the given level."""
        if isinstance(level, LogLevel):
            level = getattr(logging, level.value)
        return self._logger.isEnabledFor(level)


def get_logger(name: str) -> DaoGenLogger:
    """
    Get a daogen logger by name.

    Args:
        name: Logger name, e.g. "daogen.introspection"
    """
    return DaoGenLogger(name)


def configure_logging(
    level: LogLevel | str = LogLevel.INFO,
    format: LogFormat | str = LogFormat.TEXT,
    output: TextIO | None = None,
    include_context: bool = True,
    use_colors: bool = True,
) -> None:
    """
    Configure daogen logging.

    Should be called once at startup, typically by the command line.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format (text for terminals, json for log collectors)
        output: Output stream (defaults to stderr)
        include_context: Whether to include context fields in logs
        use_colors: Whether to use colors in text format (ignored for JSON)
    """
    if isinstance(level, str):
        level = LogLevel(level.upper())

    if isinstance(format, str):
        format = LogFormat(format.lower())

    if output is None:
        output = sys.stderr

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(getattr(logging, level.value))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(output)
    handler.setLevel(getattr(logging, level.value))

    if format == LogFormat.JSON:
        formatter: logging.Formatter = JSONFormatter(include_extra=True)
    else:
        formatter = TextFormatter(use_colors=use_colors)

    handler.setFormatter(formatter)

    if include_context:
        handler.addFilter(ContextFilter())

    root_logger.addHandler(handler)
    root_logger.propagate = False
