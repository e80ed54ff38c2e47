"""
daogen structured logging.

Provides JSON and text formatting plus context injection, so every record
written while a table or artifact is being generated carries its name.
"""

from daogen.logging.config import (
    DaoGenLogger,
    LogFormat,
    LogLevel,
    configure_logging,
    get_logger,
)
from daogen.logging.context import with_log_context
from daogen.logging.formatters import JSONFormatter, TextFormatter

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "DaoGenLogger",
    "LogLevel",
    "LogFormat",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    # Context
    "with_log_context",
]
