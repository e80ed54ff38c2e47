"""
Logging context management for daogen.

Lets the pipeline tag every record emitted while a table or artifact is
being processed without threading the names through each call.
"""

from __future__ import annotations

import contextvars
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

_log_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "daogen_log_context",
    default=None,
)


def get_log_context() -> dict[str, Any]:
    """Get the current log context."""
    ctx = _log_context.get()
    return ctx.copy() if ctx else {}


def clear_log_context() -> None:
    """Clear the current log context."""
    _log_context.set(None)


@contextmanager
def with_log_context(**kwargs: Any) -> Iterator[None]:
    """
    Set log context fields within a scope.

    Fields from an enclosing scope are kept; nested values win.

    Example:
        with with_log_context(table="user", artifact="model"):
            logger.info("Writing")  # Includes table and artifact
    """
    previous = _log_context.get()
    new_context = previous.copy() if previous else {}
    new_context.update(kwargs)
    _log_context.set(new_context)

    try:
        yield
    finally:
        _log_context.set(previous)


class ContextFilter(logging.Filter):
    """Logging filter that injects context fields into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in get_log_context().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
