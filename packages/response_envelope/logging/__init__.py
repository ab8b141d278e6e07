"""Public logging API for response envelope helpers.

This package wraps Python's ``logging`` module with opinionated defaults for
stdout emission and structured context propagation.
"""

from .config import ContextFilter, JsonFormatter, PlainFormatter, configure_logging, get_logger
from .context import (
    bind_context,
    clear_context,
    correlation_context,
    get_context,
    log_context,
)

__all__ = [
    "ContextFilter",
    "JsonFormatter",
    "PlainFormatter",
    "bind_context",
    "clear_context",
    "configure_logging",
    "correlation_context",
    "get_context",
    "get_logger",
    "log_context",
]
