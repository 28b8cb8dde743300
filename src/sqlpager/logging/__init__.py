"""Logging infrastructure for sqlpager.

This module provides structured logging with JSON output and context
tracking shared by the builder, the pager and the executors.
"""

from sqlpager.logging.filters import (
    ContextFilter,
    clear_request_context,
    set_logging_context,
    set_request_context,
)
from sqlpager.logging.logger import JsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "JsonFormatter",
    "ContextFilter",
    "set_logging_context",
    "set_request_context",
    "clear_request_context",
]
