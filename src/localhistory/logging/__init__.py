"""Structured logging module for localhistory.

Provides configurable logging with JSON format support and file rotation.
"""

from localhistory.logging.config import configure_logging
from localhistory.logging.handlers import (
    ContextFormatter,
    JSONFormatter,
    record_context,
)

__all__ = [
    "ContextFormatter",
    "JSONFormatter",
    "configure_logging",
    "record_context",
]
