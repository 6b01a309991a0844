"""Log formatters that surface the fields passed through ``extra=``.

The CLI tags its records with fields such as ``command``, ``comparison``
and ``strict_boundary``; the path helpers add ``path`` and ``base``. Both
formatters here carry those fields into the output so a log line can be
traced back to the operation that produced it.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes present on every LogRecord; anything else came from extra=
_RECORD_ATTRS: frozenset[str] = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
}


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the fields a log call attached through ``extra=``.

    Private attributes (leading underscore) are skipped.

    Args:
        record: Log record to inspect.

    Returns:
        Mapping of extra field names to values, in insertion order.
    """
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class ContextFormatter(logging.Formatter):
    """Plain text formatter that appends extra fields as ``key=value``.

    Example output:
        2026-01-01 12:00:00,000 DEBUG    localhistory.cli.strings: Replacing [command=replace comparison=ordinal]
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if not context:
            return line
        fields = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{line} [{fields}]"


class JSONFormatter(logging.Formatter):
    """Format each record as a single-line JSON object.

    Keys: ``timestamp`` (ISO-8601 UTC), ``level``, ``message``, ``logger``
    (omitted for the root logger), ``context`` (extra fields, omitted when
    empty) and ``exception`` (formatted traceback, when present).
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.name != "root":
            entry["logger"] = record.name

        context = record_context(record)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
