"""Logging setup from LoggingConfig."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

from localhistory.logging.handlers import ContextFormatter, JSONFormatter

if TYPE_CHECKING:
    from localhistory.config.models import LoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Marks handlers installed here so reconfiguration replaces only our own
_HANDLER_ATTR = "_localhistory_handler"


def _make_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return ContextFormatter(TEXT_FORMAT)


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from a LoggingConfig.

    Installs a stderr handler and, if config.file is set, a rotating file
    handler. Calling this again replaces the handlers from the previous
    call and leaves any other handlers in place.

    Args:
        config: Logging configuration to apply.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            root.removeHandler(handler)
            handler.close()

    root.setLevel(config.level.upper())
    formatter = _make_formatter(config.format)

    handlers: list[logging.Handler] = []
    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                config.file,
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
        )
    if config.file is None or config.include_stderr:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
