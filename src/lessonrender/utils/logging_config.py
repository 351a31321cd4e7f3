"""Logging setup shared by the library, the server and the scripts.

Loggers are plain :mod:`logging` loggers. Structured context is passed with
``extra={...}`` and printed after the message as ``key=value`` pairs.
"""

from __future__ import annotations

import logging
import sys

from lessonrender.config import LESSONRENDER_LOG_LEVEL

# Attributes every LogRecord has; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields to the message."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return message
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} | {pairs}"


def configure_logging(level: str | int | None = None) -> None:
    """Install one stream handler on the root logger.

    Calling it again only updates the level.
    """
    global _configured
    root = logging.getLogger()
    if _configured:
        if level is not None:
            root.setLevel(level)
        return
    root.setLevel(level or LESSONRENDER_LOG_LEVEL)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFormatter(_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring logging on first use."""
    configure_logging()
    return logging.getLogger(name)
