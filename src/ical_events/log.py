"""Logging setup for the ical-events command line.

The library modules only ever call :func:`logging.getLogger`; handlers are
attached here, by the CLI, so embedding applications keep full control of
their own logging configuration.

Records are written as pipe-separated fields with ISO 8601 timestamps::

    2024-05-01T09:00:00 | WARNING  | ical_events.reader | Failed to read VEVENT component: ...
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Marks the handler installed by setup_logging so repeated calls reuse it
# and handlers added by someone else are left alone.
_HANDLER_ATTR = "_ical_events_handler"


def resolve_level(level: str | int) -> int:
    """Translate a level name (case-insensitive) or number to a level number.

    Raises:
        ValueError: If *level* is not a recognised logging level.
    """
    if isinstance(level, int):
        return level
    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")
    return numeric_level


def setup_logging(level: str | int = "INFO", stream: TextIO | None = None) -> None:
    """Configure the root logger for command-line use.

    Safe to call repeatedly: the second call only updates the level of the
    handler installed by the first.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"WARNING"``, or a
            level number.
        stream: Destination of the records; defaults to *stderr* so
            program output on *stdout* stays machine-readable.

    Raises:
        ValueError: If *level* is not a recognised logging level.
    """
    numeric_level = resolve_level(level)

    root = logging.getLogger()
    root.setLevel(numeric_level)

    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            handler.setLevel(numeric_level)
            return

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger called *name* (usually ``__name__``)."""
    return logging.getLogger(name)
