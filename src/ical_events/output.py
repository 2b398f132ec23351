"""Console and JSON-lines rendering of read results.

:func:`format_report` renders a human-readable report (banner, one block
per event or error, summary); :func:`format_json_lines` renders one JSON
object per result for piping into other tools.  :func:`print_report` is a
convenience wrapper that writes the report to stdout.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable

from ical_events.models.event import Event, ReadResult
from ical_events.models.values import NaiveDateTime, UtcDateTime, ZonedDateTime

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH
_RULE = "-" * _BANNER_WIDTH
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# (label, attribute) in display order; dt_start and uid are always shown.
_DATE_FIELDS = (
    ("Start", "dt_start"),
    ("End", "dt_end"),
    ("Created", "created"),
    ("Stamp", "dt_stamp"),
    ("Modified", "last_modified"),
)
_TEXT_FIELDS = (
    ("Summary", "summary"),
    ("Location", "location"),
    ("Description", "description"),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_date_time(value: NaiveDateTime | UtcDateTime | ZonedDateTime) -> str:
    """Render a typed date-time for display.

    Examples: ``2002-01-10 12:30:45`` (floating),
    ``2002-01-10 12:30:45 UTC``, and
    ``2002-01-10 12:30:45 Europe/Paris (+01:00)``.
    """
    text = value.value.strftime(_TIME_FORMAT)
    if isinstance(value, UtcDateTime):
        return f"{text} UTC"
    if isinstance(value, ZonedDateTime):
        offset = value.value.strftime("%z")
        return f"{text} {value.tzid} ({offset[:3]}:{offset[3:]})"
    return text


def format_event(event: Event) -> str:
    """Render one event as an indented multi-line block."""
    lines = [f"  UID:          {event.uid}"]
    for label, attribute in _DATE_FIELDS:
        value = getattr(event, attribute)
        if value is not None:
            lines.append(f"  {label + ':':<13} {format_date_time(value)}")
    for label, attribute in _TEXT_FIELDS:
        value = getattr(event, attribute)
        if value is not None:
            # Continuation lines of multi-line text line up with the value.
            indented = value.replace("\n", "\n" + " " * 16)
            lines.append(f"  {label + ':':<13} {indented}")
    lines.append(f"  Sequence:     {event.sequence}")
    return "\n".join(lines)


def format_report(results: Iterable[ReadResult], source: str = "<string>") -> str:
    """Render all *results* as a console report.

    Args:
        results: Reader output; consumed once.
        source: Label for the calendar origin (e.g. a file path).

    Returns:
        A multi-line string ready for console display.
    """
    lines: list[str] = [_SEPARATOR, f"  CALENDAR EVENTS: {source}", _SEPARATOR]
    events = errors = 0

    for index, result in enumerate(results, start=1):
        lines.append(_RULE)
        if result.event is not None:
            events += 1
            lines.append(f"[{index}] EVENT")
            lines.append(format_event(result.event))
        else:
            errors += 1
            lines.append(f"[{index}] ERROR: {result.error}")

    lines.append(_SEPARATOR)
    lines.append(f"  {events} event(s), {errors} error(s)")
    lines.append(_SEPARATOR)
    return "\n".join(lines)


def format_json_lines(results: Iterable[ReadResult]) -> str:
    """Render *results* as newline-delimited JSON objects."""
    rows: list[str] = []
    for result in results:
        if result.event is not None:
            payload = {"ok": True, "event": result.event.model_dump(mode="json")}
        else:
            payload = {
                "ok": False,
                "error": type(result.error).__name__,
                "message": str(result.error),
            }
        rows.append(json.dumps(payload, ensure_ascii=False))
    return "\n".join(rows)


def print_report(results: Iterable[ReadResult], source: str = "<string>") -> None:
    """Format and print a report to stdout."""
    sys.stdout.write(format_report(results, source=source) + "\n")
