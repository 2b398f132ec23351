"""Data models for ical-events."""

from __future__ import annotations

from ical_events.models.event import Event, ReadResult
from ical_events.models.property import PropertyItem, RawProperty
from ical_events.models.values import (
    CalendarDateTime,
    NaiveDateTime,
    UtcDateTime,
    ZonedDateTime,
)

__all__ = [
    "CalendarDateTime",
    "Event",
    "NaiveDateTime",
    "PropertyItem",
    "RawProperty",
    "ReadResult",
    "UtcDateTime",
    "ZonedDateTime",
]
