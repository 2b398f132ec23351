"""ical-events: typed VEVENT extraction from iCalendar text.

Reads RFC 5545 calendar streams and yields strongly typed event records,
one result per ``VEVENT`` component, with precise errors for malformed
components.
"""

from __future__ import annotations

from ical_events.assembler import EventAssembler, assemble_event
from ical_events.coercers import coerce_date_time, coerce_integer, coerce_text
from ical_events.exceptions import (
    CalendarParseError,
    InvalidComponentError,
    InvalidPropertyValueError,
    MissingPropertyError,
    TokenizeError,
    UnknownPropertyError,
)
from ical_events.models.event import Event, ReadResult
from ical_events.models.property import RawProperty
from ical_events.models.values import (
    CalendarDateTime,
    NaiveDateTime,
    UtcDateTime,
    ZonedDateTime,
)
from ical_events.reader import EventsReader, ReaderState, read_events, read_events_file
from ical_events.tokenizer import tokenize
from ical_events.zones import ZoneResolver, lookup_zone, static_zones

__version__ = "0.1.0"

__all__ = [
    "CalendarDateTime",
    "CalendarParseError",
    "Event",
    "EventAssembler",
    "EventsReader",
    "InvalidComponentError",
    "InvalidPropertyValueError",
    "MissingPropertyError",
    "NaiveDateTime",
    "RawProperty",
    "ReadResult",
    "ReaderState",
    "TokenizeError",
    "UnknownPropertyError",
    "UtcDateTime",
    "ZoneResolver",
    "ZonedDateTime",
    "assemble_event",
    "coerce_date_time",
    "coerce_integer",
    "coerce_text",
    "lookup_zone",
    "read_events",
    "read_events_file",
    "static_zones",
    "tokenize",
]
