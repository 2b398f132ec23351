"""Event record and per-component read results.

- :class:`Event` -- the assembled, immutable output record for one
  ``VEVENT`` component.
- :class:`ReadResult` -- one item of the events reader's output: either an
  :class:`Event` or the :class:`~ical_events.exceptions.CalendarParseError`
  that stopped its assembly.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from ical_events.exceptions import CalendarParseError
from ical_events.models.values import CalendarDateTime

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Event(BaseModel):
    """A calendar event extracted from one ``VEVENT`` component.

    The field set is forward-compatible: new optional fields may be added,
    existing ones are never removed or retyped.

    Attributes:
        uid: Globally unique identifier (``UID``).
        dt_start: Start of the event (``DTSTART``).
        created: Creation time (``CREATED``), or ``None``.
        dt_stamp: Time the object was emitted (``DTSTAMP``), or ``None``.
        dt_end: End of the event (``DTEND``), or ``None``.
        last_modified: Last revision time (``LAST-MODIFIED``), or ``None``.
        description: Unescaped ``DESCRIPTION`` text, or ``None``.
        location: Unescaped ``LOCATION`` text, or ``None``.
        summary: Unescaped ``SUMMARY`` text, or ``None``.
        sequence: Revision sequence number (``SEQUENCE``), ``0`` when absent.
    """

    model_config = ConfigDict(frozen=True)

    uid: str
    dt_start: CalendarDateTime
    created: CalendarDateTime | None = None
    dt_stamp: CalendarDateTime | None = None
    dt_end: CalendarDateTime | None = None
    last_modified: CalendarDateTime | None = None
    description: str | None = None
    location: str | None = None
    summary: str | None = None
    sequence: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)


@dataclass(frozen=True)
class ReadResult:
    """Outcome of reading one component (or one surfaced error).

    Exactly one of :attr:`event` and :attr:`error` is set.

    Attributes:
        event: The assembled event, or ``None`` on failure.
        error: The failure, or ``None`` on success.
    """

    event: Event | None = None
    error: CalendarParseError | None = None

    def __post_init__(self) -> None:
        if (self.event is None) == (self.error is None):
            raise ValueError("ReadResult needs exactly one of event or error")

    @classmethod
    def success(cls, event: Event) -> ReadResult:
        return cls(event=event)

    @classmethod
    def failure(cls, error: CalendarParseError) -> ReadResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """Whether this result holds an event."""
        return self.event is not None

    def unwrap(self) -> Event:
        """Return the event, or raise the stored error.

        Raises:
            CalendarParseError: If this result is a failure.
        """
        if self.error is not None:
            raise self.error
        assert self.event is not None
        return self.event
