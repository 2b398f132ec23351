"""Events reader: a pull-based state machine over tokenized calendar text.

The reader walks a stream of raw properties and yields one
:class:`~ical_events.models.event.ReadResult` per ``VEVENT`` component
(or per surfaced error).  It does no work until the caller asks for the
next item, and it never stops early because of a bad component.

States (:class:`ReaderState`):

- ``SCANNING`` -- outside any component.
- ``IN_WRAPPER`` -- inside ``VCALENDAR``; entered and left silently.
- ``SKIPPING_UNKNOWN`` -- inside a component kind that is not modelled
  (``VTODO``, ``VTIMEZONE``, ...).  Everything is discarded until an
  ``END`` with the same name.  The match is not depth-aware: a nested
  component with the same name ends the skip early.
- ``EXTRACTING_EVENT`` -- collecting a ``VEVENT`` body for the
  :class:`~ical_events.assembler.EventAssembler`.
"""

from __future__ import annotations

import enum
import io
import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from ical_events.assembler import EventAssembler
from ical_events.exceptions import CalendarParseError, InvalidComponentError, TokenizeError
from ical_events.models.event import ReadResult
from ical_events.models.property import PropertyItem, RawProperty
from ical_events.tokenizer import tokenize
from ical_events.zones import ZoneResolver, lookup_zone

logger = logging.getLogger(__name__)

BEGIN = "BEGIN"
END = "END"
WRAPPER_COMPONENT = "VCALENDAR"
EVENT_COMPONENT = "VEVENT"

_COMPONENT_NAME_RE = re.compile(r"[A-Za-z0-9-]+")


class ReaderState(str, enum.Enum):
    """Named states of :class:`EventsReader`."""

    SCANNING = "scanning"
    IN_WRAPPER = "in_wrapper"
    SKIPPING_UNKNOWN = "skipping_unknown"
    EXTRACTING_EVENT = "extracting_event"


def _marker(prop: RawProperty) -> tuple[str, str | None] | None:
    """Return ``(BEGIN|END, component name)`` for a marker property.

    The component name is upper-cased, or ``None`` when the marker has no
    value or its value is not a valid component name.
    """
    keyword = prop.canonical_name
    if keyword not in (BEGIN, END):
        return None
    value = (prop.value or "").strip()
    if not _COMPONENT_NAME_RE.fullmatch(value):
        return keyword, None
    return keyword, value.upper()


class EventsReader:
    """Iterate over the events found in a stream of raw properties.

    The reader is single-use: once the source is exhausted it keeps
    raising :class:`StopIteration`.

    Args:
        properties: Tokenizer output; see
            :func:`~ical_events.tokenizer.tokenize`.
        zones: Zone lookup used for ``TZID`` parameters.
    """

    def __init__(
        self,
        properties: Iterable[PropertyItem],
        *,
        zones: ZoneResolver = lookup_zone,
    ) -> None:
        self._source = iter(properties)
        self._assembler = EventAssembler(zones=zones)
        self._state = ReaderState.SCANNING
        # State to return to when a skipped component or an event closes.
        self._resume_state = ReaderState.SCANNING
        self._skipping: str | None = None
        self._exhausted = False

    @property
    def state(self) -> ReaderState:
        """The reader's current state."""
        return self._state

    def __iter__(self) -> EventsReader:
        return self

    def __next__(self) -> ReadResult:
        if self._exhausted:
            raise StopIteration

        for item in self._source:
            result = self._step(item)
            if result is not None:
                return result

        self._exhausted = True
        self._state = ReaderState.SCANNING
        raise StopIteration

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _step(self, item: PropertyItem) -> ReadResult | None:
        """Apply one item to the state machine, returning any output."""
        if isinstance(item, TokenizeError):
            logger.warning("Skipping malformed line: %s", item)
            return ReadResult.failure(item)

        marker = _marker(item)

        if self._state is ReaderState.SKIPPING_UNKNOWN:
            if marker is not None and marker == (END, self._skipping):
                logger.debug("Finished skipping %s component", self._skipping)
                self._skipping = None
                self._state = self._resume_state
            return None

        if marker is None:
            # VERSION, PRODID and friends.
            return None

        keyword, component = marker
        if keyword == END:
            if component == WRAPPER_COMPONENT and self._state is ReaderState.IN_WRAPPER:
                self._state = ReaderState.SCANNING
            return None

        if component is None:
            error = InvalidComponentError(item.value)
            logger.warning("%s", error)
            return ReadResult.failure(error)
        if component == WRAPPER_COMPONENT:
            self._state = ReaderState.IN_WRAPPER
            return None
        if component == EVENT_COMPONENT:
            return self._extract_event()

        logger.debug("Skipping unsupported %s component", component)
        self._resume_state = self._state
        self._skipping = component
        self._state = ReaderState.SKIPPING_UNKNOWN
        return None

    def _extract_event(self) -> ReadResult:
        """Collect one ``VEVENT`` body and hand it to the assembler."""
        self._resume_state = self._state
        self._state = ReaderState.EXTRACTING_EVENT

        body: list[PropertyItem] = []
        closed = False
        for item in self._source:
            if isinstance(item, RawProperty) and _marker(item) == (END, EVENT_COMPONENT):
                closed = True
                break
            body.append(item)
        if not closed:
            logger.warning("%s component not closed before end of input", EVENT_COMPONENT)

        self._state = self._resume_state
        try:
            event = self._assembler.assemble(body)
        except CalendarParseError as exc:
            logger.warning("Failed to read %s component: %s", EVENT_COMPONENT, exc)
            return ReadResult.failure(exc)
        return ReadResult.success(event)


# ---------------------------------------------------------------------------
# Convenience entry points
# ---------------------------------------------------------------------------


def read_events(
    source: str | bytes | Iterable[str | bytes],
    *,
    zones: ZoneResolver = lookup_zone,
    encoding: str = "utf-8",
) -> EventsReader:
    """Read events from calendar text.

    Args:
        source: The whole calendar as ``str`` or ``bytes``, or any
            iterable of physical lines (such as an open file).
        zones: Zone lookup used for ``TZID`` parameters.
        encoding: Codec for ``bytes`` input.

    Returns:
        An :class:`EventsReader` over the tokenized source.
    """
    lines: Iterable[str | bytes]
    if isinstance(source, str):
        lines = io.StringIO(source)
    elif isinstance(source, bytes):
        lines = io.BytesIO(source)
    else:
        lines = source
    return EventsReader(tokenize(lines, encoding=encoding), zones=zones)


def read_events_file(
    file_path: str | Path,
    *,
    zones: ZoneResolver = lookup_zone,
    encoding: str = "utf-8",
) -> Iterator[ReadResult]:
    """Lazily read events from a calendar file.

    A missing file fails at the call.  The file itself is opened on the
    first request for a result and closed once the returned iterator is
    exhausted or closed.

    Args:
        file_path: Path to the ``.ics`` file.  Accepts both :class:`str`
            and :class:`~pathlib.Path`.
        zones: Zone lookup used for ``TZID`` parameters.
        encoding: Codec used to decode the file.

    Returns:
        An iterator of :class:`ReadResult`.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Calendar file not found: {path}")

    return _read_and_close(path, zones=zones, encoding=encoding)


def _read_and_close(
    path: Path,
    *,
    zones: ZoneResolver,
    encoding: str,
) -> Iterator[ReadResult]:
    with path.open("rb") as handle:
        yield from read_events(handle, zones=zones, encoding=encoding)
