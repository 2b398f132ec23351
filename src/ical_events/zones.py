"""IANA zone lookup used to resolve ``TZID`` parameters.

The zone database is passed around as a plain callable so tests (or
callers with their own zone definitions) can swap it out.  A resolver
takes a zone identifier and returns a :class:`~datetime.tzinfo`; it
signals an unknown identifier by raising :class:`LookupError` (which
includes :class:`KeyError`) or :class:`ValueError`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import tzinfo
from zoneinfo import ZoneInfo

ZoneResolver = Callable[[str], tzinfo]


def lookup_zone(tzid: str) -> tzinfo:
    """Resolve *tzid* against the system IANA database (or ``tzdata``).

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If the zone does not exist.
        ValueError: If *tzid* is not a valid zone key (e.g. empty or an
            absolute path).
    """
    return ZoneInfo(tzid)


def static_zones(zones: Mapping[str, tzinfo]) -> ZoneResolver:
    """Build a resolver that only knows the zones in *zones*.

    Lookups of any other identifier raise :class:`KeyError`.
    """

    def _resolve(tzid: str) -> tzinfo:
        return zones[tzid]

    return _resolve
