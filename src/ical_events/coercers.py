"""Type coercers turning one raw property value into a typed value.

Each coercer takes a :class:`~ical_events.models.property.RawProperty` and
either returns the typed value or raises
:class:`~ical_events.exceptions.InvalidPropertyValueError` naming the
property, the literal text found and the expected RFC 5545 value type.

The ``property_name`` keyword lets the caller report the canonical field
token instead of the name as written in the input.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

from ical_events.exceptions import InvalidPropertyValueError
from ical_events.models.property import RawProperty
from ical_events.models.values import NaiveDateTime, UtcDateTime, ZonedDateTime
from ical_events.schema import ValueType
from ical_events.zones import ZoneResolver, lookup_zone

logger = logging.getLogger(__name__)

DATE_TIME = ValueType.DATE_TIME.value
INTEGER = ValueType.INTEGER.value

TZID_PARAM = "TZID"

# YYYYMMDD "T" HHMMSS, ASCII digits only.
_DATE_TIME_RE = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})T([0-9]{2})([0-9]{2})([0-9]{2})")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_ESCAPE_RE = re.compile(r"\\([nN;,\\])")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_UNESCAPED = {"n": "\n", "N": "\n", ";": ";", ",": ",", "\\": "\\"}


def _fail(
    prop: RawProperty,
    found: str,
    expected: str,
    property_name: str | None,
) -> InvalidPropertyValueError:
    return InvalidPropertyValueError(
        property=property_name or prop.canonical_name,
        found=found,
        expected=expected,
    )


def coerce_date_time(
    prop: RawProperty,
    *,
    zones: ZoneResolver = lookup_zone,
    property_name: str | None = None,
) -> NaiveDateTime | UtcDateTime | ZonedDateTime:
    """Coerce a ``YYYYMMDDTHHMMSS[Z]`` value into a typed date-time.

    A trailing ``Z`` marks UTC.  A ``TZID`` parameter (last occurrence wins,
    its last value is used) names an IANA zone resolved through *zones*.
    UTC and ``TZID`` together are rejected.

    Local times that fall into a DST gap or fold are attached to the zone
    with ``fold=0``: the first occurrence of an ambiguous time, and the
    pre-transition offset for a nonexistent one.

    Args:
        prop: The raw property.
        zones: Zone lookup; see :mod:`ical_events.zones`.
        property_name: Name to report in errors (defaults to the
            property's canonical name).

    Returns:
        A :class:`NaiveDateTime`, :class:`UtcDateTime` or
        :class:`ZonedDateTime`.

    Raises:
        InvalidPropertyValueError: On a missing or malformed value, an
            unknown zone, or a ``Z`` suffix combined with ``TZID``.
    """
    raw = prop.value or ""
    text, is_utc = (raw[:-1], True) if raw.endswith("Z") else (raw, False)

    match = _DATE_TIME_RE.fullmatch(text)
    if match is None:
        raise _fail(prop, raw, DATE_TIME, property_name)
    try:
        local = datetime(*(int(part) for part in match.groups()))
    except ValueError as exc:
        raise _fail(prop, raw, DATE_TIME, property_name) from exc

    tz_values = prop.last_param(TZID_PARAM)
    tzid = tz_values[-1] if tz_values else None

    if tzid is not None:
        if is_utc:
            raise _fail(prop, raw, DATE_TIME, property_name)
        try:
            zone = zones(tzid)
        except (LookupError, ValueError, OSError) as exc:
            logger.debug("Unknown TZID %r on %s", tzid, prop.name)
            raise _fail(prop, raw, DATE_TIME, property_name) from exc
        return ZonedDateTime(tzid=tzid, value=local.replace(tzinfo=zone, fold=0))
    if is_utc:
        return UtcDateTime(value=local.replace(tzinfo=timezone.utc))
    return NaiveDateTime(value=local)


def coerce_integer(prop: RawProperty, *, property_name: str | None = None) -> int:
    """Coerce a signed 32-bit decimal integer.

    Raises:
        InvalidPropertyValueError: On a missing value, non-numeric content
            or a value outside the 32-bit range.
    """
    raw = prop.value or ""
    if _INTEGER_RE.fullmatch(raw) is None:
        raise _fail(prop, raw, INTEGER, property_name)
    number = int(raw)
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise _fail(prop, raw, INTEGER, property_name)
    return number


def coerce_text(prop: RawProperty, *, property_name: str | None = None) -> str:  # noqa: ARG001
    """Unescape a TEXT value.

    ``\\n``/``\\N`` become a line break, and ``\\;``, ``\\,`` and ``\\\\``
    lose their backslash.  The scan is a single left-to-right pass over
    non-overlapping pairs; replaced characters are never scanned again and
    any other backslash sequence is kept verbatim.  A missing value is the
    empty string.
    """
    raw = prop.value or ""
    if "\\" not in raw:
        return raw
    return _ESCAPE_RE.sub(lambda match: _UNESCAPED[match.group(1)], raw)
