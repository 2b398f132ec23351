"""Field schema for ``VEVENT`` components.

One :class:`FieldSpec` row per supported property: the canonical token it
is written as, the :class:`~ical_events.models.event.Event` attribute it
fills, the value type its raw text is coerced to, and whether it is
required, optional, or optional with an explicit default.

Row order matters: required fields are checked in this order, so the
first missing one is the one reported.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class ValueType(str, enum.Enum):
    """RFC 5545 value types the coercers understand."""

    DATE_TIME = "DATE-TIME"
    INTEGER = "INTEGER"
    TEXT = "TEXT"


class Cardinality(str, enum.Enum):
    """How a field behaves when its property never appears."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    DEFAULTED = "defaulted"


@dataclass(frozen=True)
class FieldSpec:
    """One row of the field schema.

    Attributes:
        token: Canonical (upper-case) property name.
        attribute: Name of the :class:`Event` attribute it populates.
        value_type: Target type of the coercion.
        cardinality: Required / optional / defaulted policy.
        default: Initial value for optional and defaulted fields.
    """

    token: str
    attribute: str
    value_type: ValueType
    cardinality: Cardinality = Cardinality.OPTIONAL
    default: Any = None

    @property
    def required(self) -> bool:
        return self.cardinality is Cardinality.REQUIRED


EVENT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("CREATED", "created", ValueType.DATE_TIME),
    FieldSpec("DESCRIPTION", "description", ValueType.TEXT),
    FieldSpec("DTSTART", "dt_start", ValueType.DATE_TIME, Cardinality.REQUIRED),
    FieldSpec("DTSTAMP", "dt_stamp", ValueType.DATE_TIME),
    FieldSpec("DTEND", "dt_end", ValueType.DATE_TIME),
    FieldSpec("LAST-MODIFIED", "last_modified", ValueType.DATE_TIME),
    FieldSpec("LOCATION", "location", ValueType.TEXT),
    FieldSpec("SEQUENCE", "sequence", ValueType.INTEGER, Cardinality.DEFAULTED, 0),
    FieldSpec("SUMMARY", "summary", ValueType.TEXT),
    FieldSpec("UID", "uid", ValueType.TEXT, Cardinality.REQUIRED),
)

FIELDS_BY_TOKEN: dict[str, FieldSpec] = {f.token: f for f in EVENT_FIELDS}
