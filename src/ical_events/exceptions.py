"""Custom exceptions for the ical-events parser.

Every failure the reader can surface for a component is a
:class:`CalendarParseError`, so callers can handle a result's ``error``
uniformly while still matching on the precise subclass.

Exception hierarchy::

    CalendarParseError              (base for all parse errors)
    +-- MissingPropertyError        (required field never observed)
    +-- InvalidPropertyValueError   (value could not be coerced)
    +-- UnknownPropertyError        (reserved for strict validation)
    +-- TokenizeError               (malformed content line)
        +-- InvalidComponentError   (BEGIN without a usable component name)
"""

from __future__ import annotations


class CalendarParseError(Exception):
    """Base exception for everything that can go wrong while reading events."""


class MissingPropertyError(CalendarParseError):
    """Raised when a required property is absent from an event component.

    Attributes:
        field: Canonical property token of the missing field
            (e.g. ``"DTSTART"``).
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"missing property {field}")
        self.field = field


class InvalidPropertyValueError(CalendarParseError):
    """Raised when a recognised property's value cannot be coerced.

    Attributes:
        property: Canonical property token (e.g. ``"DTSTART"``).
        found: The literal offending text (empty when the value was missing).
        expected: RFC 5545 name of the target value type
            (e.g. ``"DATE-TIME"``).
    """

    def __init__(self, property: str, found: str, expected: str) -> None:  # noqa: A002
        super().__init__(f"invalid property value {property}:{found!r}, expected {expected}")
        self.property = property
        self.found = found
        self.expected = expected


class UnknownPropertyError(CalendarParseError):
    """Raised for a property name outside the field schema.

    Unknown properties are currently ignored, so nothing raises this yet.
    It exists so a strict validation mode can be added without changing
    the hierarchy.

    Attributes:
        name: The unrecognised property name.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown property {name}")
        self.name = name


class TokenizeError(CalendarParseError):
    """Raised (or yielded) for a content line that cannot be tokenized.

    Attributes:
        line_number: 1-based number of the first physical line of the
            offending logical line, or ``None`` when unknown.
        line: The offending line text, or ``None`` when unavailable.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class InvalidComponentError(TokenizeError):
    """Raised when a ``BEGIN`` marker carries no or an unparseable component name."""

    def __init__(self, value: str | None = None) -> None:
        super().__init__(f"invalid component marker BEGIN:{value or ''}")
        self.value = value
