"""Event assembler: turns the body of one ``VEVENT`` into an :class:`Event`.

The assembler walks the properties between ``BEGIN:VEVENT`` and
``END:VEVENT`` once, coercing every property named in
:data:`~ical_events.schema.EVENT_FIELDS` and ignoring the rest.  Assembly
is fail-fast: the first tokenizer error, coercion failure or missing
required field is raised and no partial event is ever returned.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Any

from ical_events.coercers import coerce_date_time, coerce_integer, coerce_text
from ical_events.exceptions import MissingPropertyError, TokenizeError
from ical_events.models.event import Event
from ical_events.models.property import PropertyItem, RawProperty
from ical_events.schema import EVENT_FIELDS, FIELDS_BY_TOKEN, ValueType
from ical_events.zones import ZoneResolver, lookup_zone

logger = logging.getLogger(__name__)

Coercer = Callable[..., Any]


class EventAssembler:
    """Assemble :class:`Event` records using the ``VEVENT`` field schema.

    Args:
        zones: Zone lookup used for ``TZID`` parameters.
    """

    def __init__(self, zones: ZoneResolver = lookup_zone) -> None:
        self._coercers: dict[ValueType, Coercer] = {
            ValueType.DATE_TIME: functools.partial(coerce_date_time, zones=zones),
            ValueType.INTEGER: coerce_integer,
            ValueType.TEXT: coerce_text,
        }

    def assemble(self, items: Iterable[PropertyItem]) -> Event:
        """Build one event from the properties of a single component.

        Args:
            items: The component body, exclusive of its BEGIN/END markers.
                Items are either :class:`RawProperty` or a
                :class:`TokenizeError` produced upstream.

        Returns:
            The fully populated :class:`Event`.

        Raises:
            TokenizeError: The first tokenizer error found in *items*.
            InvalidPropertyValueError: If a known property fails coercion.
            MissingPropertyError: If a required property never appeared.
        """
        values: dict[str, Any] = {f.attribute: f.default for f in EVENT_FIELDS}
        seen: set[str] = set()

        for item in items:
            if isinstance(item, TokenizeError):
                raise item
            self._apply(item, values, seen)

        for field_spec in EVENT_FIELDS:
            if field_spec.required and field_spec.attribute not in seen:
                raise MissingPropertyError(field_spec.token)

        return Event(**values)

    def _apply(self, prop: RawProperty, values: dict[str, Any], seen: set[str]) -> None:
        """Coerce *prop* into *values* if the schema knows it."""
        token = prop.canonical_name
        field_spec = FIELDS_BY_TOKEN.get(token)
        if field_spec is None:
            logger.debug("Ignoring unknown property %s", token)
            return

        coerce = self._coercers[field_spec.value_type]
        # Last occurrence wins.
        values[field_spec.attribute] = coerce(prop, property_name=field_spec.token)
        seen.add(field_spec.attribute)


def assemble_event(
    items: Iterable[PropertyItem],
    *,
    zones: ZoneResolver = lookup_zone,
) -> Event:
    """Assemble one event with a throwaway :class:`EventAssembler`.

    See :meth:`EventAssembler.assemble` for details.
    """
    return EventAssembler(zones=zones).assemble(items)
