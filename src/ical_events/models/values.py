"""Pydantic models for typed DATE-TIME values.

RFC 5545 DATE-TIME values come in three forms, modelled as a closed,
discriminated union (:data:`CalendarDateTime`):

- :class:`NaiveDateTime` -- "floating" local time with no zone.
- :class:`UtcDateTime` -- time anchored to UTC (``Z`` suffix).
- :class:`ZonedDateTime` -- local time in an IANA zone (``TZID`` parameter).

No variant can carry a UTC marker and a zone identifier at once.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class NaiveDateTime(BaseModel):
    """A floating date-time.

    Attributes:
        value: Naive :class:`~datetime.datetime` (``tzinfo`` is ``None``).
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["naive"] = "naive"
    value: datetime


class UtcDateTime(BaseModel):
    """A date-time anchored to UTC.

    Attributes:
        value: Aware :class:`~datetime.datetime` whose ``tzinfo`` is
            :data:`datetime.timezone.utc`.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["utc"] = "utc"
    value: datetime


class ZonedDateTime(BaseModel):
    """A local date-time in a named IANA zone.

    Attributes:
        tzid: The zone identifier as written in the ``TZID`` parameter.
        value: Aware :class:`~datetime.datetime` carrying the resolved zone.
            Wall-clock fields equal the text that was parsed.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["zoned"] = "zoned"
    tzid: str
    value: datetime


CalendarDateTime = Annotated[
    Union[NaiveDateTime, UtcDateTime, ZonedDateTime],
    Field(discriminator="kind"),
]
