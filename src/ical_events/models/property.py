"""Raw property model produced by the tokenizer.

These are intentionally simple stdlib dataclasses (not Pydantic): a
:class:`RawProperty` only lives until the reader or the assembler has
looked at it once.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from ical_events.exceptions import TokenizeError

Parameter = tuple[str, tuple[str, ...]]


@dataclass(frozen=True)
class RawProperty:
    """One decoded (unfolded) calendar content line.

    Attributes:
        name: Property name as written; matched case-insensitively.
        value: Raw text after the first unquoted colon.  Escape sequences
            are left in place for the text coercer.  ``None`` when the
            producer had no value to give.
        params: Ordered ``(name, values)`` pairs, duplicates permitted,
            or ``None`` when the line has no parameters.
    """

    name: str
    value: str | None = None
    params: tuple[Parameter, ...] | None = None

    @property
    def canonical_name(self) -> str:
        """The name folded to its upper-case canonical form."""
        return self.name.upper()

    def last_param(self, name: str) -> tuple[str, ...] | None:
        """Return the values of the last parameter called *name*, if any.

        Parameter names are compared case-insensitively.
        """
        wanted = name.upper()
        for param_name, values in reversed(self.params or ()):
            if param_name.upper() == wanted:
                return values
        return None

    @classmethod
    def build(
        cls,
        name: str,
        value: str | None = None,
        params: Iterable[tuple[str, Iterable[str]]] | None = None,
    ) -> RawProperty:
        """Convenience constructor accepting any iterables for parameters."""
        frozen = None
        if params is not None:
            frozen = tuple((param, tuple(values)) for param, values in params)
        return cls(name=name, params=frozen, value=value)


# One item of the tokenizer's output stream.
PropertyItem = Union[RawProperty, TokenizeError]
