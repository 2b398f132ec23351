"""Content-line tokenizer for RFC 5545 calendar text.

Turns physical lines into a lazy stream of
:class:`~ical_events.models.property.RawProperty` items, unfolding
continuation lines on the way.  Malformed lines do not stop the stream:
they are yielded as :class:`~ical_events.exceptions.TokenizeError`
instances in place of the property, and tokenizing carries on with the
next line.

Values are returned raw.  Escape sequences in TEXT values are left for
:func:`~ical_events.coercers.coerce_text`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from ical_events.exceptions import TokenizeError
from ical_events.models.property import Parameter, PropertyItem, RawProperty

# name *(";" param) ":" value
_NAME_RE = re.compile(r"[A-Za-z0-9-]+")
# ";" param-name "=" param-value *("," param-value)
# param-value is a quoted string or text without DQUOTE ; : ,
_PARAM_RE = re.compile(r';([A-Za-z0-9-]+)=((?:"[^"]*"|[^";:,]*)(?:,(?:"[^"]*"|[^";:,]*))*)')
# One value per match; every value after the first starts at a comma.
_PARAM_VALUE_RE = re.compile(r'(?:^|,)(?:"([^"]*)"|([^",]*))')

_FOLD_CHARS = (" ", "\t")
_BYTE_ORDER_MARK = "\ufeff"


def tokenize(
    lines: Iterable[str | bytes],
    *,
    encoding: str = "utf-8",
) -> Iterator[PropertyItem]:
    """Tokenize calendar text lines into raw properties.

    Args:
        lines: Physical lines, as ``str`` or ``bytes``, with or without
            their line terminators (e.g. an open file).
        encoding: Codec used to decode ``bytes`` lines.

    Yields:
        A :class:`RawProperty` per logical line, or a
        :class:`TokenizeError` for a line that could not be decoded,
        unfolded or split.
    """
    for item in _logical_lines(lines, encoding):
        if isinstance(item, TokenizeError):
            yield item
            continue
        line_number, line = item
        yield parse_content_line(line, line_number=line_number)


def parse_content_line(line: str, line_number: int | None = None) -> PropertyItem:
    """Split one unfolded content line into a :class:`RawProperty`.

    Returns:
        The property, or a :class:`TokenizeError` describing why *line*
        is not a valid content line.
    """
    name_match = _NAME_RE.match(line)
    if name_match is None:
        return TokenizeError(f"malformed content line: {line!r}", line_number, line)

    params: list[Parameter] = []
    pos = name_match.end()
    while pos < len(line) and line[pos] == ";":
        param_match = _PARAM_RE.match(line, pos)
        if param_match is None:
            return TokenizeError(f"malformed property parameter: {line!r}", line_number, line)
        params.append((param_match.group(1), _split_param_values(param_match.group(2))))
        pos = param_match.end()

    if pos >= len(line) or line[pos] != ":":
        return TokenizeError(f"malformed content line: {line!r}", line_number, line)

    return RawProperty(
        name=name_match.group(0),
        params=tuple(params) if params else None,
        value=line[pos + 1 :],
    )


def _split_param_values(text: str) -> tuple[str, ...]:
    """Split ``a,"b,c",d`` into ``("a", "b,c", "d")``."""
    return tuple(quoted or plain for quoted, plain in _PARAM_VALUE_RE.findall(text))


def _logical_lines(
    lines: Iterable[str | bytes],
    encoding: str,
) -> Iterator[tuple[int, str] | TokenizeError]:
    """Decode, strip and unfold physical lines.

    Yields ``(line_number, text)`` pairs, where *line_number* is the
    1-based number of the first physical line, or a :class:`TokenizeError`.
    A byte-order mark at the start of the input is dropped.
    """
    pending: str | None = None
    pending_number = 0

    for line_number, raw in enumerate(lines, start=1):
        if isinstance(raw, bytes):
            try:
                raw = raw.decode(encoding)
            except UnicodeDecodeError as exc:
                if pending is not None:
                    yield pending_number, pending
                    pending = None
                yield TokenizeError(f"cannot decode line: {exc.reason}", line_number)
                continue

        if line_number == 1:
            raw = raw.removeprefix(_BYTE_ORDER_MARK)

        line = raw.rstrip("\r\n")

        if line.startswith(_FOLD_CHARS):
            if pending is None:
                yield TokenizeError("continuation line without a preceding line", line_number, line)
            else:
                pending += line[1:]
            continue

        if pending is not None:
            yield pending_number, pending
            pending = None

        # Blank lines are tolerated and skipped.
        if line:
            pending, pending_number = line, line_number

    if pending is not None:
        yield pending_number, pending
