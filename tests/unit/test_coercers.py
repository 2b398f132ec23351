"""Unit tests for the type coercers.

Tests cover: DATE-TIME (floating, UTC, zoned, conflicting markers, unknown
zones, malformed layouts, DST gaps and folds, repeated TZID), INTEGER
(signs, ranges, garbage) and TEXT (escapes, single-pass unescaping).
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from ical_events.coercers import coerce_date_time, coerce_integer, coerce_text
from ical_events.exceptions import InvalidPropertyValueError
from ical_events.models.property import RawProperty
from ical_events.models.values import NaiveDateTime, UtcDateTime, ZonedDateTime
from ical_events.zones import static_zones


def _prop(value: str | None, **params: str) -> RawProperty:
    """Build a DTSTART-like property with single-valued parameters."""
    return RawProperty.build(
        "DTSTART",
        value,
        [(name, [param_value]) for name, param_value in params.items()] or None,
    )


# ---------------------------------------------------------------------------
# DATE-TIME
# ---------------------------------------------------------------------------


class TestDateTimeHappyPath:
    """Well-formed DATE-TIME values in each of the three forms."""

    def test_floating_value_is_naive(self) -> None:
        """No Z and no TZID yields a naive date-time."""
        result = coerce_date_time(_prop("20020110T123045"))

        assert result == NaiveDateTime(value=datetime(2002, 1, 10, 12, 30, 45))
        assert result.value.tzinfo is None

    def test_z_suffix_is_utc(self) -> None:
        """A trailing Z yields a UTC date-time with the same fields."""
        result = coerce_date_time(_prop("20020110T123045Z"))

        assert isinstance(result, UtcDateTime)
        assert result.value == datetime(2002, 1, 10, 12, 30, 45, tzinfo=timezone.utc)
        assert result.value.tzinfo == timezone.utc

    def test_tzid_is_zoned(self) -> None:
        """A TZID parameter yields a zoned date-time with the same wall time."""
        result = coerce_date_time(_prop("20020110T123045", TZID="Europe/Paris"))

        assert isinstance(result, ZonedDateTime)
        assert result.tzid == "Europe/Paris"
        assert result.value.replace(tzinfo=None) == datetime(2002, 1, 10, 12, 30, 45)
        assert result.value.tzinfo == ZoneInfo("Europe/Paris")
        assert result.value.utcoffset() == timedelta(hours=1)

    def test_tzid_parameter_name_is_case_insensitive(self) -> None:
        """A lower-case tzid parameter is still recognised."""
        result = coerce_date_time(_prop("20020110T123045", tzid="Europe/Paris"))

        assert isinstance(result, ZonedDateTime)

    def test_last_tzid_occurrence_wins(self) -> None:
        """With repeated TZID parameters the last one is used."""
        prop = RawProperty.build(
            "DTSTART",
            "20020710T120000",
            [("TZID", ["Europe/Paris"]), ("TZID", ["America/New_York"])],
        )

        result = coerce_date_time(prop)

        assert isinstance(result, ZonedDateTime)
        assert result.tzid == "America/New_York"
        assert result.value.utcoffset() == timedelta(hours=-4)

    def test_last_value_of_tzid_is_used(self) -> None:
        """A multi-valued TZID parameter uses its last value."""
        prop = RawProperty.build(
            "DTSTART", "20020110T120000", [("TZID", ["Europe/Paris", "Asia/Tokyo"])]
        )

        result = coerce_date_time(prop)

        assert isinstance(result, ZonedDateTime)
        assert result.tzid == "Asia/Tokyo"

    def test_unrelated_parameters_are_ignored(self) -> None:
        """Parameters other than TZID do not affect the result."""
        result = coerce_date_time(_prop("20020110T123045Z", VALUE="DATE-TIME"))

        assert isinstance(result, UtcDateTime)


class TestDateTimeInvalid:
    """DATE-TIME values that must be rejected."""

    def test_utc_with_tzid_fails(self) -> None:
        """Z suffix together with TZID is rejected."""
        with pytest.raises(InvalidPropertyValueError) as exc_info:
            coerce_date_time(_prop("20020110T123045Z", TZID="Europe/Paris"))

        assert exc_info.value.found == "20020110T123045Z"
        assert exc_info.value.expected == "DATE-TIME"
        assert exc_info.value.property == "DTSTART"

    def test_unknown_zone_fails(self) -> None:
        """An identifier missing from the zone database is rejected."""
        with pytest.raises(InvalidPropertyValueError):
            coerce_date_time(_prop("20020110T123045", TZID="Middle_Earth/Minas_Tirith"))

    @pytest.mark.parametrize("tzid", ["", "/etc/passwd", "../Europe/Paris"])
    def test_invalid_zone_key_fails(self, tzid: str) -> None:
        """Zone keys the database refuses to look up are rejected too."""
        with pytest.raises(InvalidPropertyValueError):
            coerce_date_time(_prop("20020110T123045", TZID=tzid))

    def test_missing_value_fails_with_empty_found(self) -> None:
        """A property without a value fails and reports an empty string."""
        with pytest.raises(InvalidPropertyValueError) as exc_info:
            coerce_date_time(RawProperty("DTSTART"))

        assert exc_info.value.found == ""

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "Z",
            "20020110",
            "20020110T1230",
            "20020110T123045.5",
            "2002-01-10T12:30:45",
            "20020110 123045",
            "20020110T123045ZZ",
            "20020110t123045",
            "20020110T123045z",
            "020020110T123045",
            " 20020110T123045",
        ],
    )
    def test_malformed_layout_fails(self, value: str) -> None:
        """Anything but YYYYMMDDTHHMMSS[Z] is rejected, citing the raw text."""
        with pytest.raises(InvalidPropertyValueError) as exc_info:
            coerce_date_time(_prop(value))

        assert exc_info.value.found == value

    @pytest.mark.parametrize(
        "value",
        ["20021310T123045", "20020230T123045", "20020110T250000", "20020110T123060"],
    )
    def test_out_of_range_fields_fail(self, value: str) -> None:
        """Well-shaped but impossible dates and times are rejected."""
        with pytest.raises(InvalidPropertyValueError):
            coerce_date_time(_prop(value))

    def test_reported_property_name_can_be_overridden(self) -> None:
        """property_name replaces the name as written in the input."""
        prop = RawProperty("dtend", "garbage")

        with pytest.raises(InvalidPropertyValueError) as exc_info:
            coerce_date_time(prop, property_name="DTEND")

        assert str(exc_info.value) == "invalid property value DTEND:'garbage', expected DATE-TIME"


class TestDateTimeZoneResolution:
    """Zone lookup injection and DST edge cases."""

    def test_injected_resolver_is_used(self) -> None:
        """A custom resolver replaces the system zone database."""
        fixed = timezone(timedelta(hours=5, minutes=30))
        zones = static_zones({"Office/Local": fixed})

        result = coerce_date_time(_prop("20020110T120000", TZID="Office/Local"), zones=zones)

        assert isinstance(result, ZonedDateTime)
        assert result.value.tzinfo == fixed

    def test_injected_resolver_unknown_zone_fails(self) -> None:
        """A KeyError from a custom resolver becomes a coercion failure."""
        zones = static_zones({})

        with pytest.raises(InvalidPropertyValueError):
            coerce_date_time(_prop("20020110T120000", TZID="Europe/Paris"), zones=zones)

    def test_dst_gap_resolves_deterministically(self) -> None:
        """A nonexistent local time keeps the pre-transition offset."""
        result = coerce_date_time(_prop("20210328T023000", TZID="Europe/Paris"))

        assert isinstance(result, ZonedDateTime)
        assert result.value.fold == 0
        assert result.value.hour == 2
        assert result.value.minute == 30
        assert result.value.utcoffset() == timedelta(hours=1)

    def test_dst_fold_picks_first_occurrence(self) -> None:
        """An ambiguous local time resolves to the earlier (summer) offset."""
        result = coerce_date_time(_prop("20211031T023000", TZID="Europe/Paris"))

        assert isinstance(result, ZonedDateTime)
        assert result.value.fold == 0
        assert result.value.utcoffset() == timedelta(hours=2)

    def test_dst_resolution_is_repeatable(self) -> None:
        """Coercing the same ambiguous value twice gives equal results."""
        prop = _prop("20211031T023000", TZID="Europe/Paris")

        assert coerce_date_time(prop) == coerce_date_time(prop)


# ---------------------------------------------------------------------------
# INTEGER
# ---------------------------------------------------------------------------


class TestInteger:
    """Signed 32-bit integer coercion."""

    @pytest.mark.parametrize("number", [0, 1, -1, 42, 2**31 - 1, -(2**31)])
    def test_decimal_text_round_trips(self, number: int) -> None:
        """The decimal representation of an in-range integer coerces back to it."""
        assert coerce_integer(RawProperty("SEQUENCE", str(number))) == number

    def test_explicit_plus_sign(self) -> None:
        """A leading + is accepted."""
        assert coerce_integer(RawProperty("SEQUENCE", "+7")) == 7

    def test_leading_zeros(self) -> None:
        """Leading zeros are accepted."""
        assert coerce_integer(RawProperty("SEQUENCE", "007")) == 7

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "1.5", "1e3", " 1", "1 ", "1_000", "0x10", "+", "-", "١٢"],
    )
    def test_non_numeric_fails(self, value: str) -> None:
        """Anything but an optional sign and ASCII digits is rejected."""
        with pytest.raises(InvalidPropertyValueError) as exc_info:
            coerce_integer(RawProperty("SEQUENCE", value))

        assert exc_info.value.found == value
        assert exc_info.value.expected == "INTEGER"

    @pytest.mark.parametrize("value", [str(2**31), str(-(2**31) - 1), "99999999999999999999"])
    def test_out_of_range_fails(self, value: str) -> None:
        """Values outside the signed 32-bit range are rejected."""
        with pytest.raises(InvalidPropertyValueError):
            coerce_integer(RawProperty("SEQUENCE", value))

    def test_missing_value_fails(self) -> None:
        """A property without a value is rejected."""
        with pytest.raises(InvalidPropertyValueError) as exc_info:
            coerce_integer(RawProperty("SEQUENCE"))

        assert exc_info.value.found == ""


# ---------------------------------------------------------------------------
# TEXT
# ---------------------------------------------------------------------------


class TestText:
    """TEXT unescaping."""

    @pytest.mark.parametrize("value", ["", "plain text", "a;b,c", "Ünïcödé ✓", "50% off"])
    def test_text_without_backslash_is_unchanged(self, value: str) -> None:
        """Input without a backslash comes back unchanged."""
        assert coerce_text(RawProperty("SUMMARY", value)) == value

    def test_missing_value_is_empty_string(self) -> None:
        """A missing value yields the empty string, not a failure."""
        assert coerce_text(RawProperty("SUMMARY")) == ""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("a\\;b", "a;b"),
            ("a\\,b", "a,b"),
            ("a\\nb", "a\nb"),
            ("a\\Nb", "a\nb"),
            ("a\\\\b", "a\\b"),
        ],
    )
    def test_known_escapes(self, value: str, expected: str) -> None:
        """Each supported escape sequence is replaced."""
        assert coerce_text(RawProperty("SUMMARY", value)) == expected

    def test_unknown_escape_is_kept_verbatim(self) -> None:
        """An unsupported backslash sequence passes through untouched."""
        assert coerce_text(RawProperty("SUMMARY", "C:\\temp\\x")) == "C:\\temp\\x"

    def test_trailing_backslash_is_kept(self) -> None:
        """A lone trailing backslash is not an escape."""
        assert coerce_text(RawProperty("SUMMARY", "end\\")) == "end\\"

    def test_escaped_backslash_is_not_rescanned(self) -> None:
        """``\\\\;`` is an escaped backslash followed by a plain semicolon."""
        assert coerce_text(RawProperty("SUMMARY", "\\\\;")) == "\\;"

    def test_escaped_backslash_before_n(self) -> None:
        """``\\\\n`` is a literal backslash and ``n``, not a line break."""
        assert coerce_text(RawProperty("SUMMARY", "a\\\\nb")) == "a\\nb"

    def test_mixed_escapes(self) -> None:
        """Several escapes in one value are all handled in one pass."""
        value = "Room 1\\, Floor 2\\; see\\nmap \\\\ legend"

        assert coerce_text(RawProperty("LOCATION", value)) == "Room 1, Floor 2; see\nmap \\ legend"
