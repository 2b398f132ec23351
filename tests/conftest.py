"""Shared fixtures for ical-events tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

_ENV_VARS = ("ICAL_LOG_LEVEL", "ICAL_ENCODING")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all ical-events environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("ical_events.config.load_dotenv", lambda *_a, **_kw: None)
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def calendar_text() -> str:
    """A small, valid calendar with one event and one skipped component."""
    return (
        "BEGIN:VCALENDAR\r\n"
        "VERSION:2.0\r\n"
        "PRODID:-//Example Corp//Calendar//EN\r\n"
        "BEGIN:VFREEBUSY\r\n"
        "UID:busy-1\r\n"
        "DTSTART:20020110T080000Z\r\n"
        "END:VFREEBUSY\r\n"
        "BEGIN:VEVENT\r\n"
        "UID:abc\r\n"
        "DTSTART:20020110T090000Z\r\n"
        "SUMMARY:Meeting\r\n"
        "END:VEVENT\r\n"
        "END:VCALENDAR\r\n"
    )


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
