"""Configuration loading for ical-events.

Reads settings from environment variables, with ``.env`` support via
python-dotenv.  Every setting is optional; values that are present are
validated up front so a typo fails at start-up rather than mid-read.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from ical_events.log import resolve_level


class ConfigError(Exception):
    """Raised when configuration values are invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level name (``ICAL_LOG_LEVEL``, default ``"INFO"``).
        encoding: Codec used to decode calendar files
            (``ICAL_ENCODING``, default ``"utf-8"``).
    """

    log_level: str = "INFO"
    encoding: str = "utf-8"


def _valid_level(value: str) -> bool:
    try:
        resolve_level(value)
    except ValueError:
        return False
    return True


def _valid_encoding(value: str) -> bool:
    # Binary codecs such as rot13 or base64 exist but cannot decode bytes.
    try:
        b"".decode(value)
    except LookupError:
        return False
    return True


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.  Empty or whitespace-only
    variables count as unset.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If any variable holds an invalid value.  The message
            names **all** offending variables.
    """
    load_dotenv()

    checks = {
        "ICAL_LOG_LEVEL": ("log_level", _valid_level),
        "ICAL_ENCODING": ("encoding", _valid_encoding),
    }

    values: dict[str, str] = {}
    invalid: list[str] = []

    for env_var, (field_name, is_valid) in checks.items():
        raw = os.environ.get(env_var, "").strip()
        if not raw:
            continue
        if is_valid(raw):
            values[field_name] = raw
        else:
            invalid.append(f"{env_var}={raw!r}")

    if invalid:
        raise ConfigError(f"Invalid environment variables: {', '.join(invalid)}")

    return Settings(**values)
