"""Configuration loading for the nlcep command-line tool.

Reads settings from environment variables (with .env support via
python-dotenv).  The parsing core never reads configuration; the CLI uses
these settings to pick a log level and the timezone "now" is taken in.
"""

from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Settings loaded from environment variables.

    Attributes:
        log_level: Logging level (default ``"INFO"``).
        timezone: IANA timezone used for the reference instant
            (default ``"UTC"``).
    """

    log_level: str = "INFO"
    timezone: str = "UTC"

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def reference_now(self) -> dt.datetime:
        """Current instant in the configured timezone."""
        return dt.datetime.now(self.tzinfo)


def validate_timezone(name: str) -> str:
    """Return *name* if it is a known IANA timezone.

    Raises:
        ConfigError: If the timezone cannot be loaded.
    """
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Unknown timezone: {name!r}") from exc
    return name


def load_settings() -> Settings:
    """Load and validate settings from the environment.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.  ``LOG_LEVEL`` and ``TIMEZONE``
    are optional; empty values fall back to the defaults.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``TIMEZONE`` names an unknown zone or
            ``LOG_LEVEL`` is not a logging level.
    """
    load_dotenv()

    values: dict[str, str] = {}

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    timezone = os.environ.get("TIMEZONE", "").strip()

    if log_level:
        if log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ConfigError(f"Invalid LOG_LEVEL: {log_level!r}")
        values["log_level"] = log_level.upper()
    if timezone:
        values["timezone"] = validate_timezone(timezone)

    return Settings(**values)
