"""Shared fixtures for nlcep tests."""

from __future__ import annotations

import datetime as dt
import logging
import sys
from collections.abc import Generator

import pytest

# Sunday, 17 November 2024.
REFERENCE_NOW = dt.datetime(2024, 11, 17, 9, 30, tzinfo=dt.timezone.utc)


@pytest.fixture()
def now() -> dt.datetime:
    """The reference instant most tests resolve relative dates against."""
    return REFERENCE_NOW


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all nlcep-related environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("nlcep.config.load_dotenv", lambda *_a, **_kw: None)
    for key in ("LOG_LEVEL", "TIMEZONE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture(autouse=True)
def _reset_excepthook() -> Generator[None, None, None]:
    """Undo ``install_excepthook`` calls made by the CLI under test."""
    original = sys.excepthook
    yield
    sys.excepthook = original
