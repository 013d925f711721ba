"""Tests for nlcep package structure and imports."""

from __future__ import annotations

import re
import subprocess
import sys


def test_package_is_importable() -> None:
    """``import nlcep`` must succeed without errors."""
    import nlcep  # noqa: F401


def test_package_version_is_semver() -> None:
    """``__version__`` is a plain MAJOR.MINOR.PATCH string."""
    import nlcep

    assert re.match(r"^\d+\.\d+\.\d+$", nlcep.__version__)


def test_public_api() -> None:
    """The parse entry points and result types are exported at top level."""
    import nlcep

    for name in ("parse", "parse_or_raise", "ResolvedEvent", "ParseFailure", "EventParseError"):
        assert hasattr(nlcep, name)


def test_main_module_runs() -> None:
    """``python -m nlcep`` must run and exit cleanly."""
    result = subprocess.run(
        [sys.executable, "-m", "nlcep", "--now", "2024-11-17T09:30:00+00:00", "gym tomorrow"],
        capture_output=True,
        text=True,
        timeout=10,
    )
    assert result.returncode == 0
    assert "2024-11-18" in result.stdout
    assert "Traceback" not in result.stderr
