"""Tests for the console output formatter."""

from __future__ import annotations

import datetime as dt
import json

import pytest

from nlcep.models.event import ParseFailure, ResolvedEvent
from nlcep.output import format_json, format_outcome, print_outcome

_EVENT = ResolvedEvent(
    summary="lunch",
    date=dt.date(2024, 11, 25),
    time=dt.time(12, 0),
    location="Cafe Aalto",
)
_FAILURE = ParseFailure(
    kind="InvalidDate",
    message="31.2.2025 is not a valid date",
    span=(8, 18),
    text="31.02.2025",
)


class TestFormatOutcome:
    """Human-readable console block."""

    def test_event_block(self) -> None:
        """A success renders every field between separator lines."""
        text = format_outcome("lunch next Monday 12:00 @ Cafe Aalto", _EVENT)

        assert "Input: lunch next Monday 12:00 @ Cafe Aalto" in text
        assert "Summary:  lunch" in text
        assert "2024-11-25 (Monday)" in text
        assert "Time:     12:00" in text
        assert "Location: Cafe Aalto" in text
        assert text.startswith("=")
        assert text.endswith("=")

    def test_event_without_optional_fields(self) -> None:
        """Missing time and location get placeholder text."""
        event = ResolvedEvent(summary="gym", date=dt.date(2024, 11, 18))

        text = format_outcome("gym tomorrow", event)

        assert "(all day)" in text
        assert "Location: (none)" in text

    def test_failure_block(self) -> None:
        """A failure shows its kind, message and offending text."""
        text = format_outcome("meeting 31.02.2025", _FAILURE)

        assert "Error:    InvalidDate" in text
        assert "not a valid date" in text
        assert "'31.02.2025'" in text

    def test_failure_without_text(self) -> None:
        """The offending-text line is omitted when there is none."""
        text = format_outcome("nothing", ParseFailure(kind="NoDateFound", message="none"))

        assert "NoDateFound" in text
        assert "Offending text" not in text


class TestFormatJson:
    """Machine-readable JSON rendering."""

    def test_round_trips_payload(self) -> None:
        """The JSON text decodes back to the host payload."""
        data = json.loads(format_json(_EVENT))

        assert data == {
            "ok": True,
            "event": {
                "summary": "lunch",
                "date": "2024-11-25",
                "time": "12:00",
                "location": "Cafe Aalto",
            },
        }

    def test_non_ascii_kept(self) -> None:
        """Non-ASCII characters are written as-is, not escaped."""
        event = ResolvedEvent(summary="Sauna", date=dt.date(2024, 11, 18), location="Löyly")

        assert "Löyly" in format_json(event)


class TestPrintOutcome:
    """Writing either format to stdout."""

    def test_prints_block(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The default output is the bannered block."""
        print_outcome("lunch", _EVENT)

        assert "Summary:  lunch" in capsys.readouterr().out

    def test_prints_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """``as_json`` prints the payload instead."""
        print_outcome("lunch", _FAILURE, as_json=True)

        data = json.loads(capsys.readouterr().out)
        assert data["ok"] is False
        assert data["error"]["kind"] == "InvalidDate"
