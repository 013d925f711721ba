"""Pydantic models for the externally visible parse result.

- :class:`ResolvedEvent` -- a successfully parsed event with a concrete
  calendar date and optional time of day.
- :class:`ParseFailure` -- a typed reason why no event could be produced.
- :data:`ParseOutcome` -- the union returned by :func:`nlcep.parse`.

Both models own plain copies of every extracted string and serialise to
JSON-friendly dicts via ``to_payload()`` for host adapters.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, field_validator

FailureKind = Literal["NoDateFound", "InvalidDate"]


# ---------------------------------------------------------------------------
# ResolvedEvent -- successful parse
# ---------------------------------------------------------------------------


class ResolvedEvent(BaseModel):
    """A calendar event extracted from a single sentence.

    Attributes:
        summary: What the event is about.  Never empty: when nothing is
            left after removing the date, time and location, the whole
            input is used.
        date: Calendar date the event takes place on.
        time: Time of day, or ``None`` for all-day / unspecified.
        location: Where the event takes place, or ``None``.
    """

    model_config = ConfigDict(frozen=True)

    summary: str
    date: dt.date
    time: dt.time | None = None
    location: str | None = None

    @field_validator("summary")
    @classmethod
    def _summary_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("summary must not be empty")
        return value

    def to_datetime(self, tzinfo: dt.tzinfo | None = None) -> dt.datetime:
        """Combine date and time; midnight is used when there is no time."""
        return dt.datetime.combine(self.date, self.time or dt.time(0, 0), tzinfo=tzinfo)

    def to_payload(self) -> dict[str, Any]:
        """Return the host-facing representation.

        Dates are ISO calendar dates and times are ``"HH:MM"`` strings.
        """
        return {
            "summary": self.summary,
            "date": self.date.isoformat(),
            "time": self.time.strftime("%H:%M") if self.time is not None else None,
            "location": self.location,
        }


# ---------------------------------------------------------------------------
# ParseFailure -- typed failure value
# ---------------------------------------------------------------------------


class ParseFailure(BaseModel):
    """Why a sentence could not be turned into an event.

    Attributes:
        kind: ``"NoDateFound"`` when no date expression exists, or
            ``"InvalidDate"`` when one was found but names an impossible
            calendar date.
        message: Human-readable description.
        span: ``(start, end)`` of the offending text, when there is one.
        text: The offending text itself, when there is one.
    """

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    message: str
    span: tuple[int, int] | None = None
    text: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "span": list(self.span) if self.span is not None else None,
            "text": self.text,
        }


ParseOutcome = Union[ResolvedEvent, ParseFailure]


def outcome_to_payload(outcome: ParseOutcome) -> dict[str, Any]:
    """Wrap an outcome in a discriminated dict for host adapters.

    Returns:
        ``{"ok": True, "event": {...}}`` on success or
        ``{"ok": False, "error": {...}}`` on failure.
    """
    if isinstance(outcome, ResolvedEvent):
        return {"ok": True, "event": outcome.to_payload()}
    return {"ok": False, "error": outcome.to_payload()}
