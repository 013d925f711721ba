"""Data models for nlcep."""

from __future__ import annotations

from nlcep.models.event import ParseFailure, ParseOutcome, ResolvedEvent, outcome_to_payload
from nlcep.models.tokens import (
    AbsoluteDate,
    Candidate,
    DateToken,
    LocationToken,
    NamedWeekday,
    RelativeDay,
    Span,
    TimeToken,
)

__all__ = [
    "AbsoluteDate",
    "Candidate",
    "DateToken",
    "LocationToken",
    "NamedWeekday",
    "ParseFailure",
    "ParseOutcome",
    "RelativeDay",
    "ResolvedEvent",
    "Span",
    "TimeToken",
    "outcome_to_payload",
]
