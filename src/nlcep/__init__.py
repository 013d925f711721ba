"""nlcep: Natural Language Calendar Event Parser.

Turns sentences such as "John's birthday 18.11." or "Meeting about new
duck quotas tomorrow 11:00 @ A769" into a structured event with a
summary, a date, an optional time and an optional location.
"""

from __future__ import annotations

from nlcep.exceptions import EventParseError, InvalidDateError
from nlcep.models.event import ParseFailure, ParseOutcome, ResolvedEvent, outcome_to_payload
from nlcep.parser import parse, parse_or_raise

__version__ = "0.8.0"

__all__ = [
    "EventParseError",
    "InvalidDateError",
    "ParseFailure",
    "ParseOutcome",
    "ResolvedEvent",
    "outcome_to_payload",
    "parse",
    "parse_or_raise",
]
