"""Date recognizer.

Scans a sentence for date expressions and returns
:class:`~nlcep.models.tokens.Candidate` objects wrapping one of the
:data:`~nlcep.models.tokens.DateToken` variants.  Three independent
matchers run over the whole text:

- **absolute** -- ``D.M.``, ``D.M.YY`` or ``D.M.YYYY`` (day first, dot
  separated).
- **relative** -- a fixed vocabulary of day words (``today``,
  ``tomorrow``, ``day after tomorrow``...).
- **weekday** -- English weekday names, optionally qualified by ``next``
  or ``this``.

Absolute dates and weekdays absorb a leading ``on`` so that phrases like
"lunch on Friday" leave a clean summary behind.  Day words and weekday
names absorb a trailing possessive ("today's standup").  The recognizer
never fails; it only reports what it found.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from nlcep.models.tokens import AbsoluteDate, Candidate, DateToken, NamedWeekday, RelativeDay, Span
from nlcep.recognizers.selection import select_best

# Tie-break ranks: absolute dates are the least ambiguous.
PRIORITY_ABSOLUTE = 0
PRIORITY_RELATIVE = 1
PRIORITY_WEEKDAY = 2

# Matches "18.11.", "1.2.", "31.02.2025", "18.11.24", optionally preceded
# by "on". A two-digit year is read as 20YY.
# Must not be glued to a preceding word/number or followed by a digit.
_ABSOLUTE_RE = re.compile(
    r"(?<![\w.])(?:on\s+)?(?P<day>\d{1,2})\.(?P<month>\d{1,2})\.(?P<year>\d{4}|\d{2})?(?!\d)",
    re.IGNORECASE,
)

# Longest phrases first so the alternation prefers them.
_RELATIVE_WORDS: dict[str, int] = {
    "day after tomorrow": 2,
    "day before yesterday": -2,
    "tomorrow": 1,
    "today": 0,
    "tonight": 0,
    "yesterday": -1,
}

_RELATIVE_RE = re.compile(
    r"\b(?:the\s+)?(?P<word>"
    + "|".join(r"\s+".join(phrase.split()) for phrase in _RELATIVE_WORDS)
    + r")(?:['’]s)?\b",
    re.IGNORECASE,
)

# Day-of-week lookup (Monday=0 ... Sunday=6, matching date.weekday())
_WEEKDAYS: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

_WEEKDAY_RE = re.compile(
    r"\b(?:on\s+)?(?:(?P<qualifier>next|this)\s+)?(?P<name>"
    + "|".join(_WEEKDAYS)
    + r")(?:['’]s)?\b",
    re.IGNORECASE,
)


def _expand_year(digits: str | None) -> int | None:
    if digits is None:
        return None
    year = int(digits)
    return 2000 + year if len(digits) == 2 else year


def _match_absolute(text: str) -> Iterator[Candidate[DateToken]]:
    for match in _ABSOLUTE_RE.finditer(text):
        day = int(match.group("day"))
        month = int(match.group("month"))
        # Out-of-range numerals are not dates at all; day-vs-month
        # validity is the resolver's job.
        if not (1 <= month <= 12 and 1 <= day <= 31):
            continue
        year = _expand_year(match.group("year"))
        span = Span(match.start(), match.end())
        yield Candidate(span, AbsoluteDate(day, month, year, span), PRIORITY_ABSOLUTE)


def _match_relative(text: str) -> Iterator[Candidate[DateToken]]:
    for match in _RELATIVE_RE.finditer(text):
        phrase = " ".join(match.group("word").lower().split())
        span = Span(match.start(), match.end())
        yield Candidate(span, RelativeDay(_RELATIVE_WORDS[phrase], span), PRIORITY_RELATIVE)


def _match_weekday(text: str) -> Iterator[Candidate[DateToken]]:
    for match in _WEEKDAY_RE.finditer(text):
        qualifier = match.group("qualifier")
        span = Span(match.start(), match.end())
        token = NamedWeekday(
            weekday=_WEEKDAYS[match.group("name").lower()],
            qualifier=qualifier.lower() if qualifier else None,  # type: ignore[arg-type]
            span=span,
        )
        yield Candidate(span, token, PRIORITY_WEEKDAY)


def find_date_candidates(text: str) -> list[Candidate[DateToken]]:
    """Return every date expression found in *text*, in matcher order.

    Args:
        text: The raw input sentence.

    Returns:
        Candidates from all three matchers; may be empty.
    """
    return [
        *_match_absolute(text),
        *_match_relative(text),
        *_match_weekday(text),
    ]


def find_date(text: str) -> Candidate[DateToken] | None:
    """Return the single best date candidate in *text*, or ``None``.

    Selection follows :func:`~nlcep.recognizers.selection.select_best`:
    earliest start, then longest, then absolute < relative < weekday.
    """
    return select_best(find_date_candidates(text))
