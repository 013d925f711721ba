"""Time-of-day recognizer.

Finds 24-hour ``H:MM`` / ``HH:MM`` expressions, optionally preceded by
``at`` ("lunch at 12:30") and optionally carrying seconds ("12:30:15").
Seconds are validated but not kept; an event time has minute precision.
Values outside 0--23 / 0--59 are silently skipped, and candidates
overlapping an excluded span (normally the date) are dropped.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from nlcep.models.tokens import Candidate, Span, TimeToken
from nlcep.recognizers.selection import drop_overlapping, select_best

_TIME_RE = re.compile(
    r"(?<![\w:.])(?:at\s+)?(?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2}))?(?![\d:])",
    re.IGNORECASE,
)


def find_time_candidates(
    text: str,
    exclude: Iterable[Span] = (),
) -> list[Candidate[TimeToken]]:
    """Return every valid time expression in *text* outside *exclude*."""
    candidates: list[Candidate[TimeToken]] = []
    for match in _TIME_RE.finditer(text):
        hour = int(match.group("hour"))
        minute = int(match.group("minute"))
        second = int(match.group("second") or 0)
        if hour > 23 or minute > 59 or second > 59:
            continue
        span = Span(match.start(), match.end())
        candidates.append(Candidate(span, TimeToken(hour, minute, span)))
    return drop_overlapping(candidates, exclude)


def find_time(text: str, exclude: Iterable[Span] = ()) -> Candidate[TimeToken] | None:
    """Return the earliest (then longest) time candidate, or ``None``."""
    return select_best(find_time_candidates(text, exclude))
