"""Location recognizer.

A location is introduced by a marker followed by whitespace:

- ``@`` anywhere in the text (``"standup @ A769"``),
- the word ``at`` (``"dinner at Cafe Aalto"``),
- a comma directly after the date or time (``"tomorrow 11:00, Graphic
  Plaza"``).

The value runs from the first non-space character after the marker up to
the first clause boundary: a comma, a semicolon, an ``@``, a newline,
the start of an excluded (date/time) span, or the end of the text.  Trailing
whitespace and sentence punctuation are not part of the value, but they
are part of the span so the summary does not inherit them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from nlcep.models.tokens import Candidate, LocationToken, Span
from nlcep.recognizers.selection import select_best

PRIORITY_AT_SIGN = 0
PRIORITY_COMMA = 1
PRIORITY_AT_WORD = 2

CLAUSE_BOUNDARIES = frozenset(",;@\n")

_AT_SIGN_RE = re.compile(r"@(?=\s)")
_AT_WORD_RE = re.compile(r"\bat(?=\s)", re.IGNORECASE)
_COMMA_RE = re.compile(r",(?=\s)")

_TRAILING_PUNCTUATION = ".!?"


def _capture_value(text: str, marker: Span, exclude: list[Span]) -> tuple[str, int] | None:
    """Return ``(value, end_of_span)`` for the text after *marker*.

    Returns ``None`` when nothing usable follows the marker.
    """
    start = marker.end
    while start < len(text) and text[start].isspace() and text[start] != "\n":
        start += 1

    boundary = len(text)
    for index in range(start, len(text)):
        if text[index] in CLAUSE_BOUNDARIES:
            boundary = index
            break
    for span in exclude:
        if span.end > start:
            boundary = min(boundary, max(span.start, start))

    raw = text[start:boundary].rstrip()
    value = raw.rstrip(_TRAILING_PUNCTUATION).rstrip()
    if not value:
        return None
    return value, start + len(raw)


def _follows_excluded(text: str, position: int, exclude: list[Span]) -> bool:
    return any(span.end <= position and not text[span.end : position].strip() for span in exclude)


def _markers(text: str, exclude: list[Span]) -> Iterator[tuple[Span, str, int]]:
    for match in _AT_SIGN_RE.finditer(text):
        yield Span(match.start(), match.end()), "@", PRIORITY_AT_SIGN
    for match in _COMMA_RE.finditer(text):
        if _follows_excluded(text, match.start(), exclude):
            yield Span(match.start(), match.end()), ",", PRIORITY_COMMA
    for match in _AT_WORD_RE.finditer(text):
        yield Span(match.start(), match.end()), "at", PRIORITY_AT_WORD


def find_location_candidates(
    text: str,
    exclude: Iterable[Span] = (),
) -> list[Candidate[LocationToken]]:
    """Return every marker-introduced location in *text*.

    Args:
        text: The raw input sentence.
        exclude: Spans already claimed by other recognizers.  Markers
            inside them are ignored and values never extend into them.

    Returns:
        Candidates whose spans cover marker and value; may be empty.
    """
    excluded = list(exclude)
    candidates: list[Candidate[LocationToken]] = []
    for marker, name, priority in _markers(text, excluded):
        if any(marker.overlaps(span) for span in excluded):
            continue
        captured = _capture_value(text, marker, excluded)
        if captured is None:
            continue
        value, end = captured
        span = Span(marker.start, end)
        candidates.append(Candidate(span, LocationToken(value, name, span), priority))
    return candidates


def find_location(
    text: str,
    exclude: Iterable[Span] = (),
) -> Candidate[LocationToken] | None:
    """Return the best location candidate, or ``None``.

    Earliest marker wins; ties go to the longer capture, then to
    ``@`` over ``,`` over ``at``.
    """
    return select_best(find_location_candidates(text, exclude))
