"""Summary reconstruction and final event assembly.

Once the date, time and location spans are known, whatever is left of
the sentence becomes the summary.  Punctuation that only made sense next
to a removed span ("Lunch, tomorrow" or "tomorrow 11:00 - standup") is
dropped along with it, and whitespace is collapsed.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable

from nlcep.models.event import ResolvedEvent
from nlcep.models.tokens import Span

# Characters stripped from a segment edge that touches a removed span.
_STRAY_PUNCTUATION = ",;:-–—"
_STRIP_CHARS = _STRAY_PUNCTUATION + " \t\r\n"


def _collapse(text: str) -> str:
    return " ".join(text.split())


def strip_spans(text: str, spans: Iterable[Span]) -> str:
    """Remove *spans* from *text* and tidy the seams.

    Args:
        text: The original input.
        spans: Non-overlapping spans to remove, in any order.

    Returns:
        The remaining text with stray punctuation at each seam removed and
        whitespace collapsed.  May be empty.
    """
    segments: list[str] = []
    cursor = 0
    ordered = sorted(spans)
    for span in ordered:
        segments.append(text[cursor : span.start])
        cursor = max(cursor, span.end)
    segments.append(text[cursor:])

    cleaned: list[str] = []
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        if index > 0:
            segment = segment.lstrip(_STRIP_CHARS)
        if index < last:
            segment = segment.rstrip(_STRIP_CHARS)
        segment = _collapse(segment)
        if segment:
            cleaned.append(segment)
    return " ".join(cleaned)


def build_summary(text: str, spans: Iterable[Span]) -> str:
    """Return the event summary; never empty for non-blank *text*.

    Falls back to the whole (whitespace-collapsed) input when removing the
    spans leaves nothing behind, e.g. for ``"tomorrow 11:00"``.
    """
    summary = strip_spans(text, spans)
    return summary or _collapse(text)


def assemble(
    text: str,
    spans: Iterable[Span],
    date: dt.date,
    time: dt.time | None = None,
    location: str | None = None,
) -> ResolvedEvent:
    """Build the final :class:`~nlcep.models.event.ResolvedEvent`."""
    return ResolvedEvent(
        summary=build_summary(text, spans),
        date=date,
        time=time,
        location=location,
    )
