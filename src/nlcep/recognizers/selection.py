"""Candidate selection shared by all recognizers.

Every recognizer yields zero or more :class:`~nlcep.models.tokens.Candidate`
objects and picks one with the same rule: the match starting earliest in
the text wins; on equal start the longer match wins; if still tied the
lower ``priority`` wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from nlcep.models.tokens import Candidate, Span

T = TypeVar("T")


def select_best(candidates: Iterable[Candidate[T]]) -> Candidate[T] | None:
    """Return the winning candidate, or ``None`` if there are none."""
    return min(candidates, key=lambda c: c.sort_key, default=None)


def drop_overlapping(
    candidates: Iterable[Candidate[T]],
    exclude: Iterable[Span],
) -> list[Candidate[T]]:
    """Remove candidates that overlap any of the *exclude* spans."""
    excluded = list(exclude)
    return [c for c in candidates if not any(c.span.overlaps(span) for span in excluded)]
