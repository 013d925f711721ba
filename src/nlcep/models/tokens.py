"""Token data models produced by the recognizers.

These dataclasses describe *where* something was found in the input text
and *what* it looked like, before any calendar arithmetic happens.  They
are intentionally simple stdlib dataclasses (not Pydantic): they never
cross the library boundary and are discarded once a parse completes.

The date tokens form a closed union, :data:`DateToken`:

- :class:`AbsoluteDate` -- ``18.11.`` or ``18.11.2025``.
- :class:`RelativeDay` -- ``today``, ``tomorrow``, ``day after tomorrow``...
- :class:`NamedWeekday` -- ``Monday``, ``next Monday``, ``this Friday``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union

T = TypeVar("T")

WeekdayQualifier = Literal["this", "next"]


@dataclass(frozen=True, order=True)
class Span:
    """A half-open ``[start, end)`` character range into the input text.

    Attributes:
        start: Index of the first character of the match.
        end: Index one past the last character of the match.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span: [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, other: Span) -> bool:
        """Whether the two ranges share at least one character."""
        return self.start < other.end and other.start < self.end

    def slice(self, text: str) -> str:
        """Return the substring of *text* covered by this span."""
        return text[self.start : self.end]


@dataclass(frozen=True)
class AbsoluteDate:
    """A day-first numeric date such as ``18.11.`` or ``31.02.2025``.

    Attributes:
        day: Day-of-month numeral as written (not yet validated against
            the month).
        month: Month numeral, 1--12.
        year: Four-digit year, or ``None`` when the year was omitted and
            has to be inferred.
        span: Where the date was found.
    """

    day: int
    month: int
    year: int | None
    span: Span


@dataclass(frozen=True)
class RelativeDay:
    """A day word with a fixed offset from the reference date.

    Attributes:
        offset: Days from the reference date (``1`` for *tomorrow*).
        span: Where the word was found.
    """

    offset: int
    span: Span


@dataclass(frozen=True)
class NamedWeekday:
    """A weekday name, optionally qualified by ``this`` or ``next``.

    Attributes:
        weekday: Day of week, Monday=0 ... Sunday=6 (as
            :meth:`datetime.date.weekday`).
        qualifier: ``"next"`` to skip the nearest occurrence, ``"this"``
            or ``None`` for the nearest occurrence (possibly today).
        span: Where the phrase was found.
    """

    weekday: int
    qualifier: WeekdayQualifier | None
    span: Span


DateToken = Union[AbsoluteDate, RelativeDay, NamedWeekday]


@dataclass(frozen=True)
class TimeToken:
    """A 24-hour time of day such as ``11:00``.

    Attributes:
        hour: 0--23.
        minute: 0--59.
        span: Where the time was found.
    """

    hour: int
    minute: int
    span: Span


@dataclass(frozen=True)
class LocationToken:
    """A location value introduced by a marker (``@``, ``at`` or ``,``).

    Attributes:
        value: The cleaned location text.
        marker: The marker that introduced it, lower-cased.
        span: Covers both the marker and the value, so removing it from
            the input leaves no dangling marker behind.
    """

    value: str
    marker: str
    span: Span


@dataclass(frozen=True)
class Candidate(Generic[T]):
    """One possible match yielded by a recognizer.

    Attributes:
        span: Where the match was found.
        token: The recognized token.
        priority: Tie-break rank when two candidates share start and
            length; lower wins.
    """

    span: Span
    token: T
    priority: int = 0

    @property
    def sort_key(self) -> tuple[int, int, int]:
        """Earliest start first, then longest, then lowest priority."""
        return (self.span.start, -self.span.length, self.priority)
