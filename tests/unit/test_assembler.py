"""Unit tests for summary reconstruction and event assembly."""

from __future__ import annotations

import datetime as dt

import pytest

from nlcep.assembler import assemble, build_summary, strip_spans
from nlcep.models.event import ResolvedEvent
from nlcep.models.tokens import Span


class TestStripSpans:
    """Removing spans and tidying the seams."""

    def test_date_time_and_location_removed(self) -> None:
        """All three claimed spans disappear from the summary."""
        text = "Meet with Johanna tomorrow 11:00, Graphic Plaza"

        result = strip_spans(text, [Span(18, 26), Span(27, 32), Span(32, 47)])

        assert result == "Meet with Johanna"

    def test_span_order_does_not_matter(self) -> None:
        """Spans may be passed in any order."""
        text = "Meet with Johanna tomorrow 11:00, Graphic Plaza"

        result = strip_spans(text, [Span(32, 47), Span(18, 26), Span(27, 32)])

        assert result == "Meet with Johanna"

    def test_span_in_the_middle_joins_words(self) -> None:
        """Text on both sides of a removed span is joined by one space."""
        assert strip_spans("Dinner tomorrow with Bob", [Span(7, 15)]) == "Dinner with Bob"

    @pytest.mark.parametrize(
        ("text", "span", "expected"),
        [
            ("Lunch, tomorrow", Span(7, 15), "Lunch"),
            ("tomorrow - standup", Span(0, 8), "standup"),
            ("Review; Friday", Span(8, 14), "Review"),
            ("Deadline: 18.11.", Span(10, 16), "Deadline"),
            ("Sprint planning – Monday", Span(18, 24), "Sprint planning"),
        ],
    )
    def test_stray_punctuation_next_to_span(self, text: str, span: Span, expected: str) -> None:
        """Separators left dangling at a seam are dropped."""
        assert strip_spans(text, [span]) == expected

    def test_punctuation_away_from_spans_is_kept(self) -> None:
        text = "Q3 review, part 2 tomorrow"

        assert strip_spans(text, [Span(18, 26)]) == "Q3 review, part 2"

    def test_whitespace_collapsed(self) -> None:
        """Runs of whitespace collapse to single spaces."""
        assert strip_spans("  lots   of   space tomorrow ", [Span(20, 28)]) == "lots of space"

    def test_no_spans(self) -> None:
        assert strip_spans(" plain  text ", []) == "plain text"

    def test_everything_removed(self) -> None:
        """Removing every character leaves an empty string."""
        assert strip_spans("tomorrow 11:00", [Span(0, 8), Span(9, 14)]) == ""


class TestBuildSummary:
    """The summary is never empty."""

    def test_remaining_text(self) -> None:
        """Whatever survives span removal is the summary."""
        assert build_summary("John's birthday 18.11.", [Span(16, 22)]) == "John's birthday"

    def test_falls_back_to_full_input(self) -> None:
        """An empty remainder falls back to the whole input."""
        assert build_summary("tomorrow 11:00", [Span(0, 8), Span(9, 14)]) == "tomorrow 11:00"

    def test_fallback_collapses_whitespace(self) -> None:
        assert build_summary(" tomorrow ,  11:00 ", [Span(1, 9), Span(13, 18)]) == "tomorrow , 11:00"


class TestAssemble:
    """Building the final ``ResolvedEvent``."""

    def test_builds_event(self) -> None:
        """``assemble`` combines summary, date, time and location."""
        event = assemble(
            "lunch next Monday @ Cafe Aalto",
            [Span(6, 17), Span(18, 30)],
            dt.date(2024, 11, 25),
            None,
            "Cafe Aalto",
        )

        assert isinstance(event, ResolvedEvent)
        assert event.summary == "lunch"
        assert event.date == dt.date(2024, 11, 25)
        assert event.time is None
        assert event.location == "Cafe Aalto"
