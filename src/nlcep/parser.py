"""Single-sentence calendar event parser.

Runs the extraction pipeline over one input string:

1. find the date (mandatory),
2. find the time outside the date span (optional),
3. find the location outside both (optional),
4. resolve the tokens against the reference instant,
5. assemble the summary from the leftover text.

:func:`parse` returns a :class:`~nlcep.models.event.ResolvedEvent` or a
:class:`~nlcep.models.event.ParseFailure`; it does not raise for any
string input.  :func:`parse_or_raise` is the exception-flavoured variant.
"""

from __future__ import annotations

import datetime as dt
import logging

from nlcep.assembler import assemble
from nlcep.exceptions import EventParseError, InvalidDateError
from nlcep.models.event import ParseFailure, ParseOutcome, ResolvedEvent
from nlcep.models.tokens import Span
from nlcep.recognizers.dates import find_date
from nlcep.recognizers.locations import find_location
from nlcep.recognizers.times import find_time
from nlcep.resolver import resolve

logger = logging.getLogger(__name__)


def parse(text: str, now: dt.datetime | None = None) -> ParseOutcome:
    """Parse a free-form sentence into a calendar event.

    Args:
        text: The sentence, e.g. ``"Meet with Johanna tomorrow 11:00,
            Graphic Plaza"``.
        now: Reference instant for relative phrases such as
            ``tomorrow`` or ``next Monday``.  Defaults to the current
            local time.  Pass it explicitly for deterministic results.

    Returns:
        A :class:`ResolvedEvent` on success, otherwise a
        :class:`ParseFailure` with kind ``"NoDateFound"`` or
        ``"InvalidDate"``.
    """
    reference = now if now is not None else dt.datetime.now().astimezone()

    date_match = find_date(text)
    if date_match is None:
        logger.debug("No date expression in %r", text)
        return ParseFailure(kind="NoDateFound", message="No date expression found")

    claimed: list[Span] = [date_match.span]

    time_match = find_time(text, exclude=claimed)
    if time_match is not None:
        claimed.append(time_match.span)

    location_match = find_location(text, exclude=claimed)
    location = None
    if location_match is not None:
        claimed.append(location_match.span)
        location = location_match.token.value

    logger.debug(
        "Selected date=%s time=%s location=%s",
        date_match.span,
        time_match.span if time_match else None,
        location_match.span if location_match else None,
    )

    try:
        date, time = resolve(
            date_match.token,
            time_match.token if time_match else None,
            reference,
        )
    except InvalidDateError as exc:
        span = exc.token.span
        logger.debug("Invalid date %r: %s", span.slice(text), exc)
        return ParseFailure(
            kind="InvalidDate",
            message=str(exc),
            span=(span.start, span.end),
            text=span.slice(text).strip(),
        )

    return assemble(text, claimed, date, time, location)


def parse_or_raise(text: str, now: dt.datetime | None = None) -> ResolvedEvent:
    """Like :func:`parse` but raise instead of returning a failure.

    Raises:
        EventParseError: Carrying the :class:`ParseFailure` as
            ``.failure``.
    """
    outcome = parse(text, now)
    if isinstance(outcome, ParseFailure):
        raise EventParseError(outcome)
    return outcome
