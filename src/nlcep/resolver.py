"""Resolve recognized date/time tokens into concrete calendar values.

The resolver is the only stage that can fail: an absolute date that
names an impossible day (31.4., 30.2., 29.2.2025), or a day beyond the
range of :class:`datetime.date`, raises
:class:`~nlcep.exceptions.InvalidDateError`.  Relative phrases are
resolved against the *reference* instant supplied by the caller, in that
instant's own offset.
"""

from __future__ import annotations

import calendar
import datetime as dt

from nlcep.exceptions import InvalidDateError
from nlcep.models.tokens import AbsoluteDate, DateToken, NamedWeekday, RelativeDay, TimeToken

# 29.2. on a reference date just after a leap day needs at most 8 years
# to reach the next leap year (e.g. 2096 -> 2104).
_MAX_YEAR_LOOKAHEAD = 8


def reference_date(reference: dt.datetime) -> dt.date:
    """Calendar date of *reference* in its own timezone/offset."""
    return reference.date()


def _resolve_absolute(token: AbsoluteDate, today: dt.date) -> dt.date:
    if token.year is not None:
        try:
            return dt.date(token.year, token.month, token.day)
        except ValueError as exc:
            raise InvalidDateError(
                f"{token.day}.{token.month}.{token.year} is not a valid date", token
            ) from exc

    # Without a year, reject days no year can hold (leap year = max).
    if token.day > calendar.monthrange(2000, token.month)[1]:
        raise InvalidDateError(f"{token.day}.{token.month}. is not a valid date", token)

    for year in range(today.year, today.year + _MAX_YEAR_LOOKAHEAD + 1):
        if token.day > calendar.monthrange(year, token.month)[1]:
            continue
        candidate = dt.date(year, token.month, token.day)
        if candidate >= today:
            return candidate
    raise InvalidDateError(f"{token.day}.{token.month}. could not be placed in a year", token)


def _resolve_weekday(token: NamedWeekday, today: dt.date) -> dt.date:
    days_ahead = (token.weekday - today.weekday()) % 7
    if token.qualifier == "next":
        days_ahead += 7
    return today + dt.timedelta(days=days_ahead)


def resolve_date(token: DateToken, reference: dt.datetime) -> dt.date:
    """Turn a date token into a calendar date.

    Args:
        token: Any :data:`~nlcep.models.tokens.DateToken` variant.
        reference: The "now" instant relative phrases are measured from.

    Returns:
        The resolved calendar date.

    Raises:
        InvalidDateError: If the token names an impossible date, or one
            outside the range :class:`datetime.date` can represent.
        TypeError: If *token* is not a known date token variant.
    """
    today = reference_date(reference)
    try:
        if isinstance(token, AbsoluteDate):
            return _resolve_absolute(token, today)
        if isinstance(token, RelativeDay):
            return today + dt.timedelta(days=token.offset)
        if isinstance(token, NamedWeekday):
            return _resolve_weekday(token, today)
    except InvalidDateError:
        raise
    except (OverflowError, ValueError) as exc:
        raise InvalidDateError(
            f"Date relative to {today.isoformat()} is out of the supported range", token
        ) from exc
    raise TypeError(f"Unsupported date token: {token!r}")


def resolve_time(token: TimeToken | None) -> dt.time | None:
    if token is None:
        return None
    return dt.time(token.hour, token.minute)


def resolve(
    date_token: DateToken,
    time_token: TimeToken | None,
    reference: dt.datetime,
) -> tuple[dt.date, dt.time | None]:
    """Resolve both tokens at once.

    Raises:
        InvalidDateError: Propagated from :func:`resolve_date`.
    """
    return resolve_date(date_token, reference), resolve_time(time_token)
