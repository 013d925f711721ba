"""Custom exceptions for the nlcep parsing pipeline.

:func:`nlcep.parse` never raises for bad input; it returns a
:class:`~nlcep.models.event.ParseFailure` instead.  These exceptions exist
for callers who prefer exceptions (:func:`nlcep.parse_or_raise`) and for
the hand-off between the resolver and the parser.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nlcep.models.event import ParseFailure
    from nlcep.models.tokens import DateToken


class EventParseError(Exception):
    """Raised by :func:`nlcep.parse_or_raise` when parsing fails.

    Attributes:
        failure: The typed failure value that :func:`nlcep.parse` would
            have returned.
    """

    def __init__(self, failure: ParseFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure

    @property
    def kind(self) -> str:
        return self.failure.kind


class InvalidDateError(ValueError):
    """Raised by the resolver when a date token names an impossible date.

    The parser catches this and converts it to an ``InvalidDate``
    :class:`~nlcep.models.event.ParseFailure`.

    Attributes:
        token: The date token that could not be resolved.
    """

    def __init__(self, message: str, token: DateToken) -> None:
        super().__init__(message)
        self.token = token
