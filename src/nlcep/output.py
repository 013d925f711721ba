"""Console output formatter for parse outcomes.

Renders a :data:`~nlcep.models.event.ParseOutcome` as a small bannered
block for the command-line tool.  :func:`format_outcome` returns the
string; :func:`print_outcome` writes it to stdout.
"""

from __future__ import annotations

import json
import sys

from nlcep.models.event import ParseFailure, ParseOutcome, ResolvedEvent, outcome_to_payload

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BANNER_WIDTH = 48
_SEPARATOR = "=" * _BANNER_WIDTH


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_outcome(text: str, outcome: ParseOutcome) -> str:
    """Render *outcome* for console display.

    Args:
        text: The input sentence that was parsed.
        outcome: The result of :func:`nlcep.parse`.

    Returns:
        A multi-line string without a trailing newline.
    """
    lines: list[str] = [_SEPARATOR, f"  Input: {text}", _SEPARATOR]

    if isinstance(outcome, ResolvedEvent):
        _append_event(lines, outcome)
    else:
        _append_failure(lines, outcome)

    lines.append(_SEPARATOR)
    return "\n".join(lines)


def format_json(outcome: ParseOutcome) -> str:
    """Render *outcome* as the host-facing JSON payload."""
    return json.dumps(outcome_to_payload(outcome), ensure_ascii=False)


def print_outcome(text: str, outcome: ParseOutcome, as_json: bool = False) -> None:
    """Format and print *outcome* to stdout."""
    rendered = format_json(outcome) if as_json else format_outcome(text, outcome)
    sys.stdout.write(rendered + "\n")


# ---------------------------------------------------------------------------
# Internal formatters
# ---------------------------------------------------------------------------


def _append_event(lines: list[str], event: ResolvedEvent) -> None:
    lines.append(f"  Summary:  {event.summary}")
    lines.append(f"  Date:     {event.date.isoformat()} ({event.date.strftime('%A')})")
    lines.append(f"  Time:     {event.time.strftime('%H:%M') if event.time else '(all day)'}")
    lines.append(f"  Location: {event.location or '(none)'}")


def _append_failure(lines: list[str], failure: ParseFailure) -> None:
    lines.append(f"  Error:    {failure.kind}")
    lines.append(f"  Message:  {failure.message}")
    if failure.text:
        lines.append(f"  Offending text: {failure.text!r}")
