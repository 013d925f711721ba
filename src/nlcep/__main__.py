"""Entry point for ``python -m nlcep``.

Joins the positional arguments into one sentence, parses it and prints
the resulting event.  Uses stdlib :mod:`argparse` for argument parsing.

Exit codes:
    0 -- The sentence was parsed into an event.
    1 -- Parsing failed (no date / invalid date) or configuration error.
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from dataclasses import replace

from nlcep.config import ConfigError, load_settings, validate_timezone
from nlcep.log import install_excepthook, setup_logging
from nlcep.models.event import ParseFailure
from nlcep.output import print_outcome
from nlcep.parser import parse

logger = logging.getLogger(__name__)


def _iso_datetime(value: str) -> dt.datetime:
    """``argparse`` type for ``--now``."""
    try:
        return dt.datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 datetime: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="nlcep",
        description="Parse a natural-language sentence into a calendar event.",
    )
    parser.add_argument(
        "words",
        nargs="+",
        help='The sentence to parse, e.g. "lunch next Monday @ Cafe Aalto".',
    )
    parser.add_argument(
        "--now",
        type=_iso_datetime,
        default=None,
        help=(
            "Reference instant for relative dates, ISO 8601 "
            "(defaults to the current time)."
        ),
    )
    parser.add_argument(
        "--tz",
        type=str,
        default=None,
        help="IANA timezone for the reference instant (defaults to TIMEZONE from config).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the machine-readable payload instead of a summary block.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the nlcep CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code: ``0`` on success, ``1`` on failure.
    """
    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])

    # --- Configuration ------------------------------------------------
    try:
        settings = load_settings()
        if args.tz:
            settings = replace(settings, timezone=validate_timezone(args.tz))
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)
    install_excepthook()

    # --- Reference instant --------------------------------------------
    now = args.now
    if now is None:
        now = settings.reference_now()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=settings.tzinfo)

    # --- Parse --------------------------------------------------------
    text = " ".join(args.words)
    logger.debug("Parsing %r at %s", text, now.isoformat())
    outcome = parse(text, now)

    print_outcome(text, outcome, as_json=args.json)

    return 1 if isinstance(outcome, ParseFailure) else 0


if __name__ == "__main__":
    raise SystemExit(main())
