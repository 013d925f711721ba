"""Console logging for the ``nlcep`` command.

Library modules only ever call :func:`logging.getLogger`; nothing under
:mod:`nlcep` attaches a handler on import.  The CLI calls
:func:`setup_logging` once it knows the configured level, which installs
a single stderr handler on the root logger.  Records look like::

    2024-11-17T09:30:00 | DEBUG    | nlcep.parser | Selected date ...
"""

from __future__ import annotations

import logging
import sys
from types import TracebackType

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


class _ConsoleHandler(logging.StreamHandler):
    """Stderr handler owned by :func:`setup_logging`."""

    def __init__(self, level: int) -> None:
        super().__init__(sys.stderr)
        self.setLevel(level)
        self.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Invalid log level: {level!r}")
    return number


def setup_logging(level: str = "INFO") -> None:
    """Point the root logger at stderr using :data:`LOG_FORMAT`.

    A second call only adjusts the level of the handler installed by the
    first; handlers attached by a host application are left alone.

    Raises:
        ValueError: If *level* is not a logging level name.
    """
    number = _level_number(level)
    root = logging.getLogger()
    root.setLevel(number)

    owned = [h for h in root.handlers if isinstance(h, _ConsoleHandler)]
    if owned:
        for handler in owned:
            handler.setLevel(number)
    else:
        root.addHandler(_ConsoleHandler(number))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _report_uncaught(
    exc_type: type[BaseException],
    exc_value: BaseException,
    exc_tb: TracebackType | None,
) -> None:
    # Ctrl-C keeps the interpreter's usual quiet exit.
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_tb)
        return
    get_logger("nlcep").critical(
        "Unhandled %s", exc_type.__name__, exc_info=(exc_type, exc_value, exc_tb)
    )


def install_excepthook() -> None:
    """Log anything that escapes ``main`` at CRITICAL on the ``nlcep`` logger.

    Purely diagnostic; parse results are unaffected.
    """
    sys.excepthook = _report_uncaught
