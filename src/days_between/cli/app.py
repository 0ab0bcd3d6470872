"""CLI application entry point for days-between.

This module is the **sole error boundary** for the entire application.
It catches :class:`~days_between.exceptions.DaysBetweenError` and
``KeyboardInterrupt``, rendering user-friendly messages via Rich and
returning well-defined exit codes.  Any other exception is a defect and
is deliberately allowed to escape with its traceback.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :func:`days_between.api.days_between_dates`.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from rich.markup import escape

from days_between.api import days_between_dates
from days_between.cli import exit_codes
from days_between.cli.console import console, err_console
from days_between.core.models import DaysBetweenResult
from days_between.exceptions import DaysBetweenError
from days_between.utils.logging import configure_logging, get_logger
from days_between.version import __version__

logger = get_logger(__name__)

PROG: str = "days-between"

DESCRIPTION: str = "Calculate the number of days between 2 ISO-formatted dates."

EPILOG: str = f"""\
`start-date` defaults to today.

example:
    # Days from 17 August 2018 to 13 May 2020
    {PROG} 2018-08-17 2020-05-13
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser whose usage errors exit with ``GENERAL_ERROR`` and full help."""

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(exit_codes.GENERAL_ERROR, f"\n{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``days-between <end-date>``               — today to *end-date*
    * ``days-between <start-date> <end-date>``  — explicit range
    * ``days-between --version``
    """
    parser = _ArgumentParser(
        prog=PROG,
        usage="%(prog)s [options] [start-date] <end-date>",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing and counting steps to stderr.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit log records as JSON lines instead of console text.",
    )
    parser.add_argument(
        "dates",
        nargs="*",
        metavar="date",
        help="One or two dates formatted as yyyy-mm-dd.",
    )
    return parser


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def format_result(result: DaysBetweenResult) -> str:
    """Render *result* as ``"<start> – <end>: <days> days"``."""
    return f"{result.start_label} – {result.end_label}: {result.days} days"


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the days-between CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    DaysBetweenError
        Propagated from the core for :func:`run` to render.
    """
    parser = _build_parser()
    args = parser.parse_intermixed_args(argv)

    configure_logging(verbose=args.verbose, log_json=args.log_json)

    dates: list[str] = args.dates
    if not 1 <= len(dates) <= 2:
        logger.debug("wrong_argument_count", count=len(dates))
        parser.print_help(sys.stderr)
        return exit_codes.GENERAL_ERROR

    result = days_between_dates(*dates)
    console.print(escape(format_result(result)))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def run(argv: list[str] | None = None) -> int:
    """Run :func:`main`, mapping known errors to exit codes.

    Only :class:`DaysBetweenError` and ``KeyboardInterrupt`` are
    handled; every other exception propagates unchanged.
    """
    try:
        return main(argv)
    except DaysBetweenError as exc:
        err_console.print(escape(str(exc)))
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        return exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        return exit_codes.KEYBOARD_INTERRUPT


def cli() -> None:
    """Top-level entry point invoked by the console script."""
    sys.exit(run())
