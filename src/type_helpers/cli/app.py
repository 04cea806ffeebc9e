"""CLI application entry point and command routing for type-helpers.

This module is the **sole error boundary** for the entire application.
It catches :class:`~type_helpers.exceptions.TypeHelpersError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No helper logic lives here — every command delegates to ``core``.
* Results are written to stdout; diagnostics and errors to stderr.
* This module is the only place that translates between the library
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from type_helpers.cli import exit_codes
from type_helpers.cli.console import console
from type_helpers.exceptions import TypeHelpersError
from type_helpers.utils.constants import DEFAULT_TRUNCATE_SUFFIX
from type_helpers.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``type-helpers format-date VALUE``
    * ``type-helpers truncate TEXT MAX_LENGTH [--suffix S]``
    * ``type-helpers demo``
    * ``type-helpers doctor``
    """
    parser = argparse.ArgumentParser(
        prog="type-helpers",
        description="Typed generic helpers: formatting, user display, diagnostics.",
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
        help="Enable debug logging on stderr.",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    fmt = sub.add_parser("format-date", help="Print a date as YYYY-MM-DD (local time).")
    fmt.add_argument(
        "value",
        help="ISO-8601 date/datetime, or a numeric timestamp.",
    )
    fmt.add_argument(
        "--unit",
        choices=("s", "ms"),
        default=None,
        help="Read VALUE as a timestamp in seconds or milliseconds.",
    )

    trunc = sub.add_parser("truncate", help="Shorten text to a maximum length.")
    trunc.add_argument("text")
    trunc.add_argument("max_length", type=int)
    trunc.add_argument(
        "--suffix",
        default=DEFAULT_TRUNCATE_SUFFIX,
        help=f"Marker appended to shortened text (default: {DEFAULT_TRUNCATE_SUFFIX!r}).",
    )

    sub.add_parser("demo", help="Render sample users through the business helpers.")
    sub.add_parser("doctor", help="Run environment diagnostics.")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _parse_date_argument(raw: str, *, numeric: bool = False) -> float | str:
    """Read *raw* as ISO-8601 text first, then as a numeric timestamp.

    Digit-only input such as ``20240105`` is a valid ISO-8601 basic date.
    Input with a decimal point, or *numeric* set, goes straight to the
    timestamp path.
    """
    text = raw.strip()
    if not numeric and "." not in text:
        try:
            datetime.fromisoformat(text)
        except ValueError:
            pass
        else:
            return raw
    try:
        return float(text)
    except ValueError:
        return raw


def _handle_format_date(raw: str, unit: str | None) -> int:
    from type_helpers.core.formatting import format_date

    value = _parse_date_argument(raw, numeric=unit is not None)
    console.out(format_date(value, unit=unit or "s"))  # type: ignore[arg-type]
    return exit_codes.SUCCESS


def _handle_truncate(text: str, max_length: int, suffix: str) -> int:
    from type_helpers.core.formatting import truncate

    console.out(truncate(text, max_length, suffix))
    return exit_codes.SUCCESS


def _handle_demo() -> int:
    from type_helpers.cli.demo import run_demo

    return run_demo()


def _handle_doctor() -> int:
    from type_helpers.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the type-helpers CLI.

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
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS
    if args.command == "format-date":
        return _handle_format_date(args.value, args.unit)
    if args.command == "truncate":
        return _handle_truncate(args.text, args.max_length, args.suffix)
    if args.command == "demo":
        return _handle_demo()
    return _handle_doctor()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TypeHelpersError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
