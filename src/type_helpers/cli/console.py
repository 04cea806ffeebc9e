"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
and plain-text output keep working when it is not installed.
Diagnostics go to stderr; command results go to stdout so they can be
piped.
"""

from __future__ import annotations

import sys
from typing import Any

from type_helpers.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render diagnostics with Rich when available, else plain stderr."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def out(self, text: str) -> None:
        """Write a command result to stdout verbatim (no markup)."""
        try:
            rich_console = get_rich_console(stderr=False)
        except EnvironmentError:
            print(text)
            return
        rich_console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


console = _ConsoleProxy()
