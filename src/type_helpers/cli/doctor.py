"""``type-helpers doctor`` — environment diagnostics command.

Gathers system information and renders a table summarising whether
the runtime environment satisfies type-helpers' requirements.  Rich is
optional here: without it the table is printed as plain text.
"""

from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version

from type_helpers.cli import exit_codes
from type_helpers.cli.console import console
from type_helpers.utils.constants import MIN_PYTHON
from type_helpers.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    python_version = platform.python_version()
    ok = sys.version_info[:2] >= MIN_PYTHON
    required = ".".join(str(part) for part in MIN_PYTHON)
    status = "[green]OK[/green]" if ok else f"[red]FAIL (>={required} required)[/red]"
    return "Python", python_version, status


def _rich_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row.

    Rich only affects presentation, so a missing install is a warning.
    """
    try:
        import rich  # noqa: F401
    except ImportError:
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"

    try:
        return "rich", version("rich"), "[green]OK[/green]"
    except PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _package_version_check() -> tuple[str, str, str]:
    return "type-helpers", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ntype-helpers doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<30} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<30} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _package_version_check(),
        _python_version_check(),
        _rich_version_check(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        if has_failure:
            print("Some checks failed.", file=sys.stderr)
            return exit_codes.GENERAL_ERROR
        print("All checks passed.", file=sys.stderr)
        return exit_codes.SUCCESS

    table = Table(
        title="type-helpers doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
