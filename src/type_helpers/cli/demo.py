"""``type-helpers demo`` — render sample users through the core helpers.

Builds a small fixed set of :class:`~type_helpers.core.models.User`
records and shows how the display-name fallbacks, the admin check and
the formatting helpers treat each of them.  Rendering uses a Rich table
when Rich is installed, plain aligned text otherwise.
"""

from __future__ import annotations

import sys
from datetime import datetime

from type_helpers.cli import exit_codes
from type_helpers.cli.console import console
from type_helpers.core.business import get_user_display_name, is_admin
from type_helpers.core.formatting import format_date, truncate
from type_helpers.core.models import User
from type_helpers.core.sequences import unique_by

EMAIL_WIDTH: int = 20


def sample_users() -> list[User]:
    """Return the demo dataset.

    The list deliberately contains a duplicate id so the demo also shows
    :func:`unique_by` keeping the first record.
    """
    return [
        User(
            id=1,
            name="张三",
            email="zhangsan@example.com",
            role="user",
            age=25,
            created_at=datetime(2024, 1, 5, 9, 30),
        ),
        User(
            id=2,
            name="",
            email="lisi@example.com",
            role="admin",
            age=31,
            created_at=datetime(2024, 3, 18, 14, 0),
        ),
        User(id=3, name="", email="", role="guest"),
        User(
            id=4,
            name="王五",
            email="wangwu.customer.support@example.com",
            role="user",
            age=42,
            created_at=datetime(2023, 11, 30, 8, 15),
        ),
        User(id=1, name="张三 (duplicate)", email="dup@example.com", role="user"),
    ]


def build_rows(users: list[User]) -> list[tuple[str, str, str, str, str, str]]:
    """Project *users* into display rows (id, name, email, role, admin, created)."""
    rows: list[tuple[str, str, str, str, str, str]] = []
    for user in unique_by(users, "id"):
        created = format_date(user.created_at) if user.created_at else "-"
        rows.append(
            (
                str(user.id),
                get_user_display_name(user),
                truncate(user.email, EMAIL_WIDTH) or "-",
                user.role,
                "yes" if is_admin(user) else "no",
                created,
            )
        )
    return rows


_HEADERS = ("ID", "Display name", "Email", "Role", "Admin", "Created")


def _print_plain_table(rows: list[tuple[str, str, str, str, str, str]]) -> None:
    """Render the demo output without Rich."""
    print("\ntype-helpers demo", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(
        f"{_HEADERS[0]:<4} {_HEADERS[1]:<18} {_HEADERS[2]:<{EMAIL_WIDTH}} "
        f"{_HEADERS[3]:<6} {_HEADERS[4]:<6} {_HEADERS[5]:<10}",
        file=sys.stderr,
    )
    print("-" * 80, file=sys.stderr)
    for user_id, name, email, role, admin, created in rows:
        print(
            f"{user_id:<4} {name:<18} {email:<{EMAIL_WIDTH}} "
            f"{role:<6} {admin:<6} {created:<10}",
            file=sys.stderr,
        )
    print(file=sys.stderr)


def run_demo() -> int:
    """Render the sample-user table and return :data:`exit_codes.SUCCESS`."""
    rows = build_rows(sample_users())

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(rows)
        return exit_codes.SUCCESS

    table = Table(
        title="type-helpers demo",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    for header in _HEADERS:
        table.add_column(header)
    for row in rows:
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS
