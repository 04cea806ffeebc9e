"""Core layer — pure helpers and the models they operate on.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Only :mod:`~type_helpers.core.timing` keeps state, one pending
  handle per :class:`~type_helpers.core.timing.Debouncer`.
"""

from type_helpers.core.business import get_user_display_name, is_admin
from type_helpers.core.formatting import format_date, truncate
from type_helpers.core.guards import (
    is_nil,
    is_not_nil,
    is_number,
    is_string,
    is_success_response,
)
from type_helpers.core.models import ApiResponse, PaginatedData, User, UserRole
from type_helpers.core.objects import omit, pick
from type_helpers.core.protocols import Scheduler, TimerHandle
from type_helpers.core.schedulers import AsyncioScheduler, ThreadingScheduler
from type_helpers.core.sequences import (
    compact,
    deep_clone,
    first,
    last,
    unique,
    unique_by,
)
from type_helpers.core.timing import DebounceState, Debouncer, debounce, delay

__all__: list[str] = [
    "ApiResponse",
    "AsyncioScheduler",
    "DebounceState",
    "Debouncer",
    "PaginatedData",
    "Scheduler",
    "ThreadingScheduler",
    "TimerHandle",
    "User",
    "UserRole",
    "compact",
    "debounce",
    "deep_clone",
    "delay",
    "first",
    "format_date",
    "get_user_display_name",
    "is_admin",
    "is_nil",
    "is_not_nil",
    "is_number",
    "is_string",
    "is_success_response",
    "last",
    "omit",
    "pick",
    "truncate",
    "unique",
    "unique_by",
]
