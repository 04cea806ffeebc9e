"""Domain models for type-helpers.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  The helpers in :mod:`type_helpers.core`
only read them; nothing in the library mutates a model.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Literal, TypeVar

T = TypeVar("T")

UserRole = Literal["admin", "user", "guest"]
"""Closed set of role tags a :class:`User` may carry."""


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class User:
    """An application user as seen by the business helpers."""

    id: int | str
    """Stable identifier, numeric or opaque string."""

    name: str
    """Display name.  May be empty."""

    email: str
    """Contact address.  May be empty."""

    role: UserRole
    """Access role tag."""

    age: int = 0

    avatar: str | None = None
    """Avatar URL, or ``None`` when the user has not uploaded one."""

    created_at: datetime | None = None
    updated_at: datetime | None = None


# ---------------------------------------------------------------------------
# API envelopes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ApiResponse(Generic[T]):
    """Envelope returned by a backend call."""

    code: int
    message: str
    data: T
    timestamp: int
    """Server time in milliseconds since the epoch; render with
    ``format_date(timestamp, unit="ms")``."""


@dataclass(frozen=True, slots=True)
class PaginatedData(Generic[T]):
    """One page of a larger result set.

    The tuple guarantees immutability.  Convenience dunder methods make
    the page usable in boolean and length contexts.
    """

    items: tuple[T, ...]
    total: int
    page: int
    page_size: int
    has_more: bool

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return len(self.items) > 0
