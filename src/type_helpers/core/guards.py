"""Runtime type guards.

Each guard is a plain predicate annotated with :data:`typing.TypeGuard`
so static checkers narrow the argument in the ``True`` branch.
"""

from __future__ import annotations

import math
from typing import Any, TypeGuard, TypeVar

from type_helpers.core.models import ApiResponse
from type_helpers.utils.constants import SUCCESS_CODE

T = TypeVar("T")


def is_nil(value: object) -> TypeGuard[None]:
    """Return ``True`` iff *value* is ``None``."""
    return value is None


def is_not_nil(value: T | None) -> TypeGuard[T]:
    """Return ``True`` iff *value* is present (not ``None``).

    Falsy values such as ``0``, ``False`` and ``""`` are present.
    """
    return not is_nil(value)


def is_string(value: object) -> TypeGuard[str]:
    return isinstance(value, str)


def is_number(value: object) -> TypeGuard[int | float]:
    """Return ``True`` for ints and floats, excluding NaN and ``bool``.

    ``bool`` subclasses ``int`` but is treated as its own primitive.
    Infinities count as numbers.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_success_response(response: ApiResponse[Any]) -> bool:
    """Return ``True`` when *response* carries the success code."""
    return response.code == SUCCESS_CODE
