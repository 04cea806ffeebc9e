"""Pure operations over ordered sequences.

Every function in this module is a **pure** transformation — inputs
are never mutated and a new list is returned where a sequence comes
back.  Deduplication works for unhashable elements and keys too, by
falling back to an equality scan.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from type_helpers.core.guards import is_not_nil
from type_helpers.exceptions import CloneError

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Access
# ---------------------------------------------------------------------------

def first(items: Sequence[T]) -> T | None:
    """Return the first element, or ``None`` when *items* is empty."""
    return items[0] if items else None


def last(items: Sequence[T]) -> T | None:
    """Return the final element, or ``None`` when *items* is empty."""
    return items[-1] if items else None


# ---------------------------------------------------------------------------
# Copying
# ---------------------------------------------------------------------------

def deep_clone(value: T) -> T:
    """Return a structurally equal copy sharing no mutable state with *value*.

    Cycles and shared references are reproduced in the copy rather than
    expanded.  Immutable leaves (numbers, strings, ``None``) and plain
    functions are shared, since there is nothing to mutate.

    Raises
    ------
    CloneError
        When *value* reaches an object that refuses to be copied
        (locks, open files, generators, …).
    """
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error) as exc:
        raise CloneError(
            f"Cannot deep-copy value of type {type(value).__name__}: {exc}",
        ) from exc


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------

def compact(items: Iterable[T | None]) -> list[T]:
    """Drop ``None`` entries, keeping falsy-but-present values in order."""
    return [item for item in items if is_not_nil(item)]


# ---------------------------------------------------------------------------
# Deduplication
# ---------------------------------------------------------------------------

def _dedupe(items: Iterable[T], key: Callable[[T], Any]) -> list[T]:
    """Keep the first element seen for each distinct key, in input order."""
    seen_hashable: set[Hashable] = set()
    seen_unhashable: list[Any] = []
    result: list[T] = []
    for item in items:
        marker = key(item)
        try:
            if marker in seen_hashable:
                continue
            seen_hashable.add(marker)
        except TypeError:
            if marker in seen_unhashable:
                continue
            seen_unhashable.append(marker)
        result.append(item)
    return result


def _field_getter(name: str) -> Callable[[Any], Any]:
    """Read *name* as a mapping item or, failing that, as an attribute."""

    def getter(item: Any) -> Any:
        if isinstance(item, Mapping):
            return item[name]
        return getattr(item, name)

    return getter


def unique(items: Iterable[T]) -> list[T]:
    """Remove duplicate elements, keeping each first occurrence in order.

    Elements are compared by equality, so ``1`` and ``1.0`` collapse.
    """
    return _dedupe(items, lambda item: item)


def unique_by(
    items: Iterable[T],
    key: str | Callable[[T], Any],
) -> list[T]:
    """Remove elements whose derived key was already produced.

    Parameters
    ----------
    items:
        Elements to deduplicate.
    key:
        Either a callable mapping an element to its key, or a field
        name read as ``item[key]`` on mappings and ``item.key`` on
        other objects.

    Raises
    ------
    KeyError, AttributeError
        When *key* names a field an element does not have.
    """
    selector = _field_getter(key) if isinstance(key, str) else key
    return _dedupe(items, selector)
