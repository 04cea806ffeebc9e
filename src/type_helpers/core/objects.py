"""Key projection over mappings.

Both helpers return a new ``dict`` and leave the input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V")


def pick(obj: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return the entries of *obj* whose key appears in *keys*.

    Keys missing from *obj* are skipped silently.  The result follows
    the order of *keys*.
    """
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return a shallow copy of *obj* without the entries named in *keys*.

    Unknown keys are ignored.  The remaining entries keep their order.
    """
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}
