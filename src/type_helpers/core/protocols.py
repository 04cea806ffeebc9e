"""Protocols (interfaces) consumed by the core layer.

:class:`~type_helpers.core.timing.Debouncer` depends ONLY on these
protocols, so any deferred-execution facility (a thread timer, an
asyncio loop, a fake clock in tests) can drive it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """A single pending deferred call."""

    def cancel(self) -> None:
        """Prevent the callback from running if it has not run yet.

        Cancelling an already-fired or already-cancelled handle is a
        no-op.
        """
        ...  # pragma: no cover


class Scheduler(Protocol):
    """Contract for schedule-after-delay facilities.

    Both :class:`threading.Timer` wrappers and
    :meth:`asyncio.AbstractEventLoop.call_later` satisfy this protocol
    structurally (no explicit inheritance required).
    """

    def call_later(
        self,
        delay: float,
        callback: Callable[[], object],
    ) -> TimerHandle:
        """Run *callback* once, *delay* seconds from now.

        Parameters
        ----------
        delay:
            Seconds to wait.  ``0`` means "as soon as possible", never
            synchronously.
        callback:
            Zero-argument callable.  Its return value is ignored.
        """
        ...  # pragma: no cover
