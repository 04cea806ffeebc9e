"""Concrete :class:`~type_helpers.core.protocols.Scheduler` implementations.

Only standard-library concurrency primitives are used here — no I/O,
no user-facing output.

* :class:`ThreadingScheduler` runs callbacks on a :class:`threading.Timer`
  thread.
* :class:`AsyncioScheduler` runs callbacks on an asyncio event loop via
  :meth:`~asyncio.AbstractEventLoop.call_later`.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable

from type_helpers.core.protocols import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class ThreadingScheduler:
    """Schedule callbacks on daemon timer threads.

    Parameters
    ----------
    daemon:
        Whether timer threads are daemonic.  Daemon timers never keep
        the interpreter alive at exit; a pending call is then dropped.
    """

    def __init__(self, *, daemon: bool = True) -> None:
        self._daemon: bool = daemon

    def call_later(
        self,
        delay: float,
        callback: Callable[[], object],
    ) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = self._daemon
        timer.start()
        logger.debug("Started timer thread %s (delay=%.3fs)", timer.name, delay)
        return timer


class AsyncioScheduler:
    """Schedule callbacks on an asyncio event loop.

    Parameters
    ----------
    loop:
        The loop to schedule on.  When ``None`` (default), the loop
        running at call time is used.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop: asyncio.AbstractEventLoop | None = loop

    def call_later(
        self,
        delay: float,
        callback: Callable[[], object],
    ) -> asyncio.TimerHandle:
        """Schedule *callback* on the configured or running loop.

        Raises
        ------
        RuntimeError
            When no loop was configured and none is running.
        """
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        handle = loop.call_later(delay, callback)
        logger.debug("Scheduled loop callback (delay=%.3fs)", delay)
        return handle


_THREADING_SCHEDULER = ThreadingScheduler()


def default_scheduler() -> Scheduler:
    """Pick the scheduler matching the caller's execution context.

    Inside a running event loop the loop itself is used, so callbacks
    stay on the loop thread.  Everywhere else a shared
    :class:`ThreadingScheduler` is returned.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return _THREADING_SCHEDULER
    return AsyncioScheduler(loop)


__all__: list[str] = [
    "AsyncioScheduler",
    "ThreadingScheduler",
    "default_scheduler",
]
