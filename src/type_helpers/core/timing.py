"""Timing control — trailing-edge debounce and an async sleep helper.

State machine
-------------
A :class:`Debouncer` is either ``IDLE`` (no pending handle) or
``PENDING`` (exactly one handle scheduled)::

    IDLE    --call-->  PENDING   schedule fn(*args) after delay
    PENDING --call-->  PENDING   cancel handle, reschedule with new args
    PENDING --fire-->  IDLE      run fn once with the captured args
    PENDING --cancel-> IDLE      drop the pending call

Only the last call of a burst ever runs.  There is no leading-edge
mode.
"""

from __future__ import annotations

import asyncio
import enum
import functools
import logging
import threading
import types
import weakref
from collections.abc import Callable
from typing import Any, Generic, ParamSpec

from type_helpers.core.protocols import Scheduler, TimerHandle
from type_helpers.core.schedulers import default_scheduler
from type_helpers.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

P = ParamSpec("P")


class DebounceState(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"


class Debouncer(Generic[P]):
    """Callable wrapper that coalesces bursts of calls into one.

    Each instance exclusively owns its pending handle.  Calls return
    immediately; *fn* runs later on whatever thread or loop the
    scheduler uses, and its return value is discarded.

    Declared in a class body, a ``Debouncer`` binds per instance the
    way a method does, so ``self`` is passed through and every instance
    gets an independent pending window::

        class SearchBox:
            refresh = debounce(_refresh, 300)

    Parameters
    ----------
    fn:
        The function to defer.
    delay_ms:
        Quiet period in milliseconds.  Must be ``>= 0``.
    scheduler:
        Deferred-execution facility.  When ``None``, one is chosen per
        call by :func:`~type_helpers.core.schedulers.default_scheduler`.
    """

    def __init__(
        self,
        fn: Callable[P, object],
        delay_ms: float,
        *,
        scheduler: Scheduler | None = None,
    ) -> None:
        if delay_ms < 0:
            raise InvalidArgumentError(
                f"delay_ms must be >= 0, got {delay_ms}",
            )
        functools.update_wrapper(self, fn)
        self._fn: Callable[P, object] = fn
        self._delay_ms: float = delay_ms
        self._scheduler: Scheduler | None = scheduler
        self._handle: TimerHandle | None = None
        self._generation: int = 0
        self._lock = threading.Lock()
        self._attr_name: str | None = None
        self._bound: dict[int, Debouncer[Any]] = {}
        self._pinned: dict[int, object] = {}
        self._label: str = getattr(fn, "__qualname__", repr(fn))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @property
    def state(self) -> DebounceState:
        if self._handle is None:
            return DebounceState.IDLE
        return DebounceState.PENDING

    @property
    def pending(self) -> bool:
        """``True`` while a call is waiting for its window to elapse."""
        return self._handle is not None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        scheduler = self._scheduler if self._scheduler is not None else default_scheduler()
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                logger.debug("debounce %s: superseding pending call", self._label)
            self._generation += 1
            callback = functools.partial(self._fire, self._generation, args, kwargs)
            self._handle = scheduler.call_later(self._delay_ms / 1000, callback)
        logger.debug("debounce %s: scheduled in %sms", self._label, self._delay_ms)

    def cancel(self) -> bool:
        """Drop the pending call, if any.

        Returns ``True`` when a pending call was dropped.
        """
        with self._lock:
            if self._handle is None:
                return False
            self._handle.cancel()
            self._handle = None
            self._generation += 1
        logger.debug("debounce %s: cancelled", self._label)
        return True

    def _fire(
        self,
        generation: int,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        # A superseded timer may still fire if cancel() raced its start.
        with self._lock:
            if generation != self._generation or self._handle is None:
                return
            self._handle = None
        logger.debug("debounce %s: firing", self._label)
        self._fn(*args, **kwargs)

    # ------------------------------------------------------------------
    # Descriptor protocol
    # ------------------------------------------------------------------

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr_name = name

    def __get__(self, instance: object, owner: type | None = None) -> Debouncer[Any]:
        """Return the wrapper bound to *instance*, creating it on first access.

        Bound wrappers are cached in the instance ``__dict__`` when the
        descriptor knows its attribute name.  Otherwise (assigned after
        class creation, or a ``__slots__`` class) they live in a
        descriptor-owned store keyed by instance identity and cleared when
        the instance is collected.  Instances that cannot be weakly
        referenced are kept alive by that store.
        """
        if instance is None:
            return self
        with self._lock:
            bound = self._bound.get(id(instance))
            if bound is None:
                bound = self._bind(instance)
        return bound

    def _bind(self, instance: object) -> Debouncer[Any]:
        instance_dict = getattr(instance, "__dict__", None)
        if self._attr_name is not None and instance_dict is not None:
            bound = self._rebind(types.MethodType(self._fn, instance))
            instance_dict[self._attr_name] = bound
            return bound

        key = id(instance)
        try:
            ref = weakref.ref(instance)
        except TypeError:
            # No weakref support: pin the instance so its id is never reused.
            bound = self._rebind(types.MethodType(self._fn, instance))
            self._pinned[key] = instance
        else:
            bound = self._rebind(_weak_method(self._fn, ref))
            weakref.finalize(instance, self._bound.pop, key, None)
        self._bound[key] = bound
        return bound

    def _rebind(self, fn: Callable[..., object]) -> Debouncer[Any]:
        return Debouncer(fn, self._delay_ms, scheduler=self._scheduler)


def _weak_method(
    fn: Callable[..., object],
    ref: weakref.ReferenceType[Any],
) -> Callable[..., object]:
    """Bind *fn* to the referent of *ref* without keeping it alive."""

    @functools.wraps(fn)
    def method(*args: Any, **kwargs: Any) -> object:
        target = ref()
        if target is None:
            return None
        return fn(target, *args, **kwargs)

    return method


def debounce(
    fn: Callable[P, object],
    delay_ms: float,
    *,
    scheduler: Scheduler | None = None,
) -> Debouncer[P]:
    """Wrap *fn* so bursts of calls collapse into one trailing call.

    Calling the returned wrapper several times within *delay_ms* runs
    *fn* exactly once, with the arguments of the last call, *delay_ms*
    after that last call.

    Raises
    ------
    InvalidArgumentError
        If *delay_ms* is negative.
    """
    return Debouncer(fn, delay_ms, scheduler=scheduler)


async def delay(ms: float) -> None:
    """Suspend the current coroutine for *ms* milliseconds."""
    await asyncio.sleep(ms / 1000)
