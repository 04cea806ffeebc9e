"""Shared pytest fixtures and configuration for the type-helpers test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Debounce tests drive a virtual clock; only the scheduler tests use
  real timers, with generous waits.
* Tests must not depend on the host timezone: local-date expectations
  are computed with :mod:`datetime` inside the test.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest


class ManualHandle:
    """Handle returned by :class:`ManualScheduler`."""

    def __init__(self, when: float, callback: Callable[[], object]) -> None:
        self.when: float = when
        self.callback: Callable[[], object] = callback
        self.cancelled: bool = False
        self.fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose clock only moves when :meth:`advance` is called."""

    def __init__(self) -> None:
        self.now: float = 0.0
        self.handles: list[ManualHandle] = []

    def call_later(self, delay: float, callback: Callable[[], object]) -> ManualHandle:
        handle = ManualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self) -> list[ManualHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due callbacks in time order."""
        target = self.now + seconds
        while True:
            due = sorted((h for h in self.live if h.when <= target), key=lambda h: h.when)
            if not due:
                break
            handle = due[0]
            self.now = handle.when
            handle.fired = True
            handle.callback()
        self.now = target


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()
