"""Tests for the debounce state machine (core/timing.py).

All tests drive :class:`ManualScheduler` — a virtual clock — so timing
is exact and nothing sleeps.  Real timers are covered in
``test_schedulers.py``.
"""

from __future__ import annotations

import asyncio
import gc
import time
import weakref
from typing import Any
from unittest.mock import MagicMock

import pytest

from tests.conftest import ManualScheduler
from type_helpers.core.timing import DebounceState, Debouncer, debounce, delay
from type_helpers.exceptions import InvalidArgumentError


# ---------------------------------------------------------------------------
# Trailing-edge coalescing
# ---------------------------------------------------------------------------

class TestCoalescing:
    def test_burst_runs_once_with_last_args(self, scheduler: ManualScheduler) -> None:
        fn = MagicMock()
        debounced = debounce(fn, 100, scheduler=scheduler)

        debounced(1)
        debounced(2)
        debounced(3)
        fn.assert_not_called()

        scheduler.advance(0.15)
        fn.assert_called_once_with(3)

    def test_not_called_before_window_elapses(self, scheduler: ManualScheduler) -> None:
        fn = MagicMock()
        debounced = debounce(fn, 100, scheduler=scheduler)

        debounced()
        scheduler.advance(0.06)
        fn.assert_not_called()

        scheduler.advance(0.06)
        fn.assert_called_once_with()

    def test_window_restarts_on_each_call(self, scheduler: ManualScheduler) -> None:
        fn = MagicMock()
        debounced = debounce(fn, 100, scheduler=scheduler)

        debounced("a")
        scheduler.advance(0.06)
        debounced("b")
        scheduler.advance(0.06)
        fn.assert_not_called()

        scheduler.advance(0.06)
        fn.assert_called_once_with("b")

    def test_keyword_arguments_are_captured(self, scheduler: ManualScheduler) -> None:
        fn = MagicMock()
        debounced = debounce(fn, 10, scheduler=scheduler)

        debounced("q", page=1)
        debounced("q", page=2)
        scheduler.advance(1.0)
        fn.assert_called_once_with("q", page=2)

    def test_separate_bursts_each_run(self, scheduler: ManualScheduler) -> None:
        fn = MagicMock()
        debounced = debounce(fn, 50, scheduler=scheduler)

        debounced(1)
        scheduler.advance(1.0)
        debounced(2)
        scheduler.advance(1.0)
        assert fn.call_args_list == [((1,),), ((2,),)]

    def test_only_one_live_handle(self, scheduler: ManualScheduler) -> None:
        debounced = debounce(MagicMock(), 100, scheduler=scheduler)
        for _ in range(5):
            debounced()
        assert len(scheduler.live) == 1
        assert len(scheduler.handles) == 5

    def test_zero_delay_still_defers(self, scheduler: ManualScheduler) -> None:
        fn = MagicMock()
        debounced = debounce(fn, 0, scheduler=scheduler)

        debounced()
        fn.assert_not_called()
        scheduler.advance(0)
        fn.assert_called_once()

    def test_delay_is_converted_to_seconds(self, scheduler: ManualScheduler) -> None:
        debounced = debounce(MagicMock(), 250, scheduler=scheduler)
        debounced()
        assert scheduler.live[0].when == pytest.approx(0.25)


# ---------------------------------------------------------------------------
# States and cancellation
# ---------------------------------------------------------------------------

class TestStates:
    def test_idle_pending_idle(self, scheduler: ManualScheduler) -> None:
        debounced = debounce(MagicMock(), 100, scheduler=scheduler)
        assert debounced.state is DebounceState.IDLE
        assert not debounced.pending

        debounced()
        assert debounced.state is DebounceState.PENDING
        assert debounced.pending

        scheduler.advance(1.0)
        assert debounced.state is DebounceState.IDLE

    def test_cancel_drops_pending_call(self, scheduler: ManualScheduler) -> None:
        fn = MagicMock()
        debounced = debounce(fn, 100, scheduler=scheduler)

        debounced()
        assert debounced.cancel() is True
        assert debounced.state is DebounceState.IDLE

        scheduler.advance(1.0)
        fn.assert_not_called()

    def test_cancel_when_idle(self, scheduler: ManualScheduler) -> None:
        debounced = debounce(MagicMock(), 100, scheduler=scheduler)
        assert debounced.cancel() is False

    def test_stale_callback_is_ignored(self, scheduler: ManualScheduler) -> None:
        """A superseded handle that fires anyway must not run fn."""
        fn = MagicMock()
        debounced = debounce(fn, 100, scheduler=scheduler)

        debounced("old")
        stale = scheduler.handles[0]
        debounced("new")
        stale.callback()
        fn.assert_not_called()

        scheduler.advance(1.0)
        fn.assert_called_once_with("new")

    def test_callback_may_call_wrapper_again(self, scheduler: ManualScheduler) -> None:
        calls: list[int] = []

        def fn(n: int) -> None:
            calls.append(n)
            if n < 3:
                debounced(n + 1)

        debounced = debounce(fn, 10, scheduler=scheduler)
        debounced(1)
        scheduler.advance(1.0)
        assert calls == [1, 2, 3]

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="delay_ms"):
            debounce(MagicMock(), -1)

    def test_delay_ms_property(self) -> None:
        assert debounce(MagicMock(), 300).delay_ms == 300


# ---------------------------------------------------------------------------
# Wrapping and method binding
# ---------------------------------------------------------------------------

def _refresh(box: Any, query: str) -> None:
    """Re-run the search."""
    box.results.append(query)


class TestWrapping:
    def test_metadata_is_preserved(self) -> None:
        debounced = debounce(_refresh, 10)
        assert debounced.__name__ == "_refresh"
        assert debounced.__doc__ == "Re-run the search."
        assert debounced.__wrapped__ is _refresh

    def test_is_debouncer(self) -> None:
        assert isinstance(debounce(_refresh, 10), Debouncer)


class TestMethodBinding:
    def _make_class(self, scheduler: ManualScheduler) -> type:
        class SearchBox:
            refresh = debounce(_refresh, 100, scheduler=scheduler)

            def __init__(self) -> None:
                self.results: list[str] = []

        return SearchBox

    def test_self_is_passed(self, scheduler: ManualScheduler) -> None:
        box = self._make_class(scheduler)()
        box.refresh("a")
        box.refresh("ab")
        scheduler.advance(1.0)
        assert box.results == ["ab"]

    def test_instances_have_independent_windows(self, scheduler: ManualScheduler) -> None:
        cls = self._make_class(scheduler)
        first_box, second_box = cls(), cls()

        first_box.refresh("x")
        second_box.refresh("y")
        scheduler.advance(1.0)

        assert first_box.results == ["x"]
        assert second_box.results == ["y"]

    def test_bound_wrapper_is_cached(self, scheduler: ManualScheduler) -> None:
        box = self._make_class(scheduler)()
        assert box.refresh is box.refresh

    def test_class_access_returns_descriptor(self, scheduler: ManualScheduler) -> None:
        cls = self._make_class(scheduler)
        assert isinstance(cls.__dict__["refresh"], Debouncer)
        assert cls.refresh is cls.__dict__["refresh"]

    def test_attached_after_class_creation(self, scheduler: ManualScheduler) -> None:
        class Box:
            def __init__(self) -> None:
                self.results: list[str] = []

        Box.refresh = debounce(_refresh, 100, scheduler=scheduler)  # type: ignore[attr-defined]
        box = Box()

        box.refresh("a")  # type: ignore[attr-defined]
        box.refresh("ab")  # type: ignore[attr-defined]
        box.refresh("abc")  # type: ignore[attr-defined]
        scheduler.advance(1.0)

        assert box.results == ["abc"]
        assert len(scheduler.live) == 0

    def test_slots_class(self, scheduler: ManualScheduler) -> None:
        class Box:
            __slots__ = ("results", "__weakref__")
            refresh = debounce(_refresh, 100, scheduler=scheduler)

            def __init__(self) -> None:
                self.results: list[str] = []

        first_box, second_box = Box(), Box()
        first_box.refresh("a")
        first_box.refresh("ab")
        second_box.refresh("z")
        scheduler.advance(1.0)

        assert first_box.results == ["ab"]
        assert second_box.results == ["z"]

    def test_slots_class_without_weakref(self, scheduler: ManualScheduler) -> None:
        class Box:
            __slots__ = ("results",)
            refresh = debounce(_refresh, 100, scheduler=scheduler)

            def __init__(self) -> None:
                self.results: list[str] = []

        box = Box()
        box.refresh("a")
        box.refresh("ab")
        scheduler.advance(1.0)

        assert box.results == ["ab"]
        assert box.refresh is box.refresh

    def test_equal_instances_get_separate_windows(self, scheduler: ManualScheduler) -> None:
        class Box:
            __slots__ = ("results", "__weakref__")
            refresh = debounce(_refresh, 100, scheduler=scheduler)

            def __init__(self) -> None:
                self.results: list[str] = []

            def __eq__(self, other: object) -> bool:
                return isinstance(other, Box)

            def __hash__(self) -> int:
                return 0

        first_box, second_box = Box(), Box()
        first_box.refresh("x")
        second_box.refresh("y")
        scheduler.advance(1.0)

        assert first_box.results == ["x"]
        assert second_box.results == ["y"]

    def test_collected_instance_is_released(self, scheduler: ManualScheduler) -> None:
        class Box:
            __slots__ = ("results", "__weakref__")
            refresh = debounce(_refresh, 100, scheduler=scheduler)

            def __init__(self) -> None:
                self.results: list[str] = []

        box = Box()
        box.refresh("a")
        ref = weakref.ref(box)
        del box
        gc.collect()

        assert ref() is None
        assert Box.__dict__["refresh"]._bound == {}
        scheduler.advance(1.0)


# ---------------------------------------------------------------------------
# delay
# ---------------------------------------------------------------------------

class TestDelay:
    def test_sleeps_at_least_requested_time(self) -> None:
        start = time.monotonic()
        asyncio.run(delay(50))
        assert time.monotonic() - start >= 0.045
