"""Unit tests for the virtual and asyncio schedulers."""

from __future__ import annotations

import asyncio

import pytest

from herotype.engine.scheduling import AsyncioScheduler, VirtualScheduler

pytestmark = pytest.mark.unit


class TestVirtualScheduler:
    def test_fires_in_due_order(self, scheduler: VirtualScheduler):
        fired: list[str] = []
        scheduler.schedule_after(30, lambda: fired.append("c"))
        scheduler.schedule_after(10, lambda: fired.append("a"))
        scheduler.schedule_after(20, lambda: fired.append("b"))

        scheduler.run_until_idle()

        assert fired == ["a", "b", "c"]
        assert scheduler.now == 30

    def test_same_instant_fires_in_schedule_order(self, scheduler: VirtualScheduler):
        fired: list[int] = []
        for i in range(5):
            scheduler.schedule_after(10, lambda i=i: fired.append(i))

        scheduler.advance(10)

        assert fired == [0, 1, 2, 3, 4]

    def test_cancel_prevents_firing(self, scheduler: VirtualScheduler):
        fired: list[str] = []
        handle = scheduler.schedule_after(10, lambda: fired.append("x"))

        scheduler.cancel(handle)
        scheduler.advance(100)

        assert fired == []
        assert scheduler.pending == 0
        assert scheduler.cancelled == 1

    def test_cancel_ignores_none_and_fired(self, scheduler: VirtualScheduler):
        handle = scheduler.schedule_after(0, lambda: None)
        scheduler.run_next()

        scheduler.cancel(handle)
        scheduler.cancel(None)

        assert scheduler.cancelled == 0

    def test_advance_stops_short_of_later_callbacks(self, scheduler: VirtualScheduler):
        fired: list[str] = []
        scheduler.schedule_after(50, lambda: fired.append("early"))
        scheduler.schedule_after(150, lambda: fired.append("late"))

        assert scheduler.advance(100) == 1
        assert fired == ["early"]
        assert scheduler.now == 100
        assert scheduler.next_due() == 150

    def test_callbacks_scheduled_while_firing_use_current_time(
        self, scheduler: VirtualScheduler
    ):
        times: list[float] = []

        def tick() -> None:
            times.append(scheduler.now)
            if len(times) < 3:
                scheduler.schedule_after(10, tick)

        scheduler.schedule_after(5, tick)
        scheduler.run_until_idle()

        assert times == [5, 15, 25]

    def test_run_next_on_empty_queue(self, scheduler: VirtualScheduler):
        assert scheduler.run_next() is False
        assert scheduler.next_due() is None

    def test_negative_delay_clamped(self, scheduler: VirtualScheduler):
        scheduler.advance(100)
        handle = scheduler.schedule_after(-50, lambda: None)
        assert handle.due == 100

    def test_run_until_idle_guards_endless_loops(self, scheduler: VirtualScheduler):
        def again() -> None:
            scheduler.schedule_after(1, again)

        scheduler.schedule_after(1, again)

        with pytest.raises(RuntimeError, match="still busy"):
            scheduler.run_until_idle(limit=50)


class TestAsyncioScheduler:
    async def test_fires_after_delay(self):
        scheduler = AsyncioScheduler()
        done = asyncio.Event()

        scheduler.schedule_after(5, done.set)

        await asyncio.wait_for(done.wait(), timeout=1)

    async def test_cancel(self):
        scheduler = AsyncioScheduler()
        fired: list[bool] = []

        handle = scheduler.schedule_after(5, lambda: fired.append(True))
        scheduler.cancel(handle)
        scheduler.cancel(None)
        await asyncio.sleep(0.05)

        assert fired == []
