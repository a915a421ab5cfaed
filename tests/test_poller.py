# tests/test_poller.py

from __future__ import annotations

import asyncio

import pytest

from todoist_deck.core.models import ButtonConfig
from todoist_deck.monitor.poller import Poller

WITH_FILTER = ButtonConfig.from_settings({"item_name": "Today", "item_filter": "today"})
NO_FILTER = ButtonConfig.from_settings({"item_name": "Today"})


@pytest.mark.asyncio
async def test_appear_twice_registers_one_timer() -> None:
    signals: list[str] = []
    poller = Poller(signals.append, interval_seconds=60)

    poller.on_appear("ctx-1", NO_FILTER)
    first = poller._timers["ctx-1"]
    poller.on_appear("ctx-1", NO_FILTER)

    assert poller.active_ids == ["ctx-1"]
    assert poller._timers["ctx-1"] is first
    poller.stop_all()


@pytest.mark.asyncio
async def test_appear_with_filter_refreshes_immediately_once() -> None:
    signals: list[str] = []
    poller = Poller(signals.append, interval_seconds=60)

    poller.on_appear("ctx-1", WITH_FILTER)
    assert signals == ["ctx-1"]
    assert "ctx-1" in poller
    poller.stop_all()


@pytest.mark.asyncio
async def test_appear_without_filter_waits_for_timer() -> None:
    signals: list[str] = []
    poller = Poller(signals.append, interval_seconds=60)

    poller.on_appear("ctx-1", NO_FILTER)
    assert signals == []
    assert len(poller) == 1
    poller.stop_all()


@pytest.mark.asyncio
async def test_disappear_unknown_instance_is_noop() -> None:
    poller = Poller(lambda _id: None)
    poller.on_disappear("never-seen")
    assert len(poller) == 0


@pytest.mark.asyncio
async def test_disappear_cancels_timer() -> None:
    poller = Poller(lambda _id: None, interval_seconds=60)
    poller.on_appear("ctx-1", NO_FILTER)
    timer = poller._timers["ctx-1"]

    poller.on_disappear("ctx-1")
    with pytest.raises(asyncio.CancelledError):
        await timer

    assert "ctx-1" not in poller
    # Re-appearance after disappearance starts a fresh timer.
    poller.on_appear("ctx-1", NO_FILTER)
    assert poller._timers["ctx-1"] is not timer
    poller.stop_all()


@pytest.mark.asyncio
async def test_timer_fires_repeatedly_per_instance() -> None:
    signals: list[str] = []
    poller = Poller(signals.append, interval_seconds=0.01)

    poller.on_appear("a", NO_FILTER)
    poller.on_appear("b", NO_FILTER)
    await asyncio.sleep(0.06)
    poller.stop_all()

    assert signals.count("a") >= 2
    assert signals.count("b") >= 2
    assert len(poller) == 0


@pytest.mark.asyncio
async def test_failing_signal_does_not_stop_timer() -> None:
    calls: list[str] = []

    def flaky(instance_id: str) -> None:
        calls.append(instance_id)
        raise RuntimeError("boom")

    poller = Poller(flaky, interval_seconds=0.01)
    poller.on_appear("ctx-1", NO_FILTER)
    await asyncio.sleep(0.06)

    assert len(calls) >= 2
    assert not poller._timers["ctx-1"].done()
    poller.stop_all()
