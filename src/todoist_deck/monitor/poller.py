# src/todoist_deck/monitor/poller.py

from __future__ import annotations

"""
Per-button refresh timers.

Exactly one recurring timer per visible button instance:
- created on first appearance (re-appearance never duplicates it),
- cancelled and forgotten on disappearance.

A tick does not fetch anything itself; it emits a refresh signal for the
instance and the action decides what a refresh means.
"""

import asyncio
import logging
from typing import Callable

from ..core.models import ButtonConfig

logger = logging.getLogger(__name__)

RefreshSignal = Callable[[str], None]


class Poller:
    def __init__(self, signal: RefreshSignal, *, interval_seconds: float = 60.0) -> None:
        self._signal = signal
        self.interval_seconds = float(interval_seconds)
        self._timers: dict[str, asyncio.Task[None]] = {}

    @property
    def active_ids(self) -> list[str]:
        return list(self._timers)

    def __contains__(self, instance_id: object) -> bool:
        return instance_id in self._timers

    def __len__(self) -> int:
        return len(self._timers)

    def on_appear(self, instance_id: str, config: ButtonConfig) -> None:
        if instance_id not in self._timers:
            self._timers[instance_id] = asyncio.create_task(
                self._run_timer(instance_id), name=f"poll:{instance_id}"
            )
            logger.debug("Timer started for %s (every %.0fs)", instance_id, self.interval_seconds)

        # Don't make the user wait a full interval for the first icon.
        if config.item_filter:
            self._emit(instance_id)

    def on_disappear(self, instance_id: str) -> None:
        timer = self._timers.pop(instance_id, None)
        if timer is None:
            return
        timer.cancel()
        logger.debug("Timer stopped for %s", instance_id)

    def stop_all(self) -> None:
        for instance_id in list(self._timers):
            self.on_disappear(instance_id)

    def _emit(self, instance_id: str) -> None:
        try:
            self._signal(instance_id)
        except Exception:
            logger.exception("Refresh signal failed for %s", instance_id)

    async def _run_timer(self, instance_id: str) -> None:
        """
        Fire every interval_seconds until cancelled.

        The first tick is one full interval after appearance (the immediate
        refresh is handled by on_appear). To stop, cancel the task.
        """
        while True:
            await asyncio.sleep(self.interval_seconds)
            logger.debug("Timer fired for %s", instance_id)
            self._emit(instance_id)
