# src/todoist_deck/monitor/action.py

from __future__ import annotations

"""
The "task count" key action.

Routes host lifecycle messages:
- Appear          -> start the instance timer (+ immediate refresh if a filter is set)
- Disappear       -> stop the instance timer
- SettingsChanged -> refresh with the settings that came with the message
- KeyPressed      -> refresh (same as a timer tick)

Refreshes run as background tasks so a slow fetch never blocks the next
message or tick. This is the boundary where refresh failures stop: they are
logged with enough context to diagnose and the icon is left as it was.
"""

import asyncio
import logging

from ..core.events import Appear, Disappear, HostMessage, KeyPressed, SettingsChanged
from ..core.models import ButtonConfig
from ..core.ports import SettingsPayload
from ..todoist.client import RemoteQueryError
from .pipeline import RefreshPipeline
from .poller import Poller

logger = logging.getLogger(__name__)


class TaskMonitorAction:
    def __init__(self, pipeline: RefreshPipeline, *, interval_seconds: float = 60.0) -> None:
        self.pipeline = pipeline
        self.poller = Poller(self.request_refresh, interval_seconds=interval_seconds)
        self._inflight: set[asyncio.Task[None]] = set()

    def handle(self, message: HostMessage) -> None:
        if isinstance(message, Appear):
            self.on_appear(message)
        elif isinstance(message, Disappear):
            self.poller.on_disappear(message.instance_id)
        elif isinstance(message, SettingsChanged):
            self.request_refresh(message.instance_id, message.settings)
        elif isinstance(message, KeyPressed):
            self.request_refresh(message.instance_id)
        else:
            logger.warning("Unhandled host message: %r", message)

    def on_appear(self, message: Appear) -> None:
        self.poller.on_appear(message.instance_id, ButtonConfig.from_settings(message.settings))

    def request_refresh(self, instance_id: str, settings: SettingsPayload | None = None) -> None:
        task = asyncio.create_task(
            self._refresh_safe(instance_id, settings), name=f"refresh:{instance_id}"
        )
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _refresh_safe(self, instance_id: str, settings: SettingsPayload | None) -> None:
        item_filter = (settings or {}).get("item_filter")
        try:
            await self.pipeline.run(instance_id, settings)
        except RemoteQueryError as exc:
            logger.warning(
                "Refresh failed for %s (filter=%r, status=%s): %s",
                instance_id,
                exc.item_filter,
                exc.status_code,
                exc.reason,
            )
        except TimeoutError:
            logger.warning("Refresh timed out for %s waiting on the host", instance_id)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Refresh crashed for %s (filter=%r)", instance_id, item_filter)

    async def wait_idle(self) -> None:
        """Wait for every refresh started so far (used by shutdown and tests)."""
        while self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)

    async def shutdown(self) -> None:
        self.poller.stop_all()
        for task in list(self._inflight):
            task.cancel()
        await self.wait_idle()
