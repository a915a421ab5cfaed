# src/todoist_deck/monitor/pipeline.py

from __future__ import annotations

import logging

from ..core.models import ButtonConfig, GlobalCredentials
from ..core.ports import HostPort, SettingsPayload, TaskCounter
from ..render.icon import render_icon
from ..todoist.client import RemoteQueryError

logger = logging.getLogger(__name__)


class RefreshPipeline:
    """
    One refresh, start to finish:

        current settings -> credentials -> count -> icon -> host

    Every run is independent. Nothing is cached between runs, so a slow or
    failed run can't leak into a later one. Errors propagate to the caller and
    no image is pushed; the button keeps whatever it showed before.
    """

    def __init__(self, host: HostPort, counter: TaskCounter) -> None:
        self.host = host
        self.counter = counter

    async def run(self, instance_id: str, settings: SettingsPayload | None = None) -> int:
        if settings is None:
            settings = await self.host.get_settings(instance_id)
        config = ButtonConfig.from_settings(settings)

        credentials = GlobalCredentials.from_settings(await self.host.get_global_settings())
        try:
            count = await self.counter.count_tasks(credentials.api_token, config.item_filter)
        except RemoteQueryError as exc:
            if exc.item_filter is None:
                exc.item_filter = config.item_filter
            raise

        await self.host.set_image(instance_id, render_icon(count, config))
        logger.debug("Updated %s: %d tasks (filter=%r)", instance_id, count, config.item_filter)
        return count
