# src/todoist_deck/todoist/client.py

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from ..config import DEFAULT_API_BASE_URL

logger = logging.getLogger(__name__)


class RemoteQueryError(Exception):
    """The task count could not be fetched (non-2xx status or transport failure)."""

    def __init__(
        self, reason: str, *, status_code: int | None = None, item_filter: str | None = None
    ) -> None:
        super().__init__(f"Error fetching tasks: {reason}")
        self.reason = reason
        self.status_code = status_code
        self.item_filter = item_filter


def build_tasks_url(base_url: str, item_filter: str) -> str:
    # encodeURIComponent-compatible: the filter goes to the server untouched.
    return f"{base_url.rstrip('/')}/tasks?filter={quote(item_filter, safe='')}"


class TodoistClient:
    """
    Counts tasks matching a Todoist filter.

    One GET per call, no pagination and no retries: the REST endpoint returns
    the full matching list in a single response, and the next refresh tick is
    the retry.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._transport = transport

    async def count_tasks(self, token: str, item_filter: str) -> int:
        url = build_tasks_url(self.base_url, item_filter)
        if not token:
            logger.warning("No API token configured; querying %s anyway", url)
        logger.debug("Fetching tasks from %s", url)

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(url, headers={"Authorization": f"Bearer {token}"})
        except httpx.HTTPError as exc:
            reason = f"{type(exc).__name__}: {exc}"
            logger.error("Error fetching tasks (filter=%r): %s", item_filter, reason)
            raise RemoteQueryError(reason, item_filter=item_filter) from exc

        if not response.is_success:
            reason = response.reason_phrase or str(response.status_code)
            logger.error(
                "Error fetching tasks (filter=%r): %s %s",
                item_filter,
                response.status_code,
                reason,
            )
            raise RemoteQueryError(reason, status_code=response.status_code, item_filter=item_filter)

        try:
            tasks = response.json()
        except ValueError as exc:
            logger.error("Error fetching tasks (filter=%r): invalid JSON body", item_filter)
            raise RemoteQueryError(
                "invalid JSON body", status_code=response.status_code, item_filter=item_filter
            ) from exc

        if not isinstance(tasks, list):
            logger.error(
                "Error fetching tasks (filter=%r): expected a list, got %s",
                item_filter,
                type(tasks).__name__,
            )
            raise RemoteQueryError(
                "unexpected response shape", status_code=response.status_code, item_filter=item_filter
            )

        logger.debug("Got %d tasks for filter=%r", len(tasks), item_filter)
        return len(tasks)
