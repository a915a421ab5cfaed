# tests/test_todoist_client.py

from __future__ import annotations

import httpx
import pytest

from todoist_deck.todoist.client import RemoteQueryError, TodoistClient, build_tasks_url

BASE = "https://todoist.test/rest/v2"


def _client(handler) -> TodoistClient:
    return TodoistClient(base_url=BASE, transport=httpx.MockTransport(handler))


def test_build_tasks_url_percent_encodes_filter() -> None:
    url = build_tasks_url(BASE + "/", "today & #Work/Home")
    assert url == f"{BASE}/tasks?filter=today%20%26%20%23Work%2FHome"


@pytest.mark.asyncio
async def test_count_is_length_of_returned_list() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": "1", "content": "a"}, {"id": "2", "content": "b"}])

    count = await _client(handler).count_tasks("tok-123", "overdue | today")

    assert count == 2
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].headers["Authorization"] == "Bearer tok-123"
    assert seen[0].url.path == "/rest/v2/tasks"
    assert seen[0].url.params["filter"] == "overdue | today"


@pytest.mark.asyncio
async def test_empty_list_is_zero() -> None:
    count = await _client(lambda request: httpx.Response(200, json=[])).count_tasks("t", "")
    assert count == 0


@pytest.mark.asyncio
async def test_non_success_status_raises(caplog: pytest.LogCaptureFixture) -> None:
    client = _client(lambda request: httpx.Response(403, json={"error": "nope"}))

    with pytest.raises(RemoteQueryError) as excinfo:
        await client.count_tasks("bad", "today")

    assert excinfo.value.status_code == 403
    assert excinfo.value.reason == "Forbidden"
    assert excinfo.value.item_filter == "today"
    assert any("Error fetching tasks" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_transport_failure_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RemoteQueryError) as excinfo:
        await _client(handler).count_tasks("t", "today")

    assert excinfo.value.status_code is None
    assert "ConnectError" in excinfo.value.reason


@pytest.mark.asyncio
async def test_non_list_body_raises() -> None:
    client = _client(lambda request: httpx.Response(200, json={"results": []}))

    with pytest.raises(RemoteQueryError):
        await client.count_tasks("t", "today")
