# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todoist_deck.config import Settings
from todoist_deck.monitor.pipeline import RefreshPipeline

from .fakes import FakeCounter, FakeHost


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Explicit Settings rather than Settings.from_env(),
    to keep unit tests isolated from the developer's environment/.env.
    """
    return Settings(
        app_name="todoist-deck-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        api_base_url="https://todoist.test/rest/v2",
        refresh_interval_seconds=60.0,
        action_uuid="com.johnlong.todoiststatus.counts",
        host_reply_timeout_seconds=5.0,
    )


@pytest.fixture()
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture()
def counter() -> FakeCounter:
    return FakeCounter(count=5)


@pytest.fixture()
def pipeline(host: FakeHost, counter: FakeCounter) -> RefreshPipeline:
    return RefreshPipeline(host, counter)
