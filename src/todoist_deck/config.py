# src/todoist_deck/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole plugin.
- No secrets at import time: the Todoist token lives in the host's global settings.
- Everything has a working default so the host can launch the plugin with no env at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODOIST_DECK"

DEFAULT_API_BASE_URL = "https://api.todoist.com/rest/v2"
DEFAULT_ACTION_UUID = "com.johnlong.todoiststatus.counts"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Todoist ----
    api_base_url: str

    # ---- Button behaviour ----
    refresh_interval_seconds: float
    action_uuid: str

    # ---- Host connection ----
    host_reply_timeout_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todoist-deck").strip() or "todoist-deck"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todoist_deck"))

        api_base_url = _env(_k("API_BASE_URL"), DEFAULT_API_BASE_URL).strip().rstrip("/")
        if not api_base_url:
            api_base_url = DEFAULT_API_BASE_URL

        # Sub-second intervals would hammer the API from every visible key.
        refresh_interval_seconds = max(1.0, _env_float(_k("REFRESH_INTERVAL_SECONDS"), 60.0))
        action_uuid = _env(_k("ACTION_UUID"), DEFAULT_ACTION_UUID).strip() or DEFAULT_ACTION_UUID
        host_reply_timeout_seconds = max(0.1, _env_float(_k("HOST_REPLY_TIMEOUT_SECONDS"), 5.0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            api_base_url=api_base_url,
            refresh_interval_seconds=refresh_interval_seconds,
            action_uuid=action_uuid,
            host_reply_timeout_seconds=host_reply_timeout_seconds,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
