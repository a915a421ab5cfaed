# src/todoist_deck/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- parses the launch arguments the host passes to the plugin,
- wires concrete implementations (Todoist client, pipeline, action) around a host port.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Sequence

from ..config import Settings, get_settings
from ..connectors.streamdeck import LaunchInfo
from ..core.ports import HostPort
from ..monitor.action import TaskMonitorAction
from ..monitor.pipeline import RefreshPipeline
from ..todoist.client import TodoistClient

logger = logging.getLogger(__name__)


def _parse_info(raw: str) -> dict[str, Any]:
    try:
        info = json.loads(raw) if raw else {}
    except json.JSONDecodeError:
        logger.warning("Ignoring malformed -info payload")
        return {}
    return info if isinstance(info, dict) else {}


def parse_launch_args(argv: Sequence[str] | None = None) -> LaunchInfo:
    """The host uses single-dash long options: -port 28196 -pluginUUID ... -registerEvent ... -info {...}"""
    parser = argparse.ArgumentParser(description="Todoist task count plugin", allow_abbrev=False)
    parser.add_argument("-port", type=int, required=True)
    parser.add_argument("-pluginUUID", dest="plugin_uuid", required=True)
    parser.add_argument("-registerEvent", dest="register_event", required=True)
    parser.add_argument("-info", default="")
    args = parser.parse_args(argv)
    return LaunchInfo(
        port=args.port,
        plugin_uuid=args.plugin_uuid,
        register_event=args.register_event,
        info=_parse_info(args.info),
    )


def create_action(host: HostPort, *, settings: Settings | None = None) -> TaskMonitorAction:
    """
    Build the action around a host port.

    Keeping settings injectable makes the wiring easy to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    counter = TodoistClient(base_url=settings.api_base_url)
    pipeline = RefreshPipeline(host, counter)
    return TaskMonitorAction(pipeline, interval_seconds=settings.refresh_interval_seconds)
