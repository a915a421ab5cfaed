# src/todoist_deck/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the host connector and the task API swappable and makes testing easier.
"""

from typing import Any, Awaitable, Protocol

SettingsPayload = dict[str, Any]
# Raw JSON settings exactly as the host stores them.


class HostPort(Protocol):
    """
    Connector-side port: what the core needs from the hardware host.

    get_settings() resolves with the button's current settings; this is the
    first step of every refresh, so the render always uses fresh values.
    """

    def get_settings(self, instance_id: str) -> Awaitable[SettingsPayload]: ...

    def get_global_settings(self) -> Awaitable[SettingsPayload]: ...

    def set_image(self, instance_id: str, image: str) -> Awaitable[None]: ...


class TaskCounter(Protocol):
    """Remote count query: how many tasks match a server-side filter."""

    def count_tasks(self, token: str, item_filter: str) -> Awaitable[int]: ...
