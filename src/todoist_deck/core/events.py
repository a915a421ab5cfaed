# src/todoist_deck/core/events.py

from __future__ import annotations

"""
Inbound lifecycle messages from the host.

Connectors translate their wire format into these variants; the action only
ever sees these, so it stays independent of any transport or event loop primitive.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Appear:
    instance_id: str
    settings: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Disappear:
    instance_id: str


@dataclass(frozen=True, slots=True)
class SettingsChanged:
    instance_id: str
    settings: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class KeyPressed:
    instance_id: str


HostMessage = Appear | Disappear | SettingsChanged | KeyPressed
