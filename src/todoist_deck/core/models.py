# src/todoist_deck/core/models.py

from __future__ import annotations

"""
Typed views over the host's settings payloads.

The host stores settings as loose JSON (the property inspector writes numbers
as strings, leaves untouched fields out, etc.). Everything downstream works on
these frozen dataclasses instead of raw dicts.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping

logger = logging.getLogger(__name__)

Cutoff = float | None


def _parse_cutoff(raw: Any, *, field: str) -> Cutoff:
    """
    A cutoff is "set" only when it is a non-zero number.

    Missing, empty, zero and non-numeric values are all "unset", which matches
    how the settings UI has always behaved for a blank threshold box.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        s = str(raw).strip()
        if not s:
            return None
        try:
            value = float(s)
        except ValueError:
            logger.debug("Ignoring non-numeric cutoff %s=%r", field, raw)
            return None
    if value == 0:
        return None
    return value


def _parse_color(raw: Any) -> str | None:
    if raw is None:
        return None
    s = str(raw).strip()
    return s or None


@dataclass(frozen=True, slots=True)
class Ladder:
    """Up to three cutoffs (highest bucket first) and four colors."""

    cutoffs: tuple[Cutoff, Cutoff, Cutoff]
    colors: tuple[str | None, str | None, str | None, str | None]

    @property
    def active(self) -> bool:
        return self.cutoffs[0] is not None

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any], prefix: str) -> Ladder:
        cutoffs = tuple(
            _parse_cutoff(settings.get(f"{prefix}_cutoff_{i}"), field=f"{prefix}_cutoff_{i}")
            for i in (1, 2, 3)
        )
        colors = tuple(_parse_color(settings.get(f"{prefix}_color_{i}")) for i in (1, 2, 3, 4))
        return cls(cutoffs=cutoffs, colors=colors)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class ButtonConfig:
    """
    Per-button configuration.

    Wire names (shared with the settings UI):
    item_name, item_filter, g_cutoff_1..3, g_color_1..4, b_cutoff_1..3, b_color_1..4
    """

    item_name: str
    item_filter: str
    g_ladder: Ladder
    b_ladder: Ladder

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any] | None) -> ButtonConfig:
        settings = settings or {}
        return cls(
            item_name=str(settings.get("item_name") or ""),
            item_filter=str(settings.get("item_filter") or ""),
            g_ladder=Ladder.from_settings(settings, "g"),
            b_ladder=Ladder.from_settings(settings, "b"),
        )


@dataclass(frozen=True, slots=True)
class GlobalCredentials:
    api_token: str

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any] | None) -> GlobalCredentials:
        settings = settings or {}
        return cls(api_token=str(settings.get("apiToken") or "").strip())
