# src/todoist_deck/render/color_policy.py

from __future__ import annotations

"""
Count -> background color.

Two ladders with opposite meaning:
- ladder G: more tasks is good (green at the top bucket), e.g. "done today"
- ladder B: more tasks is bad (red at the top bucket), e.g. "overdue"

Only one ladder is used per button. G wins when both are configured.
"""

from ..core.models import ButtonConfig, Ladder

NEUTRAL_COLOR = "white"

G_DEFAULT_COLORS = ("green", "yellow", "orange", "red")
B_DEFAULT_COLORS = ("red", "orange", "yellow", "green")


def ladder_color(count: int, ladder: Ladder, defaults: tuple[str, str, str, str]) -> str:
    """
    Walk the cutoffs top to bottom; first cutoff the count reaches picks the bucket.
    Unset lower cutoffs are skipped, falling through to the last color.
    """
    for i, cutoff in enumerate(ladder.cutoffs):
        if cutoff is not None and count >= cutoff:
            return ladder.colors[i] or defaults[i]
    return ladder.colors[3] or defaults[3]


def resolve_color(count: int, config: ButtonConfig) -> str:
    if config.g_ladder.active:
        return ladder_color(count, config.g_ladder, G_DEFAULT_COLORS)
    if config.b_ladder.active:
        return ladder_color(count, config.b_ladder, B_DEFAULT_COLORS)
    return NEUTRAL_COLOR
