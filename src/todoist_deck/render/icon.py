# src/todoist_deck/render/icon.py

from __future__ import annotations

from xml.sax.saxutils import escape

from ..core.models import ButtonConfig
from .color_policy import resolve_color

CANVAS_SIZE = 144
TEXT_WIDTH = 140
COUNT_MAX_FONT = 40
LABEL_MAX_FONT = 28
FONT_FAMILY = "Tahoma"

DATA_URI_PREFIX = "data:image/svg+xml;charset=utf8,"


def font_size(text: str, max_width: float, max_size: float) -> float:
    """Rough fit: assumes an average glyph is 0.45em wide."""
    if not text:
        return max_size
    return min(max_width / (len(text) * 0.45), max_size)


def count_label(count: int) -> str:
    return f"{count} Tasks"


def _px(size: float) -> str:
    # Whole sizes print as "28px", not "28.0px".
    return str(int(size)) if float(size).is_integer() else str(size)


def _text(y: int, size: float, text: str) -> str:
    return (
        f'<text x="{CANVAS_SIZE // 2}" y="{y}" dominant-baseline="middle" text-anchor="middle" '
        f'fill="#000" font-size="{_px(size)}px" font-family="{FONT_FAMILY}">{escape(text)}</text>'
    )


def build_svg(count: int, config: ButtonConfig) -> str:
    main_text = count_label(count)
    background = escape(resolve_color(count, config), {'"': "&quot;"})
    lines = [
        f'<svg width="{CANVAS_SIZE}" height="{CANVAS_SIZE}" xmlns="http://www.w3.org/2000/svg">',
        f'<rect width="{CANVAS_SIZE}" height="{CANVAS_SIZE}" fill="{background}" />',
        _text(CANVAS_SIZE // 2, font_size(main_text, TEXT_WIDTH, COUNT_MAX_FONT), main_text),
        _text(135, font_size(config.item_name, TEXT_WIDTH, LABEL_MAX_FONT), config.item_name),
        "</svg>",
    ]
    return "\n".join(lines)


def render_icon(count: int, config: ButtonConfig) -> str:
    """Icon payload for the host: inline SVG as a data URI."""
    return DATA_URI_PREFIX + build_svg(count, config)
