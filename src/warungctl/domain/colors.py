"""Hex color helpers for the branding palette."""

from __future__ import annotations

import math
import re

HEX_COLOR_PATTERN: re.Pattern[str] = re.compile(r"^#[0-9A-Fa-f]{6}$")


def darken_color(color: str, percent: float) -> str:
    """Darken a ``#RRGGBB`` color by *percent*.

    Each channel drops by ``round(2.55 * percent)`` (halves round up) and
    is clamped to ``[0, 255]``.  Returns lowercase ``#rrggbb``.

    Raises:
        ValueError: *color* is not a 6-digit hex triple.
    """
    if not HEX_COLOR_PATTERN.match(color):
        msg = f"Not a 6-digit hex color: {color!r}"
        raise ValueError(msg)
    amount = math.floor(2.55 * percent + 0.5)
    value = int(color[1:], 16)
    channels = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    r, g, b = (min(255, max(0, c - amount)) for c in channels)
    return f"#{r:02x}{g:02x}{b:02x}"
