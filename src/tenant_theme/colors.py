"""
Pure-Python color math for theme derivation.

Every function here is total: malformed input degrades to an identity or
fixed fallback instead of raising. Hex decoding reports failure as ``None``
so callers branch on the result rather than catching exceptions.
"""

from __future__ import annotations

import math
import re
from typing import Any, NamedTuple

WHITE = "#ffffff"
BLACK = "#000000"

_HEX6 = re.compile(r"^[0-9a-fA-F]{6}$")


class Rgb(NamedTuple):
    """An 8-bit RGB triple."""

    r: int
    g: int
    b: int


def clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def hex_to_rgb(value: Any) -> Rgb | None:
    """Decode a ``#rrggbb`` (or ``rrggbb``) string.

    Returns:
        The decoded triple, or None when the value is not exactly six hex
        digits after stripping whitespace and one leading ``#``.
    """
    text = "" if value is None else str(value).strip()
    if text.startswith("#"):
        text = text[1:]
    if not _HEX6.match(text):
        return None
    return Rgb(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))


def rgb_to_hex(rgb: tuple[float, float, float]) -> str:
    """Encode a channel triple as ``#rrggbb``.

    Channels are rounded half-up and clamped to [0, 255].
    """
    return "#" + "".join(f"{_channel(c):02x}" for c in rgb)


def mix(c1: Any, c2: Any, amount: float) -> Any:
    """Linearly interpolate from ``c1`` toward ``c2``.

    Returns ``c1`` unchanged if either color fails to decode.
    """
    a = clamp01(amount)
    rgb1 = hex_to_rgb(c1)
    rgb2 = hex_to_rgb(c2)
    if rgb1 is None or rgb2 is None:
        return c1
    return rgb_to_hex(
        (
            rgb1.r + (rgb2.r - rgb1.r) * a,
            rgb1.g + (rgb2.g - rgb1.g) * a,
            rgb1.b + (rgb2.b - rgb1.b) * a,
        )
    )


def tint(color: Any, amount: float) -> Any:
    return mix(color, WHITE, amount)


def shade(color: Any, amount: float) -> Any:
    return mix(color, BLACK, amount)


def rgba(value: Any, alpha: float) -> str:
    """Format a hex color as a CSS ``rgba()`` call.

    Undecodable colors fall back to opaque black's channels with the
    requested alpha.
    """
    a = format_number(clamp01(alpha))
    rgb = hex_to_rgb(value)
    if rgb is None:
        return f"rgba(0,0,0,{a})"
    return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {a})"


def glow_alpha(intensity: Any) -> float:
    level = str(intensity or "medium").lower()
    if level == "soft":
        return 0.2
    if level == "strong":
        return 0.4
    return 0.3


def glow_shadow(glow_color: str, spread: Any) -> str:
    """Build the focus/selection glow box-shadow.

    ``tight`` is a bare 2px ring; ``medium`` (the default for unknown
    values) and ``wide`` add an outer glow layer.
    """
    size = str(spread or "medium").lower()
    if size == "tight":
        return f"0 0 0 2px {glow_color}"
    if size == "wide":
        return f"0 0 0 2px {glow_color}, 0 18px 45px -18px {glow_color}"
    return f"0 0 0 2px {glow_color}, 0 10px 25px -12px {glow_color}"


def format_number(value: float) -> str:
    """Format a number the way it is written in CSS (no trailing ``.0``)."""
    if isinstance(value, int):
        # JSON integers may be too large for a float
        return str(int(value))
    if value.is_integer():
        return str(int(value))
    return repr(float(value))


def _channel(value: float) -> int:
    return max(0, min(255, math.floor(value + 0.5)))
