"""
colors.py: Hex color helpers shared by the renderer and client.
"""

import math
from typing import Tuple

RGB = Tuple[int, int, int]


def hex_to_rgb(color: str) -> RGB:
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"expected a #RRGGBB color, got {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{(r << 16) | (g << 8) | b:06x}"


def adjust_brightness(color: str, amount: int) -> str:
    """Adds amount to each channel, clamped to [0, 255]."""
    return rgb_to_hex(tuple(max(0, min(255, c + amount)) for c in hex_to_rgb(color)))


def lerp_rgb(c1: RGB, c2: RGB, t: float) -> RGB:
    # Half-up rounding, not round()'s half-to-even
    return tuple(math.floor(a + (b - a) * t + 0.5) for a, b in zip(c1, c2))


def lerp_color(color1: str, color2: str, t: float) -> str:
    """Per-channel linear interpolation; t=0 gives color1, t=1 gives color2."""
    return rgb_to_hex(lerp_rgb(hex_to_rgb(color1), hex_to_rgb(color2), t))
