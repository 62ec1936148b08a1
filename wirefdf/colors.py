"""Packed 0xRRGGBB colours: construction, hex parsing and interpolation."""

from __future__ import annotations

import re

_HEX_PREFIX = re.compile(r"[0-9a-fA-F]*")


def rgb_color(r: int, g: int, b: int) -> int:
    """Pack three channel values into a single 0xRRGGBB integer."""
    return r << 16 | g << 8 | b


def hex_color(text: str) -> int:
    """Parse the leading hexadecimal digits of ``text``.

    Parsing stops at the first character that is not a hex digit; an
    empty prefix yields 0.
    """
    digits = _HEX_PREFIX.match(text).group(0)
    return int(digits, 16) if digits else 0


def lerp(a: int, b: int, t: int) -> int:
    """Interpolate from ``a`` to ``b`` where ``t`` runs from 0 to 255."""
    return int(a + (b - a) * (t / 255.0))


def lerp_color(color1: int, color2: int, t: int) -> int:
    """Interpolate each channel of two packed colours; ``t`` is in 0..255."""
    r = lerp((color1 >> 16) & 0xFF, (color2 >> 16) & 0xFF, t)
    g = lerp((color1 >> 8) & 0xFF, (color2 >> 8) & 0xFF, t)
    b = lerp(color1 & 0xFF, color2 & 0xFF, t)
    return rgb_color(r, g, b)