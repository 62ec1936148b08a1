"""An in-memory 32-bit pixel canvas and gradient line drawing."""

from __future__ import annotations

import struct
from typing import Iterator

from wirefdf.colors import lerp_color


class Canvas:
    """A width by height grid of 32-bit colour values, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; coordinates outside the canvas are ignored."""
        if self._contains(x, y):
            self._pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return a pixel's colour; raises ``IndexError`` outside the canvas."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[y * self.width + x]

    def to_bytes(self) -> bytes:
        """Return the pixels row by row, four little-endian bytes each."""
        return struct.pack(f"<{len(self._pixels)}I", *self._pixels)


def _walk(major: int, minor: int) -> Iterator[tuple[int, int, int]]:
    """Step along the major axis, yielding offsets and a 0..255 progress."""
    major_step = -1 if major < 0 else 1
    minor_step = -1 if minor < 0 else 1
    major_len = abs(major)
    minor_len = abs(minor)
    along = across = 0
    error = major_len
    while abs(along) < major_len:
        yield along, across, 0xFF * abs(along) // major_len
        along += major_step
        error -= minor_len
        if error < 0:
            across += minor_step
            error += major_len


def draw_line(
    canvas: Canvas,
    start: tuple[int, int],
    end: tuple[int, int],
    color_from: int,
    color_to: int,
) -> None:
    """Draw a gradient line from ``start`` up to, but not including, ``end``."""
    sx, sy = start
    dx = end[0] - sx
    dy = end[1] - sy
    if abs(dx) > abs(dy):
        for along, across, t in _walk(dx, dy):
            canvas.put_pixel(sx + along, sy + across, lerp_color(color_from, color_to, t))
    else:
        for along, across, t in _walk(dy, dx):
            canvas.put_pixel(sx + across, sy + along, lerp_color(color_from, color_to, t))