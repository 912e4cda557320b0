"""An in-memory 32-bit pixel buffer with simple drawing primitives."""

from __future__ import annotations

import math

from cubcaster.vectors import GRID_SIZE, Vector2

TRANSPARENT = 0xFF000000
WALL_COLOR = 0x5A52A3
SMALL_SQUARE_COLOR = 0xFFFFFF


class Image:
    """A width by height grid of 0xAARRGGBB pixels, all zero at first."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = int(width)
        self.height = int(height)
        self._pixels = [0] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return None

    def get_pixel(self, x: int, y: int) -> int:
        """Return the color stored at (x, y)."""
        index = self._index(x, y)
        if index is None:
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self._pixels[index]

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set one pixel; transparent colors and positions off the image are ignored."""
        color &= 0xFFFFFFFF
        if color == TRANSPARENT:
            return
        if not (math.isfinite(x) and math.isfinite(y)):
            return
        index = self._index(int(x), int(y))
        if index is not None:
            self._pixels[index] = color

    def fill(self, color: int) -> None:
        """Paint every pixel with ``color``."""
        color &= 0xFFFFFFFF
        if color == TRANSPARENT:
            return
        self._pixels = [color] * len(self._pixels)

    def draw_square(self, side: int, x: float, y: float) -> None:
        """Draw a filled square whose top-left corner is (x, y)."""
        side, left, top = int(side), int(x), int(y)
        color = SMALL_SQUARE_COLOR if side < GRID_SIZE else WALL_COLOR
        for row in range(top, top + side):
            for column in range(left, left + side):
                self.put_pixel(column, row, color)

    def draw_line(self, start: Vector2, end: Vector2, color: int) -> None:
        """Draw a straight line by stepping along its longer axis."""
        coords = (start.x, start.y, end.x, end.y)
        if not all(math.isfinite(value) for value in coords):
            raise ValueError("line endpoints must be finite")
        delta_x = int(end.x - start.x)
        delta_y = int(end.y - start.y)
        steps = max(abs(delta_x), abs(delta_y))
        step_x = delta_x / steps if steps else 0.0
        step_y = delta_y / steps if steps else 0.0
        x, y = start.x, start.y
        for _ in range(steps + 1):
            self.put_pixel(x, y, color)
            x += step_x
            y += step_y

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels row by row as packed R, G, B bytes."""
        out = bytearray()
        for pixel in self._pixels:
            out += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
        return bytes(out)