"""Two-dimensional vectors, angles and the map geometry shared by the caster."""

from __future__ import annotations

import math
from dataclasses import dataclass

GRID_SIZE = 8
MAP_WIDTH = 8
MAP_HEIGHT = 8


@dataclass(frozen=True)
class Vector2:
    """A point or offset in the plane."""

    x: float
    y: float

    def translated(self, offset: Vector2) -> Vector2:
        """Return this vector moved by ``offset``."""
        return Vector2(self.x + offset.x, self.y + offset.y)


def distance(start: Vector2, end: Vector2) -> float:
    """Euclidean distance between two points."""
    return math.hypot(end.x - start.x, end.y - start.y)


def normalize_angle(angle: float) -> float:
    """Bring an angle in degrees into the range [0, 360)."""
    angle = math.fmod(angle, 360.0)
    if angle < 0:
        angle += 360.0
    return angle