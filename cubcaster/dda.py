"""Grid ray casting: the first wall crossed along vertical or horizontal lines."""

from __future__ import annotations

import math
from collections.abc import Sequence

from cubcaster.vectors import GRID_SIZE, Vector2, normalize_angle


def check_wall(grid: Sequence[str], x: int, y: int) -> bool:
    """Whether cell (x, y) is a wall; anything off the map counts as one."""
    if y < 0 or y >= len(grid) or x < 0 or x >= len(grid[y]):
        return True
    return grid[y][x] == "1"


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _blocked(grid: Sequence[str], cell_x: float, cell_y: float) -> bool:
    if not (math.isfinite(cell_x) and math.isfinite(cell_y)):
        return True
    return check_wall(grid, int(cell_x), int(cell_y))


def find_vertical_hit(origin: Vector2, angle: float, grid: Sequence[str]) -> Vector2:
    """Where a ray from ``origin`` first meets a wall on a vertical grid line."""
    angle = normalize_angle(angle)
    slope = math.tan(math.radians(angle))
    step_x = -1.0 if 90.0 < angle < 270.0 else 1.0
    step_y = step_x * slope

    cell_x = origin.x / GRID_SIZE
    x = float(math.floor(cell_x) if step_x < 0 else math.ceil(cell_x))
    y = origin.y / GRID_SIZE + (x * GRID_SIZE - origin.x) * slope / GRID_SIZE

    while True:
        map_x = x - 1 if step_x < 0 else x
        if _blocked(grid, map_x, y):
            break
        x += step_x
        y += step_y
    return Vector2(x * GRID_SIZE, y * GRID_SIZE)


def find_horizontal_hit(origin: Vector2, angle: float, grid: Sequence[str]) -> Vector2:
    """Where a ray from ``origin`` first meets a wall on a horizontal grid line."""
    angle = normalize_angle(angle)
    slope = math.tan(math.radians(angle))
    step_y = -1.0 if angle > 180.0 else 1.0
    step_x = _divide(step_y, slope)

    cell_y = origin.y / GRID_SIZE
    y = float(math.floor(cell_y) if step_y < 0 else math.ceil(cell_y))
    x = origin.x / GRID_SIZE + _divide(y * GRID_SIZE - origin.y, slope * GRID_SIZE)

    while True:
        map_y = y - 1 if step_y < 0 else y
        if _blocked(grid, x, map_y):
            break
        x += step_x
        y += step_y
    return Vector2(x * GRID_SIZE, y * GRID_SIZE)