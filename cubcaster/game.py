"""The ray-cast scene: a player on a grid map, a first-person view and a minimap."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from cubcaster.dda import find_horizontal_hit, find_vertical_hit
from cubcaster.image import Image
from cubcaster.vectors import GRID_SIZE, Vector2, distance

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 600
WINDOW_TITLE = "cub3D"

FIELD_OF_VIEW = 60
MINIMAP_SPREAD = 45
MINIMAP_RAY_STEP = 0.05
MOVE_STEP = 0.2
TURN_STEP = 2

BACKGROUND_COLOR = 0xF6F2FF
WALL_COLUMN_COLOR = 0x5C4DD1
HORIZONTAL_RAY_COLOR = 0xB4ADEA
VERTICAL_RAY_COLOR = 0x5C4DD1
DIRECTION_COLOR = 0x000000
MINIMAP_ORIGIN = Vector2(GRID_SIZE, GRID_SIZE * 4 * 12)

DEFAULT_MAP = (
    "11111111",
    "10000001",
    "10000001",
    "10010001",
    "10001001",
    "10000001",
    "10000001",
    "11111111",
)


class Key(IntEnum):
    """Key codes the scene reacts to."""

    UP = 65362
    DOWN = 65364
    RIGHT = 65361
    LEFT = 65363


@dataclass
class Player:
    """Position in map cells and viewing direction in degrees."""

    x: float
    y: float
    direction: float = 0.0


class Scene:
    """A map, a player and the image the frame is rendered into."""

    def __init__(self, grid: Sequence[str], player: Player, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("scene dimensions must be positive")
        self.grid = tuple(grid)
        self.player = player
        self.image = Image(width, height)

    def _origin(self) -> Vector2:
        return Vector2(self.player.x * GRID_SIZE, self.player.y * GRID_SIZE)

    def cast(self, angle: float) -> tuple[Vector2, bool]:
        """Cast one ray; return the nearer hit and whether it lies on a horizontal line."""
        origin = self._origin()
        horizontal = find_horizontal_hit(origin, angle, self.grid)
        vertical = find_vertical_hit(origin, angle, self.grid)
        if distance(origin, horizontal) < distance(origin, vertical):
            return horizontal, True
        return vertical, False

    def render_frame(self) -> Image:
        """Draw the whole frame and return the image."""
        self.image.fill(BACKGROUND_COLOR)
        self.draw_view()
        self.draw_minimap(MINIMAP_ORIGIN)
        return self.image

    def draw_view(self) -> None:
        """Draw one wall column per ray across the field of view."""
        base = int(self.player.direction)
        half = FIELD_OF_VIEW / 2
        step = FIELD_OF_VIEW / self.image.width
        angle = base - half
        column = 0
        while angle < base + half:
            hit, _ = self.cast(angle)
            self.draw_wall_column(column, hit)
            angle += step
            column += 1

    def draw_wall_column(self, column: int, hit: Vector2) -> None:
        """Draw the vertical wall slice for ``column`` given where its ray hit."""
        width, height = self.image.width, self.image.height
        direction = self.player.direction
        ray_angle = (direction - FIELD_OF_VIEW / 2) + column * (FIELD_OF_VIEW / width)
        perpendicular = distance(self._origin(), hit) * math.cos(
            math.radians(direction - ray_angle)
        )
        if math.isnan(perpendicular) or perpendicular <= 0:
            return
        projection = (width / 2) / math.tan(math.radians(FIELD_OF_VIEW) / 2)
        line_height = GRID_SIZE / perpendicular * projection
        if not math.isfinite(line_height):
            return
        top = height / 2 - line_height / 2
        steps = abs(int(line_height))
        first = max(0, math.ceil(-top))
        last = min(steps, math.ceil(height - top) - 1)
        for offset in range(first, last + 1):
            self.image.put_pixel(column, top + offset, WALL_COLUMN_COLOR)

    def draw_minimap(self, origin: Vector2) -> None:
        """Draw the map's walls, the ray fan and the facing line at ``origin``."""
        for row, line in enumerate(self.grid):
            for column, cell in enumerate(line):
                if cell == "1":
                    self.image.draw_square(
                        GRID_SIZE,
                        column * GRID_SIZE + origin.x,
                        row * GRID_SIZE + origin.y,
                    )
        self.draw_minimap_rays(origin)
        self.draw_minimap_direction(origin)

    def draw_minimap_rays(self, origin: Vector2) -> None:
        """Draw the fan of rays around the player's direction on the minimap."""
        start = self._origin().translated(origin)
        base = int(self.player.direction)
        angle = base - MINIMAP_SPREAD
        while angle < base + MINIMAP_SPREAD:
            hit, horizontal = self.cast(angle)
            angle += MINIMAP_RAY_STEP
            if not (math.isfinite(hit.x) and math.isfinite(hit.y)):
                continue
            color = HORIZONTAL_RAY_COLOR if horizontal else VERTICAL_RAY_COLOR
            self.image.draw_line(start, hit.translated(origin), color)

    def draw_minimap_direction(self, origin: Vector2) -> None:
        """Draw a short line showing where the player faces."""
        start = self._origin()
        radians = math.radians(self.player.direction)
        end = Vector2(
            start.x + 2 * GRID_SIZE * math.cos(radians),
            start.y + 2 * GRID_SIZE * math.sin(radians),
        )
        self.image.draw_line(start.translated(origin), end.translated(origin), DIRECTION_COLOR)

    def on_key_press(self, code: int) -> None:
        """Move or turn the player for ``code`` and print the new direction."""
        player = self.player
        radians = math.radians(player.direction)
        if code == Key.UP:
            player.x += MOVE_STEP * math.cos(radians)
            player.y += MOVE_STEP * math.sin(radians)
        elif code == Key.DOWN:
            player.x -= MOVE_STEP * math.cos(radians)
            player.y -= MOVE_STEP * math.sin(radians)
        elif code == Key.LEFT:
            player.direction += TURN_STEP
            if player.direction > 360:
                player.direction = 0
        elif code == Key.RIGHT:
            if player.direction <= 0:
                player.direction = 360
            else:
                player.direction -= TURN_STEP
        print(f"{player.direction:f}")


def default_scene() -> Scene:
    """The built-in map with the player at its starting place."""
    return Scene(DEFAULT_MAP, Player(1.5, 2.5, 0.0), WINDOW_WIDTH, WINDOW_HEIGHT)


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and run the scene until it is closed."""
    parser = argparse.ArgumentParser(
        prog="cubcaster", description="Walk around a small grid map in first person."
    )
    parser.parse_args(argv)

    import pygame

    scene = default_scene()
    size = (scene.image.width, scene.image.height)
    key_codes = {
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.RIGHT,
        pygame.K_RIGHT: Key.LEFT,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.set_repeat(200, 30)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    code = key_codes.get(event.key)
                    if code is not None:
                        scene.on_key_press(code)
            frame = scene.render_frame()
            surface = pygame.image.frombuffer(frame.to_rgb_bytes(), size, "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
    return 0