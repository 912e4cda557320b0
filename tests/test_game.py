import math

import pytest

from cubcaster.dda import check_wall
from cubcaster.game import (
    BACKGROUND_COLOR,
    DEFAULT_MAP,
    DIRECTION_COLOR,
    TURN_STEP,
    WALL_COLUMN_COLOR,
    Key,
    Player,
    Scene,
    default_scene,
)
from cubcaster.image import WALL_COLOR
from cubcaster.vectors import GRID_SIZE, Vector2, distance


@pytest.fixture(scope="module")
def rendered():
    return default_scene().render_frame()


def test_default_scene_layout():
    scene = default_scene()
    assert scene.grid[0] == "11111111"
    assert scene.grid[3] == "10010001"
    assert (scene.player.x, scene.player.y, scene.player.direction) == (1.5, 2.5, 0)
    assert (scene.image.width, scene.image.height) == (960, 600)


def test_scene_rejects_empty_image():
    with pytest.raises(ValueError):
        Scene(DEFAULT_MAP, Player(1.5, 2.5), 0, 10)


def test_up_then_down_returns_to_start():
    scene = default_scene()
    scene.player.direction = 30
    scene.on_key_press(Key.UP)
    moved = distance(Vector2(1.5, 2.5), Vector2(scene.player.x, scene.player.y))
    assert math.isclose(moved, 0.2)
    scene.on_key_press(Key.DOWN)
    assert math.isclose(scene.player.x, 1.5)
    assert math.isclose(scene.player.y, 2.5)


def test_up_follows_direction():
    scene = default_scene()
    scene.player.direction = 90
    scene.on_key_press(Key.UP)
    assert math.isclose(scene.player.x, 1.5, abs_tol=1e-9)
    assert scene.player.y > 2.5


def test_left_turn_prints_direction(capsys):
    scene = default_scene()
    scene.on_key_press(Key.LEFT)
    assert scene.player.direction == TURN_STEP
    assert capsys.readouterr().out == "2.000000\n"


def test_left_turn_wraps_past_full_circle():
    scene = default_scene()
    scene.player.direction = 360
    scene.on_key_press(Key.LEFT)
    assert scene.player.direction == 0


def test_right_turn_from_zero_jumps_to_full_circle():
    scene = default_scene()
    scene.on_key_press(Key.RIGHT)
    assert scene.player.direction == 360
    scene.on_key_press(Key.RIGHT)
    assert scene.player.direction == 360 - TURN_STEP


def test_unknown_key_changes_nothing():
    scene = default_scene()
    scene.on_key_press(97)
    assert (scene.player.x, scene.player.y, scene.player.direction) == (1.5, 2.5, 0)


def test_cast_straight_ahead_hits_a_wall():
    scene = default_scene()
    hit, horizontal = scene.cast(0)
    assert horizontal is False
    assert math.isclose(hit.y, scene.player.y * GRID_SIZE)
    assert hit.x > scene.player.x * GRID_SIZE
    assert check_wall(scene.grid, int(hit.x / GRID_SIZE), int(hit.y / GRID_SIZE))


@pytest.mark.parametrize("angle", range(1, 360, 7))
def test_cast_stays_inside_the_map(angle):
    scene = default_scene()
    hit, _ = scene.cast(angle)
    limit = len(scene.grid) * GRID_SIZE
    assert -1e-6 <= hit.x <= limit + 1e-6
    assert -1e-6 <= hit.y <= limit + 1e-6


def test_render_frame_background_and_wall(rendered):
    assert rendered.get_pixel(0, 0) == BACKGROUND_COLOR
    assert rendered.get_pixel(480, 300) == WALL_COLUMN_COLOR


def test_render_frame_draws_minimap_walls(rendered):
    assert rendered.get_pixel(9, 385) == WALL_COLOR


def test_wall_column_is_contiguous_and_covers_middle():
    scene = Scene(DEFAULT_MAP, Player(1.5, 2.5, 0.0), 60, 40)
    hit, _ = scene.cast(0)
    scene.draw_wall_column(30, hit)
    rows = [y for y in range(40) if scene.image.get_pixel(30, y) == WALL_COLUMN_COLOR]
    assert 20 in rows
    assert rows == list(range(rows[0], rows[-1] + 1))
    assert all(scene.image.get_pixel(29, y) == 0 for y in range(40))


def test_wall_column_at_zero_distance_draws_nothing():
    scene = Scene(DEFAULT_MAP, Player(1.5, 2.5, 0.0), 20, 20)
    scene.draw_wall_column(5, Vector2(1.5 * GRID_SIZE, 2.5 * GRID_SIZE))
    assert all(scene.image.get_pixel(5, y) == 0 for y in range(20))


def test_minimap_direction_line():
    scene = Scene(DEFAULT_MAP, Player(1.5, 2.5, 0.0), 64, 64)
    scene.image.fill(BACKGROUND_COLOR)
    scene.draw_minimap_direction(Vector2(0, 0))
    assert scene.image.get_pixel(12, 20) == DIRECTION_COLOR
    assert scene.image.get_pixel(12 + 2 * GRID_SIZE, 20) == DIRECTION_COLOR
    assert scene.image.get_pixel(12, 21) == BACKGROUND_COLOR


def test_minimap_marks_every_wall_cell():
    scene = Scene(DEFAULT_MAP, Player(1.5, 2.5, 0.0), 80, 80)
    scene.image.fill(BACKGROUND_COLOR)
    scene.draw_minimap(Vector2(0, 0))
    half = GRID_SIZE // 2
    for row, line in enumerate(DEFAULT_MAP):
        for column, cell in enumerate(line):
            if cell == "1":
                pixel = scene.image.get_pixel(column * GRID_SIZE + half, row * GRID_SIZE + half)
                assert pixel == WALL_COLOR