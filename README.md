# cubcaster

This is a compact first-person raycaster on a square grid. It finds wall hits
by walking the map's vertical and horizontal grid lines, and for each ray it
keeps the nearer of the two hits. It draws one wall column per screen column
and overlays a top-down minimap. The minimap shows the walls, a fan of cast
rays and the player's heading.

## Install

```
pip install .
```

To run the tests as well, install `.[test]`.

## Run

```
cubcaster
```

This opens a 960×600 window on the built-in 8×8 map. The player starts at
cell (1.5, 2.5) with a heading of 0 degrees. The controls are:

- **Up arrow**: move 0.2 cells forward along the heading.
- **Down arrow**: move 0.2 cells backward along the heading.
- **Left arrow**: turn, lowering the heading by 2 degrees. At 0 or below, the heading jumps to 360.
- **Right arrow**: turn, raising the heading by 2 degrees. Above 360, the heading resets to 0.

Each of these key presses prints the current heading to standard output. You
leave by closing the window. The command takes no options beyond `--help`.

## Use as a library

```python
from cubcaster.game import default_scene

scene = default_scene()
frame = scene.render_frame()   # an Image
rgb = frame.to_rgb_bytes()     # packed R, G, B bytes, row by row
```

You can also build a scene from your own map. A map is a sequence of strings,
and `"1"` marks a wall. Any cell off the map counts as a wall.

```python
from cubcaster.game import Player, Scene, Key

scene = Scene(["1111", "1001", "1001", "1111"], Player(1.5, 1.5, 45.0), 320, 200)
hit, on_horizontal_line = scene.cast(45.0)
scene.on_key_press(Key.UP)
```

### Modules

- `cubcaster.vectors` provides:
  - `Vector2`, a frozen point with `translated`;
  - `distance`;
  - `normalize_angle`, which maps degrees into [0, 360).
- `cubcaster.image` provides `Image`, a buffer of 0xAARRGGBB pixels. Its methods are:
  - `get_pixel`;
  - `put_pixel`, which ignores positions off the image and the transparent colour 0xFF000000;
  - `fill`;
  - `draw_square`;
  - `draw_line`, which raises `ValueError` for endpoints that are not finite;
  - `to_rgb_bytes`.
- `cubcaster.dda` provides `check_wall`, `find_vertical_hit` and `find_horizontal_hit`.
- `cubcaster.game` provides:
  - `Key`;
  - `Player`;
  - `Scene`, which has `cast`, `render_frame`, `draw_view`, `draw_wall_column`, `draw_minimap`, `draw_minimap_rays`, `draw_minimap_direction` and `on_key_press`;
  - `default_scene`;
  - `main`, the entry point of the `cubcaster` command.

The package also ships some small helpers:

- `cubcaster.chars` covers ASCII character tests, case mapping, `atoi` and `itoa`.
- `cubcaster.strings` covers:
  - character search (`find_char` and `rfind_char`);
  - `compare_prefix`;
  - `find_bounded`;
  - `substring`;
  - `trim`;
  - `split`, which drops empty pieces;
  - `bounded_copy` and `bounded_concat`;
  - `map_indexed` and `iter_indexed`.
- `cubcaster.memory` covers byte-buffer operations: `fill`, `zero`, `allocate_zeroed`, `find_byte`, `compare`, `copy` and `move`. `move` handles overlapping regions.
- `cubcaster.output` provides `put_char`, `put_str`, `put_endl` and `put_nbr`. They write to a text stream, or to standard output by default.
- `cubcaster.lines` provides `LineReader`. It reads a text or binary stream in fixed-size chunks (42 by default) and returns one line at a time, keeping the newline. It can be used as an iterator.

## What it does not do

- The map is fixed in code. Nothing reads a map or scene description from a file.
- Walls are drawn in a single flat colour. There are no textures, sprites or floor and ceiling images.
- There is no collision handling, so the player can walk through walls.

## Test

```
pytest
```