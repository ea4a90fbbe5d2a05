# mazecaster

A small first-person maze explorer. Walls are found by marching rays through a
grid maze and drawn as flat-coloured columns into a software framebuffer, which
is then shown in a pygame window. Hold `M` to switch to a top-down map of the
maze.

## Installation

```
pip install .
```

## Playing

The game loads five wall textures at start-up and expects them in an
`assets/` folder: `assets/wall1.png` to `assets/wall5.png`. By default that
folder is looked for in the current directory; `--assets` names the directory
that contains it instead.

```
mazecaster
mazecaster --assets /path/to/game
```

If a texture file is missing, `mazecaster` prints an error and exits with
status 1.

Controls:

| Key    | Action              |
|--------|---------------------|
| W      | move forward        |
| S      | move backward       |
| A      | turn left           |
| D      | turn right          |
| M      | hold for the 2D map |
| Escape | quit                |

Closing the window also quits.

Wall colours depend on the map character: `#` red, `+` green, `-` blue,
`|` yellow, and any other wall character white. The ceiling is sky blue and
the floor dark green. A ray that leaves the maze counts as hitting a `#` wall.

## Using the pieces

The modules also work without opening a window:

```python
from mazecaster.framebuffer import Color, Framebuffer
from mazecaster.player import Player
from mazecaster.render import render_2d, render_3d
from mazecaster.app import default_maze

fb = Framebuffer(800, 600, Color.BLACK)
player = Player((150.0, 150.0), 1.047, 1.047)
render_3d(fb, player, default_maze())
image = fb.to_image()  # a Pillow RGBA image
```

- `mazecaster.framebuffer`: `Color` (an RGBA named tuple with a few named
  colours such as `Color.RED` and `Color.SKYBLUE`) and `Framebuffer`
  (`clear`, `set_pixel`, `set_pixel_current`, `get_color`, `to_image`).
  Writes outside the buffer are ignored; reads outside it return the
  background colour.
- `mazecaster.line`: `line(fb, start, end)` draws a Bresenham line, both end
  points included, in the framebuffer's `current_color`.
- `mazecaster.player`: `Player`, with `move_forward`, `move_backward`,
  `turn_left`, `turn_right`, `update_keyboard(pressed)` (a collection of held
  key names `w`, `s`, `a`, `d`) and `update_gamepad(axis_x, axis_y,
  left_pressed, right_pressed)`.
- `mazecaster.textures`: `TextureManager`, which maps wall characters to
  images; `TextureManager.load(base_dir)` reads them from `base_dir/assets/`,
  `get_pixel_color` samples a texel (clamped to the image, white for an
  unknown character) and `get_texture` returns the image or `None`.
- `mazecaster.raycasting`: `cast_ray`, `RaycastResult` and
  `render_wall_slice`.
- `mazecaster.render`: `render_2d` and `render_3d`. `render_3d` draws an
  800×600 view with one ray per column.
- `mazecaster.app`: `default_maze()` and `main(argv=None)`.

## What it does not do

- Wall textures are loaded but not drawn: walls are filled with a flat colour
  per wall character.
- The player walks through walls; there is no collision check.
- Gamepad input is not read by the game window. `Player.update_gamepad` takes
  axis values and button states that the caller supplies.
- There is only the built-in 5×5 maze; mazes cannot be loaded from a file.

## Running the tests

```
pip install .[test]
pytest
```