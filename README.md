# cubraycast

A grid-based raycasting engine. It reads a `.cub` scene description (four wall
textures in XPM format, a floor and a ceiling colour, and a map of walls),
checks it, and renders it from a first-person view in an 800×600 window
using pygame.

## Installing

```
pip install .
```

## Running

```
cubraycast maps/default.cub
```

The command takes exactly one argument, the path of a `.cub` file. With any
other number of arguments it prints an error and exits with status 1.

Controls:

| Key          | Action               |
|--------------|----------------------|
| W / S        | move forward / back  |
| A / D        | strafe left / right  |
| ← / →        | turn left / right    |
| Esc          | quit                 |

Closing the window also ends the game; the program then prints
`YOU END THE GAME` and exits with status 0.

The player moves at 5 map cells per second and turns at 3 radians per second,
scaled by the time the previous frame took to draw. Walls are kept at a
distance of 0.4 cells; movement into a wall is cancelled along the blocked
axis only, so the player slides along walls.

## The `.cub` format

The first six non-empty lines are settings, in any order:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE`, `EA` give the path of an existing file ending in `.xpm`.
- `F` (floor) and `C` (ceiling) give `R,G,B`: exactly two commas, three
  non-empty parts, each at most three digits (spaces around them are allowed)
  and in the range 0–255.

The map starts at the first non-empty line after the settings and uses only
these characters:

- `1` wall, `0` floor, space for nothing,
- exactly one of `N`, `S`, `E`, `W`: the player's start and the way they face.

Every floor cell and the player's cell must be enclosed: none may lie on the
first or last row, at either end of its row, next to a space, or beside a
shorter row above or below.

XPM textures may use `#` hex colours (1 to 4 digits per channel), `None`
(drawn black) and the names black, white, red, green, blue, yellow, gray and
grey.

Any problem with the file is reported as

```
Error
<message>
```

and the program exits with status 1.

## Using it as a library

```python
from cubraycast.scene import load_scene
from cubraycast.app import Game

scene = load_scene("maps/default.cub")   # scene.config, scene.rows
game = Game.from_scene(scene)             # loads the four textures
game.tick(16.0)                           # move by 16 ms of held keys, redraw
pixel = game.frame.get(400, 300)          # 0xRRGGBB
```

The parts can be used separately:

- `cubraycast.scene`: `read_lines`, `split_sections`, `load_scene`, `Scene`.
- `cubraycast.config`: `parse_config_lines` returning a `SceneConfig`,
  `parse_rgb` returning an `Rgb` (`to_int()` packs it as `0xRRGGBB`),
  `split_first_and_rest`, `is_number`, `count_commas`, `check_texture_path`.
- `cubraycast.mapcheck`: `validate_map`, `only_valid_chars`,
  `has_single_player`, `is_closed`.
- `cubraycast.player`: `Player` (`from_map`, `press`, `release`, `update`),
  the `Key` codes and `check_collision`.
- `cubraycast.texture`: `parse_xpm`, `load_xpm`, `load_textures` and
  `Texture` (`pixel(x, y)` clamps to the image).
- `cubraycast.raycast`: `Frame` (`put`, `get`, `clear`), `ray_direction`,
  `cast_ray` returning a `RayHit`, `draw_span` and `render`.
- `cubraycast.vector`: the immutable `Vector`.
- `cubraycast.app`: `Game` (`from_scene`, `tick`, `run`),
  `time_in_milliseconds` and `main`.

Errors raise `cubraycast.errors.MapError` or `cubraycast.errors.GraphicsError`,
both subclasses of `CubError`; `format_error` gives the text printed for one.

## What it does not do

There is no mouse look, no minimap, no doors, sprites or sound: the engine
draws textured walls over a flat ceiling and floor and nothing else.

## Tests

```
pip install .[test]
pytest
```