# cubcaster

A small first-person raycaster. It reads a `.cub` scene file that gives four
wall textures, a floor colour, a ceiling colour and a grid map. It checks the
file and then opens a pygame window where you can walk around the map.

## Installing

```
pip install .
```

## Running

```
cubcaster path/to/scene.cub
```

The command takes exactly one argument, and that argument must end in
`.cub`. If the file cannot be used, the program writes a message to standard
error and exits with status 1. The message has this form:

```
Error
cub3D: Map: No player found
```

## Controls

| Key        | Action              |
|------------|---------------------|
| W / S      | move forward / back |
| A / D      | strafe left / right |
| Left/Right | turn                |
| Esc        | quit                |

Closing the window also quits. If more than one movement key is held at
once, the player moves at two thirds of the normal speed. The player cannot
walk into walls: a step is refused when a small square around the player
would overlap a wall block.

## The `.cub` format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `NO`, `SO`, `WE` and `EA` give the wall texture for each direction. Each
  path must name a readable file that is not a directory. Each may appear
  only once.
- `F` and `C` give the floor and ceiling colours as three values from 0 to
  255, separated by single commas. Each may appear only once. A colour of
  `0,0,0` counts as missing, so pure black cannot be used.
- The map comes last, after every other element; the first line that starts
  with `1` begins the map and takes the rest of the file. It uses `1` for
  walls, `0` for floor, a space for empty space, and one of `N`, `S`, `E`,
  `W` for the player's start tile and facing direction.
- Every floor or player tile must be surrounded on all eight sides by floor,
  wall or player tiles. The map must not contain empty lines, and it must
  hold exactly one player.

Wall textures are XPM images. Colours may be given as `#RGB`-style hex
values of any supported length, `None`, or a few common colour names. The
renderer expects 64×64 textures; other sizes are sampled with wrap-around.

## Using it as a library

The parser and the renderer work without a window:

```python
from cubcaster.cubfile import parse_map_file
from cubcaster.errors import CubError

try:
    scene = parse_map_file("maps/room.cub")
except CubError as exc:
    print(exc)
```

- `cubcaster.cubfile.load_level(args)` runs every check on an argument list
  (without the program name) and returns a `Level` holding the scene, the
  padded `GameMap` and the placed `Player`.
- `cubcaster.xpm.load_textures(scene)` loads the four wall textures.
- `cubcaster.render.draw_frame(frame, player, game_map, textures, scene)`
  draws one view into a `cubcaster.render.FrameBuffer`.
- `cubcaster.debug.draw_debug_frame(frame, player, game_map, show_map)`
  draws a top-down view with wall outlines and rays, or flat untextured
  walls.
- `cubcaster.app.Game` ties these together; `Game.tick()` advances one frame
  and returns the frame to show.

All parsing errors are raised as `cubcaster.errors.CubError`.

## Limits

Only XPM textures are read. The command line has no option to open the
debug view; it is only reachable through `Game.run(debug=True)`.

## Tests

```
pip install .[test]
pytest
```