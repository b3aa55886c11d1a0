# lazaretto

A small raycasting engine for grid maps in the `.cub` format. It reads and
validates a map description, loads the wall textures, moves a player with
collisions, casts rays with DDA and draws first-person frames and a minimap
onto in-memory canvases.

## Installing

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## The map format

A `.cub` file starts with six elements, in any order, one per line:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 40,30,20
C 120,160,200
```

`NO`, `SO`, `WE` and `EA` name the wall textures for each face. Each must
appear exactly once, as the identifier followed by a single path, and every
path must open for reading (relative paths are taken from the current
directory). `F` and `C` give the floor and ceiling colours as three values
separated by exactly two commas, each from 0 to 255.

The map follows the elements:

```
111111
100D01
10N001
111111
```

- `1` is a wall, `0` is floor, a space is outside the map.
- `N`, `S`, `E` or `W` marks the one spawn point and the facing direction.
- `D` is a door; it must sit between two walls, either left and right or
  above and below. `lazaretto.raycaster.toggle_door` turns a door within
  reach into an open door (`O`) and back.

The map must be closed: each row begins and ends with a wall, the first row
holds only walls, and no floor, spawn or door cell may touch a space or the
edge of the map. Any failure raises `lazaretto.config.MapError`.

`lazaretto.textio.has_cub_extension` checks that a path ends in `.cub`.

## Using the library

```python
from PIL import Image

from lazaretto.canvas import Canvas
from lazaretto.config import MINIMAP_HEIGHT, MINIMAP_WIDTH
from lazaretto.geometry import deg_to_radian
from lazaretto.parser import parse_map_file
from lazaretto.player import Key, Player
from lazaretto.raycaster import cast_rays, rays_to_walls
from lazaretto.render import render_minimap, render_walls
from lazaretto.textures import load_wall_textures

map_data = parse_map_file("levels/map.cub")
textures = load_wall_textures(map_data, "imgs/door.png")
player = Player.from_map(map_data)

# one frame: input, then casting and drawing
player.update(map_data, {Key.W}, mouse_x=160, center_x=160)
scene = Canvas(320, 200)
rays = cast_rays(map_data, player, deg_to_radian(70), scene.width)
render_walls(scene, rays_to_walls(rays, player.angle), textures, map_data)

minimap = Canvas(MINIMAP_WIDTH, MINIMAP_HEIGHT)
render_minimap(minimap, map_data, player)

Image.frombytes("RGBA", (scene.width, scene.height), scene.rgba_bytes()).save("frame.png")
```

Modules:

- `lazaretto.parser` — `parse_map_text`, `parse_map_file`, returning a
  `MapData`.
- `lazaretto.elements`, `lazaretto.layout` — the element and map checks.
- `lazaretto.player` — `Player`, `Key`, and the `is_wall` / `collides`
  collision tests.
- `lazaretto.raycaster` — `Ray`, `WallHit`, `cast_single_ray`, `cast_rays`,
  `rays_to_walls`, `toggle_door`.
- `lazaretto.render` — background, textured wall columns and the minimap.
- `lazaretto.textures` — `Texture` (loaded with Pillow) and
  `load_wall_textures`.
- `lazaretto.canvas` — `Canvas` and `pack_rgba` for 0xRRGGBBAA pixels.
- `lazaretto.geometry` — `deg_to_radian`, `normalize_angle`.

## What it does not do

The package has no command to run and opens no window. It does not read the
keyboard or mouse and has no game loop: the caller passes the keys held down
and the mouse position to `Player.update` each frame, calls the ray casting
and rendering functions, and shows or saves the resulting canvas itself.