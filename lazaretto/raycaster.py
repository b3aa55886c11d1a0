"""DDA ray casting through the level grid and door interaction."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import SCREEN_WIDTH_DEFAULT, TILE_SIZE, MapData
from .geometry import normalize_angle
from .player import Player

EMPTY = 0
WALL = 1
DOOR_CLOSED = 2
DOOR_OPEN = 3

_COLLISIONS = {WALL: "W", DOOR_CLOSED: "D", DOOR_OPEN: "O"}
_DOOR_REACH = 2


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


@dataclass
class Ray:
    """One ray: its direction, DDA state and what it hit.

    Positions ``pos_x``/``pos_y`` and distances are in tile units.
    """

    angle: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    pos_x: float = 0.0
    pos_y: float = 0.0
    grid_x: int = 0
    grid_y: int = 0
    delta_x: float = 0.0
    delta_y: float = 0.0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    step_x: int = 0
    step_y: int = 0
    distance: float = 0.0
    side_hit: int = 0
    collision_type: str = ""
    wall_x: float = 0.0
    hit_x: float = 0.0
    hit_y: float = 0.0

    @classmethod
    def from_angle(cls, angle: float, pos_x: float, pos_y: float) -> Ray:
        """A ray leaving the world position (pos_x, pos_y) at ``angle``."""
        dir_x = math.cos(angle)
        dir_y = math.sin(angle)
        tile_x = pos_x / TILE_SIZE
        tile_y = pos_y / TILE_SIZE
        return cls(
            angle=angle,
            dir_x=dir_x,
            dir_y=dir_y,
            pos_x=tile_x,
            pos_y=tile_y,
            grid_x=int(tile_x),
            grid_y=int(tile_y),
            delta_x=_inverse_abs(dir_x),
            delta_y=_inverse_abs(dir_y),
        )


@dataclass
class WallHit:
    """What one screen column shows: corrected distance and texture lookup."""

    distance: float
    hit_x: float
    hit_y: float
    side: int
    texture_id: int
    texture_x_coord: float


def cell_hit(map_data: MapData, x: int, y: int, door: bool) -> int:
    """Classify a grid cell: EMPTY, WALL, DOOR_CLOSED, or DOOR_OPEN when ``door``.

    Cells outside the map count as walls.
    """
    if x < 0 or y < 0 or y >= map_data.height or x >= map_data.width:
        return WALL
    tile = map_data.cell(x, y)
    if door and tile == "O":
        return DOOR_OPEN
    if tile == "D":
        return DOOR_CLOSED
    if tile == "1":
        return WALL
    return EMPTY


def _advance(ray: Ray) -> None:
    if ray.side_dist_x < ray.side_dist_y:
        ray.distance = ray.side_dist_x
        ray.side_dist_x += ray.delta_x
        ray.grid_x += ray.step_x
        ray.side_hit = 0
    else:
        ray.distance = ray.side_dist_y
        ray.side_dist_y += ray.delta_y
        ray.grid_y += ray.step_y
        ray.side_hit = 1


def _hit_distance(ray: Ray) -> float:
    if ray.side_hit == 0:
        distance = (ray.grid_x - ray.pos_x + (1 - ray.step_x) / 2) / ray.dir_x
    else:
        distance = (ray.grid_y - ray.pos_y + (1 - ray.step_y) / 2) / ray.dir_y
    return abs(distance)


def cast_single_ray(map_data: MapData, ray: Ray, door: bool) -> Ray:
    """Walk ``ray`` through the grid until it hits something; returns the ray."""
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (ray.pos_x - ray.grid_x) * ray.delta_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.grid_x + 1 - ray.pos_x) * ray.delta_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (ray.pos_y - ray.grid_y) * ray.delta_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.grid_y + 1 - ray.pos_y) * ray.delta_y
    while True:
        _advance(ray)
        kind = cell_hit(map_data, ray.grid_x, ray.grid_y, door)
        if kind:
            ray.collision_type = _COLLISIONS[kind]
            ray.distance = _hit_distance(ray)
            return ray


def cast_rays(
    map_data: MapData,
    player: Player,
    fov_rad: float,
    count: int = SCREEN_WIDTH_DEFAULT,
) -> list[Ray]:
    """Cast ``count`` rays spread evenly over the field of view, left to right."""
    if count < 1:
        raise ValueError("at least one ray is needed")
    step = fov_rad / (count - 1) if count > 1 else 0.0
    start = player.angle - fov_rad / 2
    rays = []
    for i in range(count):
        ray = Ray.from_angle(normalize_angle(start + i * step), player.x, player.y)
        cast_single_ray(map_data, ray, False)
        ray.hit_x = player.x + ray.dir_x * ray.distance
        ray.hit_y = player.y + ray.dir_y * ray.distance
        if ray.side_hit == 0:
            wall_x = ray.pos_y + ray.distance * ray.dir_y
        else:
            wall_x = ray.pos_x + ray.distance * ray.dir_x
        ray.wall_x = wall_x - math.floor(wall_x)
        rays.append(ray)
    return rays


def texture_id(ray: Ray) -> int:
    """Texture index for a hit: 0 north, 1 south, 2 west, 3 east, 4 door."""
    if ray.collision_type == "D":
        return 4
    if ray.side_hit == 0:
        return 2 if ray.step_x < 0 else 3
    return 1 if ray.step_y < 0 else 0


def rays_to_walls(rays: list[Ray], player_angle: float) -> list[WallHit]:
    """Turn cast rays into fisheye-corrected wall columns."""
    walls = []
    for ray in rays:
        coord = ray.wall_x
        if (ray.side_hit == 0 and ray.dir_x < 0) or (ray.side_hit == 1 and ray.dir_y > 0):
            coord = 1.0 - coord
        walls.append(
            WallHit(
                distance=ray.distance * math.cos(ray.angle - player_angle),
                hit_x=ray.hit_x,
                hit_y=ray.hit_y,
                side=ray.side_hit,
                texture_id=texture_id(ray),
                texture_x_coord=coord,
            )
        )
    return walls


def toggle_door(map_data: MapData, player: Player) -> bool:
    """Open or close the door the player looks at when it is within reach.

    Returns True when a door changed state.
    """
    ray = cast_single_ray(
        map_data, Ray.from_angle(player.angle, player.x, player.y), True
    )
    if ray.collision_type not in ("D", "O") or ray.distance >= _DOOR_REACH:
        return False
    row = map_data.grid[ray.grid_y]
    if row[ray.grid_x] == "D":
        row[ray.grid_x] = "O"
    elif row[ray.grid_x] == "O":
        row[ray.grid_x] = "D"
    else:
        return False
    return True