"""Drawing the 3D view and the minimap onto canvases."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .canvas import Canvas, pack_rgba
from .config import SCALE, SCREEN_HEIGHT_DEFAULT, TILE_SIZE, MapData
from .player import Player
from .raycaster import WallHit
from .textures import Texture

_MIN_DISTANCE = 1e-6
_WALL_SCALE = 1.2

MINIMAP_BACKGROUND = 0x000000FF
MINIMAP_VOID = 0x1A140FFF
MINIMAP_PLAYER = 0xE9CD92FF
_MINIMAP_COLORS = {
    "1": 0x6A4F3FFF,
    " ": MINIMAP_VOID,
    "D": 0x6B3E2FFF,
    "O": 0x8E6E4FFF,
    "0": 0x2F1F17FF,
    "N": 0xAA885FFF,
    "E": 0xAA885FFF,
    "S": 0xAA885FFF,
    "W": 0xAA885FFF,
}
_DIRECTION_LENGTH = 15
_DIRECTION_STEPS = 10


@dataclass
class WallRender:
    """Vertical extent of one wall column and how to walk its texture."""

    start_y: int
    end_y: int
    line_h: float
    tex_x: int = 0
    step: float = 0.0
    tex_pos: float = 0.0


def wall_height(distance: float, screen_height: int) -> WallRender:
    """Projected wall slice for a wall ``distance`` tiles away, clamped to the screen."""
    line_h = (SCREEN_HEIGHT_DEFAULT * _WALL_SCALE) / max(distance, _MIN_DISTANCE)
    height = int(line_h)
    start_y = int((screen_height - height) / 2)
    end_y = start_y + height
    start_y = max(start_y, 0)
    if end_y >= screen_height:
        end_y = screen_height - 1
    return WallRender(start_y=start_y, end_y=end_y, line_h=line_h)


def texture_x(coord: float, tex_width: int) -> int:
    """Texture column for a hit at fraction ``coord`` across the wall."""
    tex_x = int(coord * tex_width)
    return min(max(tex_x, 0), tex_width - 1)


def render_background(canvas: Canvas, map_data: MapData) -> None:
    """Paint the ceiling colour on the top half and the floor on the bottom."""
    ceiling = pack_rgba(*map_data.ceiling_color, 255)
    floor = pack_rgba(*map_data.floor_color, 255)
    half = canvas.height // 2
    for y in range(canvas.height):
        color = ceiling if y < half else floor
        for x in range(canvas.width):
            canvas.put(x, y, color)


def draw_wall_column(
    canvas: Canvas, render: WallRender, texture: Texture, column: int
) -> None:
    """Paint one textured column from ``start_y`` to ``end_y`` inclusive."""
    tex_pos = render.tex_pos
    for y in range(render.start_y, render.end_y + 1):
        tex_y = min(max(int(tex_pos), 0), texture.height - 1)
        canvas.put(column, y, texture.sample(render.tex_x, tex_y))
        tex_pos += render.step


def render_walls(
    canvas: Canvas,
    walls: Sequence[WallHit],
    textures: Sequence[Texture],
    map_data: MapData,
) -> None:
    """Draw background and one textured wall column per screen column."""
    render_background(canvas, map_data)
    for column, hit in zip(range(canvas.width), walls):
        texture = textures[hit.texture_id]
        render = wall_height(hit.distance, canvas.height)
        render.tex_x = texture_x(hit.texture_x_coord, texture.width)
        render.step = texture.height / render.line_h
        render.tex_pos = (
            render.start_y - canvas.height / 2.0 + render.line_h / 2.0
        ) * render.step
        draw_wall_column(canvas, render, texture, column)


def minimap_color(map_data: MapData, x: int, y: int) -> int:
    """Minimap colour of grid cell (x, y); outside the map it is void."""
    if 0 <= x < map_data.width and 0 <= y < map_data.height:
        return _MINIMAP_COLORS.get(map_data.cell(x, y), MINIMAP_VOID)
    return MINIMAP_VOID


def render_minimap(canvas: Canvas, map_data: MapData, player: Player) -> None:
    """Draw the map around the player, the player marker and its heading."""
    canvas.fill(MINIMAP_BACKGROUND)
    cx = canvas.width // 2
    cy = canvas.height // 2
    for iy in range(canvas.height):
        wy = int((player.y + (iy - cy) / SCALE) / TILE_SIZE)
        for ix in range(canvas.width):
            wx = int((player.x + (ix - cx) / SCALE) / TILE_SIZE)
            canvas.put(ix, iy, minimap_color(map_data, wx, wy))
    for dy in range(-2, 3):
        for dx in range(-2, 3):
            canvas.put(cx + dx, cy + dy, MINIMAP_PLAYER)
    cos_a = math.cos(player.angle)
    sin_a = math.sin(player.angle)
    for i in range(_DIRECTION_STEPS):
        lx = int(cx + (cos_a * _DIRECTION_LENGTH * i) / _DIRECTION_STEPS)
        ly = int(cy + (sin_a * _DIRECTION_LENGTH * i) / _DIRECTION_STEPS)
        canvas.put(lx, ly, MINIMAP_PLAYER)