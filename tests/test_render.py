import pytest

from lazaretto.canvas import Canvas, pack_rgba
from lazaretto.config import MINIMAP_HEIGHT, MINIMAP_WIDTH, SCREEN_HEIGHT_DEFAULT, MapData
from lazaretto.player import Player
from lazaretto.raycaster import WallHit
from lazaretto.render import (
    MINIMAP_PLAYER,
    MINIMAP_VOID,
    WallRender,
    draw_wall_column,
    minimap_color,
    render_background,
    render_minimap,
    render_walls,
    texture_x,
    wall_height,
)
from lazaretto.textures import Texture

ROOM = ["11111", "10001", "10N01", "10001", "11111"]


def room() -> MapData:
    return MapData(
        grid=[list(r) for r in ROOM],
        player_x=2,
        player_y=2,
        player_dir="N",
        floor_color=(10, 20, 30),
        ceiling_color=(200, 100, 50),
    )


def solid(color: int, width: int = 2, height: int = 2) -> Texture:
    raw = bytes([(color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF])
    return Texture.from_rgba(width, height, raw * (width * height))


def test_wall_height_fills_screen_at_close_range():
    render = wall_height(1.2, SCREEN_HEIGHT_DEFAULT)
    assert render.line_h == pytest.approx(SCREEN_HEIGHT_DEFAULT)
    assert render.start_y == 0
    assert render.end_y == SCREEN_HEIGHT_DEFAULT - 1


@pytest.mark.parametrize("distance", [0.0, 0.5, 2.0, 7.5, 100.0])
def test_wall_height_stays_on_screen(distance):
    render = wall_height(distance, 600)
    assert 0 <= render.start_y <= render.end_y <= 599


def test_wall_height_far_wall_is_centered():
    render = wall_height(50.0, 600)
    assert render.start_y == (600 - int(render.line_h)) // 2
    assert render.end_y == render.start_y + int(render.line_h)


def test_texture_x_clamps():
    assert texture_x(-0.5, 64) == 0
    assert texture_x(1.0, 64) == 63
    assert texture_x(0.5, 64) == 32


def test_render_background_halves():
    level = room()
    canvas = Canvas(4, 4)
    render_background(canvas, level)
    assert canvas.get(0, 0) == pack_rgba(200, 100, 50, 255)
    assert canvas.get(3, 1) == pack_rgba(200, 100, 50, 255)
    assert canvas.get(0, 2) == pack_rgba(10, 20, 30, 255)
    assert canvas.get(3, 3) == pack_rgba(10, 20, 30, 255)


def test_draw_wall_column_walks_texture():
    top, bottom = 0x11223344, 0x55667788
    raw = bytes([0x11, 0x22, 0x33, 0x44, 0x55, 0x66, 0x77, 0x88])
    texture = Texture.from_rgba(1, 2, raw)
    canvas = Canvas(3, 10, 0)
    render = WallRender(start_y=2, end_y=5, line_h=4.0, tex_x=0, step=0.5, tex_pos=0.0)
    draw_wall_column(canvas, render, texture, 1)
    assert [canvas.get(1, y) for y in range(2, 6)] == [top, top, bottom, bottom]
    assert canvas.get(1, 1) == 0
    assert canvas.get(1, 6) == 0
    assert canvas.get(0, 3) == 0


def test_render_walls_uses_texture_per_column():
    level = room()
    colors = [0x010101FF, 0x020202FF, 0x030303FF, 0x040404FF, 0x050505FF]
    textures = [solid(c) for c in colors]
    distance = SCREEN_HEIGHT_DEFAULT * 1.2 / 4
    walls = [
        WallHit(distance=distance, hit_x=0, hit_y=0, side=0, texture_id=i, texture_x_coord=0.5)
        for i in (0, 4)
    ]
    canvas = Canvas(2, 10)
    render_walls(canvas, walls, textures, level)
    render = wall_height(distance, 10)
    middle = (render.start_y + render.end_y) // 2
    assert canvas.get(0, middle) == colors[0]
    assert canvas.get(1, middle) == colors[4]
    assert canvas.get(0, 0) == pack_rgba(200, 100, 50, 255)
    assert canvas.get(1, 9) == pack_rgba(10, 20, 30, 255)


def test_minimap_color_mapping():
    level = MapData(grid=[list("10DONW ")])
    assert minimap_color(level, 0, 0) == 0x6A4F3FFF
    assert minimap_color(level, 1, 0) == 0x2F1F17FF
    assert minimap_color(level, 2, 0) == 0x6B3E2FFF
    assert minimap_color(level, 3, 0) == 0x8E6E4FFF
    assert minimap_color(level, 4, 0) == minimap_color(level, 5, 0) == 0xAA885FFF
    assert minimap_color(level, 6, 0) == MINIMAP_VOID
    assert minimap_color(level, -1, 0) == MINIMAP_VOID
    assert minimap_color(level, 0, 1) == MINIMAP_VOID


def test_render_minimap_draws_player_and_world():
    level = room()
    player = Player.from_map(level)
    canvas = Canvas(MINIMAP_WIDTH, MINIMAP_HEIGHT)
    render_minimap(canvas, level, player)
    cx, cy = MINIMAP_WIDTH // 2, MINIMAP_HEIGHT // 2
    assert canvas.get(cx, cy) == MINIMAP_PLAYER
    assert canvas.get(cx + 2, cy - 2) == MINIMAP_PLAYER
    assert canvas.get(cx - 3, cy - 3) == 0xAA885FFF
    assert canvas.get(0, 0) == MINIMAP_VOID
    assert canvas.get(cx, cy + 12) == MINIMAP_PLAYER