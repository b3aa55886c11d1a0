"""Turning a scene description into a validated level."""

from __future__ import annotations

import os
from typing import Sequence

from .config import MapData, MapError
from .elements import check_texture_paths, parse_colors, parse_elements
from .layout import check_edges, find_map_lines, validate_layout
from .textio import read_text, split_words

_SPAWNS = frozenset("NSEW")


def find_player(grid: Sequence[str]) -> tuple[int, int, str]:
    """Return (column, row, direction) of the first spawn letter in the grid.

    Raises MapError when the grid holds no spawn point.
    """
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell in _SPAWNS:
                return x, y, cell
    raise MapError("no spawn point in the map")


def map_dimensions(grid: Sequence[str]) -> tuple[int, int]:
    """Return (width, height): the longest row and the number of rows."""
    return max((len(row) for row in grid), default=0), len(grid)


def parse_map_text(text: str) -> MapData:
    """Parse and validate a whole scene description.

    Texture paths are checked relative to the current directory.
    Raises MapError on any invalid element or map.
    """
    lines = split_words(text, "\n")
    elements = parse_elements(lines)
    map_lines = find_map_lines(lines)
    if not check_edges(map_lines):
        raise MapError("invalid map: the map is not closed by walls")
    check_texture_paths(elements.texture_paths)
    floor, ceiling = parse_colors(elements)
    player_x, player_y, player_dir = find_player(map_lines)
    validate_layout(text)
    width, height = map_dimensions(map_lines)
    return MapData(
        grid=[list(row) for row in map_lines],
        player_x=player_x,
        player_y=player_y,
        player_dir=player_dir,
        north_texture=elements.north,
        south_texture=elements.south,
        west_texture=elements.west,
        east_texture=elements.east,
        floor_color=floor,
        ceiling_color=ceiling,
        width=width,
        height=height,
    )


def parse_map_file(path: str | os.PathLike[str]) -> MapData:
    """Read and validate the scene file at ``path``."""
    return parse_map_text(read_text(path))