"""Checks on the map block of a scene description."""

from __future__ import annotations

import re
from typing import Sequence

from .config import VOID, MapError

_WS = " \t\n\v\f\r"
_OPEN_CELLS = frozenset("E0NWSD")
_SPAWNS = frozenset("NSEW")
_WALL = "1"
_DOOR = "D"
_MAP_START = re.compile(r"\n[ \t\n\v\f\r]*1")
_BLANK_LINE = re.compile(r"\n[ \t\v\f\r]*\n")


def _at(grid: Sequence[str], row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return VOID


def widest_line(text: str, start: int) -> int:
    """Length of the longest line that follows a newline at or after ``start``.

    The line that ``start`` itself is in is not measured.
    """
    return max((len(line) for line in text[start:].split("\n")[1:]), default=0)


def map_start_index(text: str) -> int:
    """Index of the first '1' that opens a line after a newline, blank lines skipped."""
    match = _MAP_START.search(text)
    if match is None:
        raise MapError("no map found")
    return match.end() - 1


def pad_grid(text: str, start: int, width: int) -> list[str]:
    """Lay the text from ``start`` onto rows of ``width`` characters.

    There is one row per line; short lines are padded with spaces and the
    remainder of a line longer than ``width`` flows into the following row.
    """
    body = text[start:]
    rows = []
    pos = 0
    for _ in range(body.count("\n") + 1):
        newline = body.find("\n", pos)
        if newline < 0:
            newline = len(body)
        end = min(newline, pos + width)
        rows.append(body[pos:end].ljust(width))
        pos = end
        if pos < len(body) and body[pos] == "\n":
            pos += 1
    return rows


def check_spaces(grid: Sequence[str]) -> bool:
    """True unless a floor, spawn or door cell touches the void.

    Cells outside the grid count as void.
    """
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell in _OPEN_CELLS and VOID in (
                _at(grid, r, c + 1),
                _at(grid, r, c - 1),
                _at(grid, r + 1, c),
                _at(grid, r - 1, c),
            ):
                return False
    return True


def door_is_framed(grid: Sequence[str], row: int, col: int) -> bool:
    """True when the walls next to the door sit on one axis only, on both sides."""
    left = _at(grid, row, col - 1) == _WALL
    right = _at(grid, row, col + 1) == _WALL
    up = _at(grid, row - 1, col) == _WALL
    down = _at(grid, row + 1, col) == _WALL
    if (left or right) and (up or down):
        return False
    return left == right and up == down


def check_doors(grid: Sequence[str]) -> bool:
    """True when every door in the grid is framed."""
    return all(
        door_is_framed(grid, r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == _DOOR
    )


def _padded_block(text: str, index: int) -> list[str]:
    start = text.rfind("\n", 0, index + 1) + 1
    return pad_grid(text, start, widest_line(text, start))


def check_map_block(text: str, index: int) -> bool:
    """Check the map starting on the line of ``index`` for void leaks and bad doors."""
    grid = _padded_block(text, index)
    return check_spaces(grid) and check_doors(grid)


def count_spawns(text: str) -> int:
    """Number of spawn letters (N, S, E, W) in ``text``."""
    return sum(ch in _SPAWNS for ch in text)


def validate_layout(text: str) -> list[str]:
    """Validate the map block of a whole scene and return it as padded rows.

    Raises MapError when no map is found, the map is open or has a badly
    placed door, or it holds other than exactly one spawn point.
    """
    index = map_start_index(text)
    grid = _padded_block(text, index)
    if not (check_spaces(grid) and check_doors(grid)):
        raise MapError("invalid map")
    if count_spawns(text[index:]) != 1:
        raise MapError("map needs exactly one spawn point")
    return grid


def find_map_lines(lines: Sequence[str]) -> list[str]:
    """Return the lines from the first one whose first non-space character is '1'."""
    for i, line in enumerate(lines):
        if line.lstrip(_WS).startswith(_WALL):
            return list(lines[i:])
    raise MapError("no map found")


def _top_row_closed(line: str) -> bool:
    content = line.strip(_WS)
    return all(ch in (_WALL, " ") for ch in content[:-1])


def check_edges(lines: Sequence[str]) -> bool:
    """True when the first row is walls and every row begins and ends with a wall."""
    if not lines or not _top_row_closed(lines[0]):
        return False
    for line in lines:
        content = line.strip(_WS)
        if content and (content[0] != _WALL or content[-1] != _WALL):
            return False
    return True


def has_blank_line(text: str) -> bool:
    """True when a line after a newline holds nothing but whitespace before the next one."""
    return _BLANK_LINE.search(text) is not None