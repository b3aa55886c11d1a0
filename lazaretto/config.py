"""Game constants and the parsed description of a level."""

from __future__ import annotations

from dataclasses import dataclass

GAME_TITLE = "LAZARETTO"

FOV = 70

SCREEN_WIDTH_DEFAULT = 1920
SCREEN_HEIGHT_DEFAULT = 1080

TILE_SIZE = 640
TEXTURE_SIZE = 64

MINIMAP_TILE_SIZE = 32
PLAYER_SIZE = 16

MINIMAP_WIDTH = 230
MINIMAP_HEIGHT = 230

SCALE = 0.02
MINIMAP_PADDING = 20

VOID = " "


class MapError(Exception):
    """Raised when a scene description cannot be read or is invalid."""


@dataclass
class MapData:
    """A validated level: the grid, the spawn point, textures and colours.

    Rows of the grid may have different lengths; ``width`` is the length of
    the longest row and ``height`` the number of rows.
    """

    grid: list[list[str]]
    player_x: int = 0
    player_y: int = 0
    player_dir: str = "N"
    north_texture: str = ""
    south_texture: str = ""
    west_texture: str = ""
    east_texture: str = ""
    floor_color: tuple[int, int, int] = (0, 0, 0)
    ceiling_color: tuple[int, int, int] = (0, 0, 0)
    width: int | None = None
    height: int | None = None

    def __post_init__(self) -> None:
        self.grid = [list(row) for row in self.grid]
        if self.width is None:
            self.width = max((len(row) for row in self.grid), default=0)
        if self.height is None:
            self.height = len(self.grid)

    @property
    def rows(self) -> list[str]:
        """The grid as a list of strings."""
        return ["".join(row) for row in self.grid]

    def cell(self, x: int, y: int) -> str:
        """Return the tile at column ``x``, row ``y``; void outside the stored rows."""
        if 0 <= y < len(self.grid):
            row = self.grid[y]
            if 0 <= x < len(row):
                return row[x]
        return VOID