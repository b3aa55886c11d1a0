"""Wall textures held as rows of packed RGBA pixels."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image

from .canvas import pack_rgba
from .config import MapData, MapError

DOOR_TEXTURE = "imgs/door.png"


@dataclass(frozen=True)
class Texture:
    """An image as ``height`` rows of ``width`` 0xRRGGBBAA pixels."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    @classmethod
    def from_rgba(cls, width: int, height: int, data: bytes) -> Texture:
        """Build a texture from raw R, G, B, A bytes laid out row by row."""
        if width < 0 or height < 0:
            raise ValueError("texture size must not be negative")
        raw = bytes(data)
        if len(raw) != width * height * 4:
            raise ValueError(
                f"expected {width * height * 4} bytes for {width}x{height}, got {len(raw)}"
            )
        channels = iter(raw)
        pixels = [pack_rgba(r, g, b, a) for r, g, b, a in zip(channels, channels, channels, channels)]
        rows = tuple(tuple(pixels[y * width:(y + 1) * width]) for y in range(height))
        return cls(width, height, rows)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Texture:
        """Load an image file; raises MapError when it cannot be read."""
        try:
            with Image.open(path) as image:
                rgba = image.convert("RGBA")
                return cls.from_rgba(rgba.width, rgba.height, rgba.tobytes())
        except (OSError, ValueError) as exc:
            raise MapError(f"cannot load texture: {path}") from exc

    def sample(self, x: int, y: int) -> int:
        """Return the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) outside {self.width}x{self.height}")
        return self.rows[y][x]


def load_wall_textures(
    map_data: MapData, door_path: str | os.PathLike[str] = DOOR_TEXTURE
) -> list[Texture]:
    """Load the north, south, west, east and door textures, in that order."""
    paths = (
        map_data.north_texture,
        map_data.south_texture,
        map_data.west_texture,
        map_data.east_texture,
        door_path,
    )
    return [Texture.load(path) for path in paths]