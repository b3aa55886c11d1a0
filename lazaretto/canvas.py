"""RGBA pixel packing and a simple image buffer."""

from __future__ import annotations

from typing import Iterator


def pack_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four channel values into one 0xRRGGBBAA integer."""
    return (r << 24 | g << 16 | b << 8 | a) & 0xFFFFFFFF


def _channels(color: int) -> Iterator[int]:
    for shift in (24, 16, 8, 0):
        yield (color >> shift) & 0xFF


class Canvas:
    """A width x height image of 0xRRGGBBAA pixels."""

    def __init__(self, width: int, height: int, color: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas size must not be negative")
        self.width = width
        self.height = height
        self._pixels = [color & 0xFFFFFFFF] * (width * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def put(self, x: int, y: int, color: int) -> None:
        """Set one pixel."""
        self._pixels[self._offset(x, y)] = color & 0xFFFFFFFF

    def get(self, x: int, y: int) -> int:
        """Return one pixel."""
        return self._pixels[self._offset(x, y)]

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self._pixels = [color & 0xFFFFFFFF] * (self.width * self.height)

    def rgba_bytes(self) -> bytes:
        """Return the pixels row by row as R, G, B, A bytes."""
        return bytes(channel for pixel in self._pixels for channel in _channels(pixel))