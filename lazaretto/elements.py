"""Texture and colour elements at the top of a scene description."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable

from .config import MapError
from .textio import count_words, is_space, split_words

_TEXTURE_IDS = ("NO", "SO", "WE", "EA")
_COLOR_IDS = ("F", "C")
_COMPONENT = re.compile(r"[ \t\n\v\f\r]*\+?([0-9]*)")
_MAX_CHANNEL = 255


@dataclass
class Elements:
    """The six identifiers of a scene: four texture paths and two colours.

    ``floor`` and ``ceiling`` hold the raw, comma separated components.
    """

    north: str
    south: str
    west: str
    east: str
    floor: list[str]
    ceiling: list[str]

    @property
    def texture_paths(self) -> tuple[str, str, str, str]:
        """The wall texture paths in north, south, west, east order."""
        return (self.north, self.south, self.west, self.east)


def _first_non_space(line: str) -> int:
    return next((i for i, ch in enumerate(line) if not is_space(ch)), len(line))


def parse_color_component(text: str) -> int:
    """Read one colour component: optional leading whitespace and '+', then digits.

    Raises MapError on a sign '-' or on anything after the digits.
    """
    match = _COMPONENT.fullmatch(text)
    if match is None:
        raise MapError(f"invalid colour component: {text!r}")
    return int(match.group(1) or "0")


def parse_color_spec(line: str, start: int) -> list[str]:
    """Split the colour written in ``line`` from ``start`` into its components.

    Exactly two commas are required; whitespace anywhere is ignored and empty
    components are dropped.
    """
    rest = line[start:]
    if rest.count(",") != 2:
        raise MapError(f"colour needs three comma separated values: {line!r}")
    compact = "".join(ch for ch in rest if not is_space(ch))
    parts = split_words(compact, ",")
    if not parts:
        raise MapError(f"empty colour: {line!r}")
    return parts


def parse_elements(lines: Iterable[str]) -> Elements:
    """Collect NO, SO, WE, EA, F and C from the non-empty lines of a scene.

    Lines that name no identifier, such as the map itself, are passed over.
    Raises MapError on a repeated or malformed identifier, or a missing one.
    """
    paths: dict[str, str] = {}
    colors: dict[str, list[str]] = {}
    for line in lines:
        k = _first_non_space(line)
        head = line[k:]
        key = head[:1]
        if key in _COLOR_IDS and head[1:2] == " ":
            if key in colors:
                raise MapError(f"colour {key} given twice")
            colors[key] = parse_color_spec(line, k + 1)
            continue
        ident = next((name for name in _TEXTURE_IDS if head[:2] == name), None)
        if ident is None:
            continue
        if ident in paths:
            raise MapError(f"texture {ident} given twice")
        if count_words(line, " ") != 2:
            raise MapError(f"texture line needs exactly one path: {line!r}")
        paths[ident] = split_words(head, " ")[1]
    if len(paths) + len(colors) != len(_TEXTURE_IDS) + len(_COLOR_IDS):
        raise MapError("missing texture or colour identifier")
    return Elements(
        north=paths["NO"],
        south=paths["SO"],
        west=paths["WE"],
        east=paths["EA"],
        floor=colors["F"],
        ceiling=colors["C"],
    )


def _channels(parts: list[str], name: str) -> tuple[int, int, int]:
    values = []
    for i in range(3):
        if i >= len(parts):
            raise MapError(f"{name} colour is missing a component")
        value = parse_color_component(parts[i])
        if value > _MAX_CHANNEL:
            raise MapError(f"{name} colour component out of range: {value}")
        values.append(value)
    return (values[0], values[1], values[2])


def parse_colors(
    elements: Elements,
) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    """Return the (floor, ceiling) RGB triples; each channel must be 0-255."""
    return _channels(elements.floor, "floor"), _channels(elements.ceiling, "ceiling")


def check_texture_paths(paths: Iterable[str | os.PathLike[str]]) -> None:
    """Raise MapError unless every path can be opened for reading."""
    for path in paths:
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise MapError(f"cannot open texture: {path}") from exc