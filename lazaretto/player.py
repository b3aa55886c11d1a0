"""The player: spawn, input handling and movement with collisions."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Iterable

from .config import PLAYER_SIZE, TILE_SIZE, MapData
from .geometry import deg_to_radian, normalize_angle

_SPAWN_DEGREES = {"N": 90, "S": 270, "E": 0, "W": 180}
_SOLID = frozenset("1D")
_MOUSE_SENSITIVITY = 0.02
_WALK_SPEED = 32
_RUN_SPEED = 52


class Key(enum.Enum):
    """Keys the player reacts to."""

    W = enum.auto()
    S = enum.auto()
    A = enum.auto()
    D = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    LEFT_SHIFT = enum.auto()


def _tile(coord: int) -> int:
    """Divide by the tile size, truncating toward zero."""
    return int(coord / TILE_SIZE)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def is_wall(map_data: MapData, x: int, y: int) -> bool:
    """True when the world position lies in a wall or closed door tile."""
    return map_data.cell(_tile(x), _tile(y)) in _SOLID


def collides(map_data: MapData, x: int, y: int) -> bool:
    """True when any corner of the player's box around (x, y) is inside a wall."""
    half = PLAYER_SIZE
    return any(
        is_wall(map_data, x + dx, y + dy)
        for dx, dy in ((-half, -half), (half, -half), (-half, half), (half, half))
    )


@dataclass
class Player:
    """Position in world units, view angle in radians and movement state."""

    x: int
    y: int
    angle: float = 0.0
    move_speed: float = 16
    rot_speed: float = 0.05
    forward_backward: int = 0
    left_right: int = 0
    remainder_x: float = 0.0
    remainder_y: float = 0.0
    mouse_warmup: int = field(default=2, repr=False)

    @classmethod
    def from_map(cls, map_data: MapData) -> Player:
        """Place the player at the centre of the spawn tile, facing its direction."""
        degrees = _SPAWN_DEGREES.get(map_data.player_dir)
        return cls(
            x=map_data.player_x * TILE_SIZE + TILE_SIZE // 2,
            y=map_data.player_y * TILE_SIZE + TILE_SIZE // 2,
            angle=deg_to_radian(degrees) if degrees is not None else 0.0,
        )

    def apply_mouse(self, mouse_x: int, center_x: int) -> None:
        """Reset the movement intent and turn by the horizontal mouse offset.

        The first two calls ignore the mouse while the pointer settles.
        """
        self.forward_backward = 0
        self.left_right = 0
        if self.mouse_warmup:
            self.mouse_warmup -= 1
            mouse_x = center_x
        self.angle += (mouse_x - center_x) * self.rot_speed * _MOUSE_SENSITIVITY

    def apply_keys(self, keys: Iterable[Key]) -> None:
        """Set movement intent, rotation and speed from the keys held down."""
        pressed = set(keys)
        speed = int(self.move_speed)
        if Key.W in pressed or Key.UP in pressed:
            self.forward_backward = speed
        if Key.S in pressed or Key.DOWN in pressed:
            self.forward_backward = -speed
        if Key.D in pressed:
            self.left_right = speed
        if Key.A in pressed:
            self.left_right = -speed
        if Key.LEFT in pressed:
            self.angle -= self.rot_speed
        if Key.RIGHT in pressed:
            self.angle += self.rot_speed
        self.move_speed = _RUN_SPEED if Key.LEFT_SHIFT in pressed else _WALK_SPEED
        self.angle = normalize_angle(self.angle)

    def move(self, map_data: MapData) -> None:
        """Step by the current intent, sliding along walls on each axis."""
        side = self.angle + math.pi / 2.0
        total_x = (
            math.cos(self.angle) * self.forward_backward
            + math.cos(side) * self.left_right
            + self.remainder_x
        )
        total_y = (
            math.sin(self.angle) * self.forward_backward
            + math.sin(side) * self.left_right
            + self.remainder_y
        )
        step_x = _round_half_away(total_x)
        step_y = _round_half_away(total_y)
        target_x = self.x + step_x
        target_y = self.y + step_y
        if not collides(map_data, target_x, self.y):
            self.x = target_x
            self.remainder_x = total_x - step_x
        else:
            self.remainder_x = 0.0
        if not collides(map_data, self.x, target_y):
            self.y = target_y
            self.remainder_y = total_y - step_y
        else:
            self.remainder_y = 0.0

    def update(
        self, map_data: MapData, keys: Iterable[Key], mouse_x: int, center_x: int
    ) -> None:
        """Run one frame: mouse look, keys, then movement."""
        self.apply_mouse(mouse_x, center_x)
        self.apply_keys(keys)
        self.move(map_data)