"""Angle helpers."""

import math

TWO_PI = 2 * math.pi


def deg_to_radian(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180


def normalize_angle(angle: float) -> float:
    """Bring an angle into the range [0, 2*pi)."""
    angle = math.fmod(angle, TWO_PI)
    if angle < 0:
        angle = TWO_PI + angle
    return angle