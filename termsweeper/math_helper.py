"""Small numeric helpers."""

from __future__ import annotations

import math

from termsweeper.canvas import Vector2D


def digits(value: int) -> int:
    """Number of decimal digits of a non-negative integer; at least 1."""
    result = 1
    value //= 10
    while value > 0:
        result += 1
        value //= 10
    return result


def deg_to_rad(degrees: float) -> float:
    return degrees * (math.pi / 180)


def rad_to_deg(radians: float) -> float:
    return radians * (180 / math.pi)


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return rounded if value >= 0 else -rounded


def rotate_around(to_rotate: Vector2D, radians: float) -> Vector2D:
    """Rotate a vector about the origin, rounding to the nearest integer point."""
    cos_value = math.cos(radians)
    sin_value = math.sin(radians)
    new_x = _round_half_away(to_rotate.x * cos_value - to_rotate.y * sin_value)
    new_y = _round_half_away(to_rotate.x * sin_value + to_rotate.y * cos_value)
    return Vector2D(new_x, new_y)