"""Rotations and translations built on Vector2D and Point2D."""

from __future__ import annotations

from math import cos, sin

from .point2d import Point2D
from .vector2d import Vector2D


def rotate_vector(vec: Vector2D, angle_rad: float) -> Vector2D:
    """Rotate a vector counter-clockwise about the origin by angle_rad (radians)."""
    cos_a = cos(angle_rad)
    sin_a = sin(angle_rad)
    return Vector2D(
        vec.x * cos_a - vec.y * sin_a,
        vec.x * sin_a + vec.y * cos_a,
    )


def rotate_point(point: Point2D, origin: Point2D, angle_rad: float) -> Point2D:
    """Rotate a point around an origin by angle_rad (radians)."""
    return origin + rotate_vector(point - origin, angle_rad)


def translate_point(point: Point2D, offset: Vector2D) -> Point2D:
    """Move a point by the given offset vector."""
    return point + offset
