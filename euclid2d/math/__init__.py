"""Vector and point primitives."""

from .point2d import Point2D, narrow_to_single
from .transforms import rotate_point, rotate_vector, translate_point
from .vector2d import (
    Vector2D,
    compute_angle,
    compute_directional_angle,
    cross,
    dot,
    normalize,
    to_point,
)

__all__ = [
    "Point2D",
    "Vector2D",
    "compute_angle",
    "compute_directional_angle",
    "cross",
    "dot",
    "narrow_to_single",
    "normalize",
    "rotate_point",
    "rotate_vector",
    "to_point",
    "translate_point",
]
