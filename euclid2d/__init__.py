"""2D Euclidean vector and point primitives."""

from .errors import DegenerateVectorError
from .math import Point2D, Vector2D

__all__ = [
    "DegenerateVectorError",
    "Point2D",
    "Vector2D",
]
