"""2D point type consumed and produced by Vector2D."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .vector2d import Vector2D


def narrow_to_single(value: float) -> float:
    """Round a float to the nearest IEEE-754 single-precision value.

    Magnitudes beyond the float32 range become signed infinity.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class Point2D:
    """A location in the plane."""

    x: float
    y: float

    @classmethod
    def origin(cls) -> "Point2D":
        return cls(0.0, 0.0)

    def __add__(self, offset: "Vector2D") -> "Point2D":
        return Point2D(self.x + offset.x, self.y + offset.y)

    def __sub__(self, other: "Point2D") -> "Vector2D":
        from .vector2d import Vector2D

        return Vector2D.from_points(other, self)
