"""2D vector value type with algebraic and angular operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from math import atan2, degrees, hypot, isclose
from typing import Iterator

from .. import config
from ..errors import DegenerateVectorError
from .point2d import Point2D, narrow_to_single

logger = logging.getLogger("euclid2d.vector")


@dataclass(frozen=True)
class Vector2D:
    """Displacement or direction in the plane.

    Instances are immutable; ``magnitude`` is always derived from the current
    components. Use :meth:`with_x` and :meth:`with_y` to get modified copies.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Vector2D":
        return cls(0.0, 0.0)

    @classmethod
    def uniform(cls, value: float) -> "Vector2D":
        """Vector with both components set to ``value``."""
        return cls(value, value)

    @classmethod
    def from_points(cls, start: Point2D, end: Point2D) -> "Vector2D":
        """Displacement from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y)

    @classmethod
    def basis_x(cls) -> "Vector2D":
        return cls(1.0, 0.0)

    @classmethod
    def basis_y(cls) -> "Vector2D":
        return cls(0.0, 1.0)

    @classmethod
    def origin(cls) -> "Vector2D":
        return cls(0.0, 0.0)

    @property
    def magnitude(self) -> float:
        return hypot(self.x, self.y)

    def with_x(self, value: float) -> "Vector2D":
        return replace(self, x=value)

    def with_y(self, value: float) -> "Vector2D":
        return replace(self, y=value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, other: "Vector2D | float") -> "Vector2D | float":
        """Scale by a number, or take the dot product with another vector."""
        if isinstance(other, Vector2D):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vector2D":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> "Vector2D":
        if scalar == 0:
            raise ValueError("Cannot divide by zero.")
        return Vector2D(self.x / scalar, self.y / scalar)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2D") -> float:
        """2D cross product returning a scalar (the 2x2 determinant)."""
        return self.x * other.y - self.y * other.x

    def _unit_pair(self, other: "Vector2D") -> tuple["Vector2D", "Vector2D"]:
        # Unit-length operands keep dot and cross finite for any non-zero
        # finite magnitudes.
        mag_a = self.magnitude
        mag_b = other.magnitude
        if mag_a == 0 or mag_b == 0:
            logger.debug("Angle requested against zero-length vector: %r, %r", self, other)
            raise DegenerateVectorError("Cannot compute an angle with a zero-length vector.")
        return (
            Vector2D(self.x / mag_a, self.y / mag_a),
            Vector2D(other.x / mag_b, other.y / mag_b),
        )

    def compute_angle(self, other: "Vector2D") -> float:
        """Unsigned angle between the two vectors in degrees, in [0, 180]."""
        unit_a, unit_b = self._unit_pair(other)
        return degrees(atan2(abs(unit_a.cross(unit_b)), unit_a.dot(unit_b)))

    def compute_directional_angle(self, other: "Vector2D") -> float:
        """Signed angle in degrees from this vector to ``other``.

        Counter-clockwise is positive. Collinear vectors (zero determinant)
        get a negative sign.
        """
        unit_a, unit_b = self._unit_pair(other)
        determinant = unit_a.cross(unit_b)
        angle = degrees(atan2(abs(determinant), unit_a.dot(unit_b)))
        sign = 1.0 if determinant > 0 else -1.0
        return angle * sign

    def normalize(self) -> "Vector2D":
        mag = self.magnitude
        if mag == 0:
            logger.debug("Normalize requested for zero-length vector")
            raise DegenerateVectorError("Cannot normalize a zero-length vector.")
        return Vector2D(self.x / mag, self.y / mag)

    def to_point(self, precision: str | None = None) -> Point2D:
        """Point with the same coordinates.

        ``precision`` is ``"single"`` (rounded to float32) or ``"double"``;
        defaults to ``config.DEFAULT_POINT_PRECISION``.
        """
        if precision is None:
            precision = config.DEFAULT_POINT_PRECISION
        if precision == "single":
            return Point2D(narrow_to_single(self.x), narrow_to_single(self.y))
        if precision == "double":
            return Point2D(self.x, self.y)
        raise ValueError(f"Unsupported point precision: {precision}")

    def is_close(self, other: "Vector2D", tolerance: float | None = None) -> bool:
        tol = config.DEFAULT_TOLERANCE if tolerance is None else tolerance
        return isclose(self.x, other.x, abs_tol=tol) and isclose(self.y, other.y, abs_tol=tol)


def dot(a: Vector2D, b: Vector2D) -> float:
    return a.dot(b)


def cross(a: Vector2D, b: Vector2D) -> float:
    return a.cross(b)


def compute_angle(a: Vector2D, b: Vector2D) -> float:
    return a.compute_angle(b)


def compute_directional_angle(a: Vector2D, b: Vector2D) -> float:
    return a.compute_directional_angle(b)


def normalize(vector: Vector2D) -> Vector2D:
    return vector.normalize()


def to_point(vector: Vector2D, precision: str | None = None) -> Point2D:
    return vector.to_point(precision)
