import math
import unittest

from euclid2d.math.point2d import Point2D, narrow_to_single
from euclid2d.math.vector2d import Vector2D


class Point2DTests(unittest.TestCase):
    def test_point_plus_vector_translates(self) -> None:
        self.assertEqual(Point2D(1.0, 1.0) + Vector2D(3.0, 4.0), Point2D(4.0, 5.0))

    def test_point_minus_point_is_displacement(self) -> None:
        offset = Point2D(4.0, 5.0) - Point2D(1.0, 1.0)
        self.assertEqual(offset, Vector2D(3.0, 4.0))
        self.assertEqual(offset.magnitude, 5.0)

    def test_origin(self) -> None:
        self.assertEqual(Point2D.origin(), Point2D(0.0, 0.0))


class NarrowToSingleTests(unittest.TestCase):
    def test_exact_values_survive(self) -> None:
        for value in (0.0, 1.0, -2.5, 1024.0):
            self.assertEqual(narrow_to_single(value), value)

    def test_rounds_to_float32(self) -> None:
        self.assertEqual(narrow_to_single(0.1), 0.10000000149011612)

    def test_overflow_becomes_infinity(self) -> None:
        self.assertEqual(narrow_to_single(1e300), math.inf)
        self.assertEqual(narrow_to_single(-1e300), -math.inf)

    def test_nan_stays_nan(self) -> None:
        self.assertTrue(math.isnan(narrow_to_single(math.nan)))


if __name__ == "__main__":
    unittest.main()
