"""
Tests for the logo geometry.
"""

import math
import unittest

from infrable_logo.generation.geometry import (
    compute_decorations, compute_points, decoration_radius, derive_dimensions
)
from infrable_logo.models.shape import Point


class TestDimensions(unittest.TestCase):
    """Tests for derive_dimensions."""

    def test_golden_ratio_lengths(self):
        """Test the lengths derived for the default size."""
        dims = derive_dimensions(500)

        self.assertEqual(dims.center, 250.0)
        self.assertAlmostEqual(dims.a, 154.51, delta=1e-2)
        self.assertAlmostEqual(dims.b, 193.14, delta=1e-2)
        self.assertAlmostEqual(dims.c, 77.26, delta=1e-2)

    def test_mirrored_negates_lengths(self):
        """Test that mirroring negates a, b and c but keeps the center."""
        dims = derive_dimensions(500)
        mirrored = dims.mirrored()

        self.assertEqual(mirrored.center, dims.center)
        self.assertEqual((mirrored.a, mirrored.b, mirrored.c), (-dims.a, -dims.b, -dims.c))

    def test_size_is_coerced(self):
        """Test that integer and float sizes agree."""
        self.assertEqual(derive_dimensions(500), derive_dimensions(500.0))


class TestComputePoints(unittest.TestCase):
    """Tests for compute_points."""

    def test_eight_anchor_points(self):
        """Test that each half has exactly eight vertices."""
        self.assertEqual(len(compute_points(500)), 8)
        self.assertEqual(len(compute_points(500, mirror=True)), 8)

    def test_first_anchor_point(self):
        """Test the first vertex for the default size."""
        p1 = compute_points(500)[0]

        self.assertAlmostEqual(p1.x, 95.49, delta=1e-2)
        self.assertAlmostEqual(p1.y, 56.86, delta=1e-2)

    def test_anchor_formulas(self):
        """Test each vertex against its closed-form expression."""
        center, a, b, c = derive_dimensions(300)
        expected = [
            (center - a, center - b),
            (center + a, center - b),
            (center + a - 0.5 * c, center - b + c),
            (center + a - 1.5 * c, center - b + c),
            (center + a - 1.5 * c, center + c),
            (center - a + 1.5 * c, center - c),
            (center - a + 1.5 * c, center - b + c),
            (center - a + 0.5 * c, center - b + c),
        ]

        for point, (x, y) in zip(compute_points(300), expected):
            self.assertAlmostEqual(point.x, x)
            self.assertAlmostEqual(point.y, y)

    def test_halves_are_point_reflections(self):
        """Test that the lower half reflects the upper one through the center."""
        for size in (1, 37, 500, 1024.5):
            center = size / 2.0
            upper = compute_points(size)
            lower = compute_points(size, mirror=True)

            for up, low in zip(upper, lower):
                self.assertAlmostEqual(up.x + low.x, 2 * center)
                self.assertAlmostEqual(up.y + low.y, 2 * center)

    def test_pure_function(self):
        """Test that identical inputs give identical outputs."""
        self.assertEqual(compute_points(500, True), compute_points(500, True))
        self.assertEqual(compute_points(123.4), compute_points(123.4))

    def test_zero_size_collapses_to_center(self):
        """Test that a zero size degenerates without error."""
        for mirror in (False, True):
            for point in compute_points(0, mirror):
                self.assertEqual(point, Point(0.0, 0.0))

    def test_points_are_immutable(self):
        """Test that computed points cannot be modified."""
        point = compute_points(500)[0]
        with self.assertRaises(AttributeError):
            point.x = 0


class TestComputeDecorations(unittest.TestCase):
    """Tests for compute_decorations."""

    def test_six_decorations(self):
        """Test that each half has six accent centers."""
        self.assertEqual(len(compute_decorations(500)), 6)
        self.assertEqual(len(compute_decorations(500, mirror=True)), 6)

    def test_first_decoration_offset(self):
        """Test that the first center is inset along the 45 degree diagonal."""
        dims = derive_dimensions(500)
        p1 = compute_points(500)[0]
        d1 = compute_decorations(500)[0]
        offset = (dims.c / 2.0) / math.sqrt(2.0)

        self.assertAlmostEqual(d1.x, p1.x + offset)
        self.assertAlmostEqual(d1.y, p1.y + offset)

    def test_decorations_stay_at_fixed_distance(self):
        """Test that every center is half of c away from its vertex."""
        dims = derive_dimensions(500)
        p1, p2, _, p4, p5, p6, p7, _ = compute_points(500)
        anchors = [p1, p2, p4, p5, p6, p7]

        for anchor, center in zip(anchors, compute_decorations(500)):
            distance = math.hypot(center.x - anchor.x, center.y - anchor.y)
            self.assertAlmostEqual(distance, dims.c / 2.0)

    def test_diagonal_decorations_lie_on_the_diagonal(self):
        """Test that the fourth and fifth centers sit on the slope 2 edge."""
        points = compute_points(500)
        p5, p6 = points[4], points[5]
        d4, d5 = compute_decorations(500)[3:5]

        for center in (d4, d5):
            self.assertAlmostEqual((center.y - p6.y), 2 * (center.x - p6.x))
            self.assertAlmostEqual((p5.y - center.y), 2 * (p5.x - center.x))

    def test_halves_are_point_reflections(self):
        """Test that mirrored decorations reflect through the center."""
        upper = compute_decorations(500)
        lower = compute_decorations(500, mirror=True)

        for up, low in zip(upper, lower):
            self.assertAlmostEqual(up.x + low.x, 500.0)
            self.assertAlmostEqual(up.y + low.y, 500.0)

    def test_radius(self):
        """Test the accent circle radius."""
        self.assertAlmostEqual(decoration_radius(500), derive_dimensions(500).c / 8)
        self.assertEqual(decoration_radius(0), 0.0)


if __name__ == "__main__":
    unittest.main()
