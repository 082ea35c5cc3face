"""
Logo Geometry Module
====================
Point computation for the logo emblem.

The emblem is two polygons, one the point reflection of the other through
the canvas center. Three lengths are derived from the canvas size:

    a = size / (1 + sqrt(5))    (half the size over the golden ratio)
    b = a / 0.8                 (aspect ratio a / b)
    c = b / 2.5                 (subdivision of b)

The lower half is computed from -a, -b and -c rather than by reflecting the
finished upper points.
"""

import math
from typing import List, NamedTuple

from infrable_logo.models.shape import Point

GOLDEN_DENOMINATOR = 1.0 + math.sqrt(5.0)
ASPECT_RATIO = 0.8
SUBDIVISION = 2.5

# Decoration angles: the 45 degree bisector, the emblem's diagonal slope (2)
# and its reciprocal.
DIAGONAL = math.atan(1.0)
STEEP = math.atan(2.0)
SHALLOW = math.atan(0.5)
QUARTER_TURN = math.pi / 2


class LogoDimensions(NamedTuple):
    """Lengths the emblem is built from."""
    center: float
    a: float
    b: float
    c: float

    def mirrored(self) -> 'LogoDimensions':
        """Negate a, b and c, keeping the center."""
        return LogoDimensions(self.center, -self.a, -self.b, -self.c)


def derive_dimensions(size: float) -> LogoDimensions:
    """
    Derive the emblem lengths for a canvas.

    Args:
        size: Edge length of the square canvas

    Returns:
        The canvas center and the lengths a, b and c
    """
    size = float(size)
    a = size / GOLDEN_DENOMINATOR
    b = a / ASPECT_RATIO
    c = b / SUBDIVISION
    return LogoDimensions(center=size / 2.0, a=a, b=b, c=c)


def _dimensions(size: float, mirror: bool) -> LogoDimensions:
    dims = derive_dimensions(size)
    return dims.mirrored() if mirror else dims


def anchor_points(dims: LogoDimensions) -> List[Point]:
    """
    Compute the eight outline vertices from (possibly negated) dimensions.

    Args:
        dims: Lengths to build from

    Returns:
        Vertices in drawing order
    """
    center, a, b, c = dims
    return [
        Point(center - a, center - b),
        Point(center + a, center - b),
        Point(center + a - 0.5 * c, center - b + c),
        Point(center + a - 1.5 * c, center - b + c),
        Point(center + a - 1.5 * c, center + c),
        Point(center - a + 1.5 * c, center - c),
        Point(center - a + 1.5 * c, center - b + c),
        Point(center - a + 0.5 * c, center - b + c),
    ]


def compute_points(size: float, mirror: bool = False) -> List[Point]:
    """
    Compute the outline of one half of the emblem.

    Args:
        size: Edge length of the square canvas
        mirror: Compute the lower half instead of the upper one

    Returns:
        Exactly eight vertices
    """
    return anchor_points(_dimensions(size, mirror))


def _offset(point: Point, radius: float, angle: float) -> Point:
    return Point(point.x + radius * math.cos(angle),
                 point.y + radius * math.sin(angle))


def compute_decorations(size: float, mirror: bool = False) -> List[Point]:
    """
    Compute the accent circle centers for one half of the emblem.

    Each center sits half of c away from one of the outline vertices.

    Args:
        size: Edge length of the square canvas
        mirror: Compute the lower half instead of the upper one

    Returns:
        Exactly six centers
    """
    dims = _dimensions(size, mirror)
    p1, p2, _, p4, p5, p6, p7, _ = anchor_points(dims)
    r = dims.c / 2.0

    return [
        _offset(p1, r, DIAGONAL),
        _offset(p2, r, DIAGONAL + QUARTER_TURN),
        _offset(p4, r, DIAGONAL),
        _offset(p5, r, STEEP + math.pi),
        _offset(p6, r, STEEP),
        _offset(p7, r, SHALLOW - QUARTER_TURN),
    ]


def decoration_radius(size: float) -> float:
    """Radius of the accent circles."""
    return abs(derive_dimensions(size).c) / 8.0
