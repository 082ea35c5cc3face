"""
Shape models for SVG generation.
Provides the closed set of shapes the logo is drawn with (rectangles,
circles and polygons) together with their shared styling attributes.
"""

from enum import Enum, auto
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple

from infrable_logo.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Type definitions
Attribute = Tuple[str, Any]  # (svg attribute name, raw value)

# Constants
POINT_SEPARATOR = ", "


class ShapeType(Enum):
    """Enum for the supported SVG shape types."""
    RECT = auto()
    CIRCLE = auto()
    POLYGON = auto()


class ShapeError(Exception):
    """Custom exception for shape-related errors."""
    pass


class Point(NamedTuple):
    """An immutable (x, y) coordinate."""
    x: float
    y: float

    def __str__(self) -> str:
        # Coordinates are rounded to whole units for display.
        return f"{self.x:.0f},{self.y:.0f}"


class Shape:
    """
    Base class for SVG shapes.

    Holds the styling shared by all variants. Subclasses provide their
    geometric attributes through ``_geometry()``; ``attributes()`` returns
    geometry followed by styling, in declaration order, skipping anything
    that was left unset.
    """

    __slots__ = ('_type', '_fill', '_stroke', '_stroke_width')

    tag = None

    def __init__(
        self,
        shape_type: ShapeType,
        fill: Optional[str] = None,
        stroke: Optional[str] = None,
        stroke_width: Optional[float] = None
    ):
        """
        Initialize a new shape.

        Args:
            shape_type: Type of shape
            fill: Fill colour, or None to leave the attribute out
            stroke: Stroke colour, or None to leave the attribute out
            stroke_width: Width of stroke, or None to leave the attribute out
        """
        if stroke_width is not None and stroke_width < 0:
            raise ShapeError(f"Stroke width must not be negative: {stroke_width}")

        self._type = shape_type
        self._fill = fill
        self._stroke = stroke
        self._stroke_width = stroke_width

    @property
    def type(self) -> ShapeType:
        """Get shape type."""
        return self._type

    @property
    def fill(self) -> Optional[str]:
        """Get fill colour."""
        return self._fill

    @property
    def stroke(self) -> Optional[str]:
        """Get stroke colour."""
        return self._stroke

    @property
    def stroke_width(self) -> Optional[float]:
        """Get stroke width."""
        return self._stroke_width

    def _geometry(self) -> List[Attribute]:
        raise NotImplementedError("Subclasses must implement _geometry")

    def attributes(self) -> List[Attribute]:
        """
        Get the SVG attributes of this shape.

        Returns:
            Ordered list of (name, value) pairs, geometry first
        """
        styling = [
            ('fill', self._fill),
            ('stroke', self._stroke),
            ('stroke-width', self._stroke_width),
        ]
        return [(name, value) for name, value in self._geometry() + styling
                if value is not None]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self._type == other._type and self.attributes() == other.attributes()

    __hash__ = None

    def __repr__(self) -> str:
        """Debug representation."""
        attrs = ", ".join(f"{name}={value!r}" for name, value in self.attributes())
        return f"{self.__class__.__name__}({attrs})"


class Rect(Shape):
    """
    Axis-aligned rectangle.
    """

    __slots__ = ('_x', '_y', '_width', '_height', '_rx', '_ry')

    tag = 'rect'

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        rx: Optional[float] = None,
        ry: Optional[float] = None,
        **kwargs
    ):
        """
        Initialize a rectangle.

        Args:
            x: X-coordinate of top-left corner
            y: Y-coordinate of top-left corner
            width: Width of rectangle
            height: Height of rectangle
            rx: X-axis corner radius
            ry: Y-axis corner radius
            **kwargs: Styling parameters passed to Shape
        """
        super().__init__(shape_type=ShapeType.RECT, **kwargs)

        if width < 0 or height < 0:
            raise ShapeError(f"Rectangle size must not be negative: {width}x{height}")

        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._rx = rx
        self._ry = ry

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def _geometry(self) -> List[Attribute]:
        return [
            ('x', self._x),
            ('y', self._y),
            ('width', self._width),
            ('height', self._height),
            ('rx', self._rx),
            ('ry', self._ry),
        ]


class Circle(Shape):
    """
    Circle defined by a center point and a radius.
    """

    __slots__ = ('_cx', '_cy', '_r')

    tag = 'circle'

    def __init__(self, cx: float, cy: float, r: float, **kwargs):
        """
        Initialize a circle.

        Args:
            cx: X-coordinate of center
            cy: Y-coordinate of center
            r: Radius
            **kwargs: Styling parameters passed to Shape
        """
        super().__init__(shape_type=ShapeType.CIRCLE, **kwargs)

        if r < 0:
            raise ShapeError(f"Circle radius must not be negative: {r}")

        self._cx = cx
        self._cy = cy
        self._r = r

    @classmethod
    def at(cls, center: Point, r: float, **kwargs) -> 'Circle':
        """Create a circle centered on a point."""
        return cls(center.x, center.y, r, **kwargs)

    @property
    def center(self) -> Point:
        return Point(self._cx, self._cy)

    @property
    def r(self) -> float:
        return self._r

    def _geometry(self) -> List[Attribute]:
        return [
            ('cx', self._cx),
            ('cy', self._cy),
            ('r', self._r),
        ]


class Polygon(Shape):
    """
    Closed shape made of connected straight line segments.

    Vertices are kept in insertion order and serialized as a single
    ``"X,Y, X,Y, ..."`` string with integer-rounded coordinates.
    """

    __slots__ = ('_vertices',)

    tag = 'polygon'

    def __init__(self, points: Optional[Iterable[Tuple[float, float]]] = None, **kwargs):
        """
        Initialize a polygon.

        Args:
            points: Initial vertices
            **kwargs: Styling parameters passed to Shape
        """
        super().__init__(shape_type=ShapeType.POLYGON, **kwargs)
        self._vertices: List[Point] = []
        if points:
            self.extend(points)

    def append_point(self, point: Tuple[float, float]) -> 'Polygon':
        """
        Append a vertex.

        Args:
            point: Vertex as a Point or an (x, y) pair

        Returns:
            Self for method chaining
        """
        self._vertices.append(Point(*point))
        return self

    def extend(self, points: Iterable[Tuple[float, float]]) -> 'Polygon':
        """Append several vertices in order."""
        for point in points:
            self.append_point(point)
        return self

    @property
    def vertices(self) -> List[Point]:
        """Get a copy of the vertex list."""
        return list(self._vertices)

    @property
    def points(self) -> str:
        """Get the vertices as an SVG points string."""
        return POINT_SEPARATOR.join(str(point) for point in self._vertices)

    def _geometry(self) -> List[Attribute]:
        return [('points', self.points)]
