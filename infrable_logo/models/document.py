"""
Document model for SVG output.
A document is the canvas (size and optional styling) plus the shapes drawn
on it, kept in draw order.
"""

from typing import Iterator, List, Optional

from infrable_logo.utils.logger import get_logger
from infrable_logo.models.shape import Shape, Attribute

# Configure logger
logger = get_logger(__name__)

# Constants
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_VERSION = "2.0"


class DocumentError(Exception):
    """Custom exception for document-related errors."""
    pass


class Document:
    """
    An SVG document fragment: an 'svg' canvas holding an ordered list of
    shapes. Shapes appended later render on top of earlier ones.
    """

    tag = 'svg'

    def __init__(
        self,
        width: float,
        height: float,
        fill: Optional[str] = None,
        stroke: Optional[str] = None,
        stroke_width: Optional[float] = None,
        namespace: str = SVG_NAMESPACE,
        version: str = SVG_VERSION
    ):
        """
        Initialize a document.

        Args:
            width: Canvas width
            height: Canvas height
            fill: Optional canvas fill colour
            stroke: Optional canvas stroke colour
            stroke_width: Optional canvas stroke width
            namespace: XML namespace of the root element
            version: SVG version string
        """
        if width < 0 or height < 0:
            raise DocumentError(f"Canvas size must not be negative: {width}x{height}")

        self.width = width
        self.height = height
        self.fill = fill
        self.stroke = stroke
        self.stroke_width = stroke_width
        self.namespace = namespace
        self.version = version
        self._elements: List[Shape] = []

    @property
    def elements(self) -> List[Shape]:
        """Get a copy of the shapes in draw order."""
        return list(self._elements)

    def append_element(self, shape: Shape) -> 'Document':
        """
        Append a shape on top of everything drawn so far.

        Args:
            shape: Shape to append

        Returns:
            Self for method chaining
        """
        if not isinstance(shape, Shape):
            raise DocumentError(f"Not a shape: {shape!r}")

        self._elements.append(shape)
        logger.debug(f"Appended {shape.type.name} as element {len(self._elements)}")
        return self

    def attributes(self) -> List[Attribute]:
        """
        Get the attributes of the root element in declaration order.

        Returns:
            Ordered list of (name, value) pairs, unset values skipped
        """
        attrs = [
            ('xmlns', self.namespace),
            ('version', self.version),
            ('width', self.width),
            ('height', self.height),
            ('fill', self.fill),
            ('stroke', self.stroke),
            ('stroke-width', self.stroke_width),
        ]
        return [(name, value) for name, value in attrs if value is not None]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._elements)
