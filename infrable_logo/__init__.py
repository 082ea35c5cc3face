"""
Infrable Logo - A small toolkit that programmatically generates the
Infrable logo.

The emblem geometry is derived from golden ratio proportions and written
out as an SVG document, which can be rendered to PNG.
"""

__version__ = "0.1.0"

from infrable_logo.generation.geometry import compute_points, compute_decorations
from infrable_logo.generation.logo_builder import ColorScheme, LogoBuilder
from infrable_logo.generation.svg_generator import SVGGenerator, marshal
from infrable_logo.models.document import Document
from infrable_logo.models.shape import Circle, Point, Polygon, Rect

__all__ = [
    "compute_points",
    "compute_decorations",
    "ColorScheme",
    "LogoBuilder",
    "SVGGenerator",
    "marshal",
    "Document",
    "Circle",
    "Point",
    "Polygon",
    "Rect",
]
