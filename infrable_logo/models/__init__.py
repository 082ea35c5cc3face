"""
Infrable Logo - Data Models
===========================
This package contains the point, shape and document models the logo is
described with before serialization.
"""

from infrable_logo.models.shape import (
    ShapeType, ShapeError, Point, Shape, Rect, Circle, Polygon
)
from infrable_logo.models.document import (
    SVG_NAMESPACE, SVG_VERSION, DocumentError, Document
)

__all__ = [
    'ShapeType', 'ShapeError', 'Point', 'Shape', 'Rect', 'Circle', 'Polygon',
    'SVG_NAMESPACE', 'SVG_VERSION', 'DocumentError', 'Document'
]
