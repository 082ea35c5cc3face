"""
Infrable Logo - Generation Package
==================================
This package contains the geometry of the emblem, the document builder and
the SVG serializer.
"""

from infrable_logo.generation.geometry import (
    LogoDimensions, derive_dimensions, compute_points,
    compute_decorations, decoration_radius
)
from infrable_logo.generation.logo_builder import ColorScheme, LogoBuilder, build_logo
from infrable_logo.generation.svg_generator import (
    SVGGenerator, SerializationError, FileWriteError, marshal
)

__all__ = [
    "LogoDimensions", "derive_dimensions", "compute_points",
    "compute_decorations", "decoration_radius",
    "ColorScheme", "LogoBuilder", "build_logo",
    "SVGGenerator", "SerializationError", "FileWriteError", "marshal"
]
