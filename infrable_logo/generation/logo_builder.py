"""
Logo Builder Module
===================
This module assembles the logo document: background, the two emblem
halves and their accent circles.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from infrable_logo.config.default import COLOR_SCHEMES, DEFAULT_CONFIG
from infrable_logo.generation.geometry import (
    compute_decorations, compute_points, decoration_radius
)
from infrable_logo.models.document import Document
from infrable_logo.models.shape import Circle, Polygon, Rect
from infrable_logo.utils.io import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorScheme:
    """Colours used to draw the logo."""
    background: str
    primary: str
    secondary: str
    stroke: str
    accent: str

    @classmethod
    def from_name(
        cls,
        name: str,
        schemes: Optional[Mapping[str, Mapping[str, str]]] = None
    ) -> 'ColorScheme':
        """
        Look up a named colour scheme.

        Args:
            name: Scheme name
            schemes: Available schemes (defaults to COLOR_SCHEMES)

        Returns:
            The colour scheme
        """
        schemes = COLOR_SCHEMES if schemes is None else schemes
        if not isinstance(name, str):
            raise ConfigError(f"Colour scheme name must be a string: {name!r}")
        if name not in schemes:
            available = ", ".join(sorted(schemes))
            raise ConfigError(f"Unknown colour scheme '{name}' (available: {available})")
        colours = schemes[name]
        if not isinstance(colours, Mapping):
            raise ConfigError(f"Colour scheme '{name}' must be a mapping of colours")
        for role, colour in colours.items():
            if not isinstance(colour, str):
                raise ConfigError(f"Colour '{role}' of scheme '{name}' must be a string: {colour!r}")
        try:
            return cls(**colours)
        except TypeError as e:
            raise ConfigError(f"Invalid colour scheme '{name}': {e}") from e


class LogoBuilder:
    """Builds the logo document for a given size and colour scheme."""

    def __init__(
        self,
        size: float = DEFAULT_CONFIG["size"],
        scheme: Optional[ColorScheme] = None,
        decorations: bool = DEFAULT_CONFIG["decorations"],
        stroke_divisor: float = DEFAULT_CONFIG["stroke_divisor"]
    ):
        """
        Initialize the builder.

        Args:
            size: Edge length of the square canvas
            scheme: Colour scheme (defaults to the configured scheme)
            decorations: Whether to add the accent circles
            stroke_divisor: Ratio of the size to the stroke width
        """
        self.size = float(size)
        self.scheme = scheme or ColorScheme.from_name(DEFAULT_CONFIG["scheme"])
        self.decorations = decorations
        self.stroke_width = self.size / stroke_divisor

    def _half(self, mirror: bool, fill: str) -> Polygon:
        return Polygon(
            compute_points(self.size, mirror),
            fill=fill,
            stroke=self.scheme.stroke,
            stroke_width=self.stroke_width,
        )

    def build(self) -> Document:
        """
        Build the logo document.

        Returns:
            Document with background, lower half, upper half and, when
            enabled, the accent circles of both halves
        """
        document = Document(width=self.size, height=self.size)

        document.append_element(Rect(0, 0, self.size, self.size,
                                     fill=self.scheme.background))
        document.append_element(self._half(mirror=True, fill=self.scheme.secondary))
        document.append_element(self._half(mirror=False, fill=self.scheme.primary))

        if self.decorations:
            radius = decoration_radius(self.size)
            for mirror in (True, False):
                for center in compute_decorations(self.size, mirror):
                    document.append_element(Circle.at(center, radius, fill=self.scheme.accent))

        logger.debug(f"Built logo of size {self.size} with {len(document)} elements")
        return document


def build_logo(config: Dict) -> Document:
    """
    Build the logo described by a configuration dictionary.

    Args:
        config: Configuration with the keys of DEFAULT_CONFIG; an optional
            "schemes" mapping adds or overrides colour schemes

    Returns:
        The logo document
    """
    extra_schemes = config.get("schemes") or {}
    if not isinstance(extra_schemes, Mapping):
        raise ConfigError(f"Colour schemes must map names to colours: {extra_schemes!r}")
    schemes = dict(COLOR_SCHEMES)
    schemes.update(extra_schemes)

    size = config["size"]
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        raise ConfigError(f"Size must be a number: {size!r}")
    if size < 0:
        raise ConfigError(f"Size must not be negative: {size}")

    divisor = config["stroke_divisor"]
    if isinstance(divisor, bool) or not isinstance(divisor, (int, float)) or divisor <= 0:
        raise ConfigError(f"Stroke divisor must be a positive number: {divisor!r}")

    builder = LogoBuilder(
        size=size,
        scheme=ColorScheme.from_name(config["scheme"], schemes),
        decorations=config["decorations"],
        stroke_divisor=divisor,
    )
    return builder.build()
