"""
SVG Generator Module
====================
This module provides functionality for serializing documents to SVG markup
and writing them to disk.
"""

import os
import math
import logging
import xml.etree.ElementTree as ET
from typing import Any, Optional

from infrable_logo.models.document import Document
from infrable_logo.models.shape import Polygon, Shape

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT = " "
FILE_MODE = 0o644
DEFAULT_FILENAME = "logo.svg"
COLOUR_ATTRIBUTES = ("fill", "stroke")


class SerializationError(Exception):
    """Raised when a document holds a value that cannot be written as SVG."""
    pass


class FileWriteError(Exception):
    """Raised when serialized markup cannot be written to its destination."""
    pass


def format_value(value: Any) -> str:
    """
    Format an attribute value for output.

    Integral numbers are written without a fractional part, other numbers
    use the shortest representation that round-trips.

    Args:
        value: String or number

    Returns:
        Attribute text
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise SerializationError(f"Unsupported attribute value: {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(f"Cannot represent non-finite number: {value!r}")
        if value.is_integer():
            return str(int(value))
        return repr(value)
    raise SerializationError(f"Unsupported attribute value: {value!r}")


def _set_attributes(element: ET.Element, attributes) -> None:
    for name, value in attributes:
        if name in COLOUR_ATTRIBUTES and not isinstance(value, str):
            raise SerializationError(f"Colour '{name}' must be a string: {value!r}")
        element.set(name, format_value(value))


def _shape_element(parent: ET.Element, shape: Shape) -> ET.Element:
    if not isinstance(shape, Shape) or shape.tag is None:
        raise SerializationError(f"Cannot serialize element: {shape!r}")

    if isinstance(shape, Polygon):
        for vertex in shape.vertices:
            if not (math.isfinite(vertex.x) and math.isfinite(vertex.y)):
                raise SerializationError(f"Cannot represent polygon vertex: {vertex!r}")

    element = ET.SubElement(parent, shape.tag)
    _set_attributes(element, shape.attributes())
    return element


def to_element(document: Document) -> ET.Element:
    """
    Build the element tree for a document.

    Args:
        document: Document to convert

    Returns:
        Root 'svg' element with one child per shape, in draw order
    """
    root = ET.Element(document.tag)
    _set_attributes(root, document.attributes())

    for shape in document:
        _shape_element(root, shape)

    return root


def marshal(document: Document) -> bytes:
    """
    Serialize a document to indented SVG markup.

    Args:
        document: Document to serialize

    Returns:
        UTF-8 encoded markup, starting with an XML declaration
    """
    root = to_element(document)
    ET.indent(root, space=INDENT)

    try:
        markup = ET.tostring(root, encoding='unicode')
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Error encoding document: {e}") from e

    return (XML_DECLARATION + markup + "\n").encode('utf-8')


class SVGGenerator:
    """Class for generating SVG files from documents."""

    def __init__(self, output_dir: str = "."):
        """
        Initialize the generator.

        Args:
            output_dir: Directory where SVG files will be saved
        """
        self.output_dir = output_dir

    def marshal(self, document: Document) -> bytes:
        """
        Serialize a document to SVG bytes.

        Args:
            document: Document containing all shapes

        Returns:
            Encoded SVG markup
        """
        logger.debug(f"Marshalling document with {len(document)} elements")
        return marshal(document)

    def generate_svg(self, document: Document) -> str:
        """
        Generate SVG code from a document.

        Args:
            document: Document containing all shapes

        Returns:
            String containing the SVG code
        """
        return self.marshal(document).decode('utf-8')

    def save_svg(self, document: Document, filename: Optional[str] = None) -> str:
        """
        Generate SVG and save it to a file.

        The document is fully serialized before the file is opened, so a
        serialization failure leaves nothing on disk.

        Args:
            document: Document containing all shapes
            filename: File name or path relative to the output directory

        Returns:
            Path to the saved SVG file
        """
        data = self.marshal(document)
        filepath = os.path.join(self.output_dir, filename or DEFAULT_FILENAME)

        try:
            directory = os.path.dirname(filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)

            fd = os.open(filepath, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.error(f"Error writing SVG to {filepath}: {e}")
            raise FileWriteError(f"Could not write {filepath}: {e}") from e

        logger.info(f"SVG saved to {filepath}")
        return filepath
