"""
SVG validation utilities to check generated markup before it is written.
"""
import logging
from typing import Dict, Optional, Set, Tuple, Union

from defusedxml import ElementTree
from defusedxml import DefusedXmlException

from infrable_logo.config.default import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when markup fails validation."""
    pass


class SVGValidator:
    """
    Validates SVG markup against the subset the logo generator emits.

    Checks the size limit, parses the markup safely, and only allows the
    canvas, rectangle, circle and polygon elements with their attributes.
    """

    def __init__(self, max_svg_size: int = DEFAULT_CONFIG["max_svg_size"]):
        """
        Initialize the SVG validator.

        Args:
            max_svg_size: Maximum allowed size of an SVG file in bytes
        """
        self.max_svg_size = max_svg_size
        self.allowed_elements = self._get_allowed_elements()

    def _get_allowed_elements(self) -> Dict[str, Set[str]]:
        """
        Define allowed SVG elements and attributes.

        Returns:
            Dictionary mapping element names to sets of allowed attributes
        """
        common_attrs = {'fill', 'stroke', 'stroke-width'}

        return {
            'common': common_attrs,
            'svg': {'width', 'height', 'version', 'viewBox'},
            'rect': {'x', 'y', 'width', 'height', 'rx', 'ry'},
            'circle': {'cx', 'cy', 'r'},
            'polygon': {'points'},
        }

    def validate(self, svg_code: Union[str, bytes]) -> Tuple[bool, Optional[str]]:
        """
        Validate SVG markup.

        Args:
            svg_code: The SVG markup to validate

        Returns:
            Tuple of (is_valid: bool, error_message: Optional[str])
        """
        data = svg_code.encode('utf-8') if isinstance(svg_code, str) else svg_code

        svg_size = len(data)
        if svg_size > self.max_svg_size:
            return False, f"SVG exceeds allowed size: {svg_size} bytes (max: {self.max_svg_size})"

        try:
            # Parse XML using defusedxml to prevent XXE attacks
            tree = ElementTree.fromstring(
                data,
                forbid_dtd=True,
                forbid_entities=True,
                forbid_external=True,
            )
        except (ElementTree.ParseError, DefusedXmlException) as e:
            return False, f"Invalid XML: {str(e)}"

        root_name = tree.tag.split('}')[-1]
        if root_name != 'svg':
            return False, f"Root element must be svg, not {root_name}"

        for element in tree.iter():
            tag_name = element.tag.split('}')[-1]
            if tag_name == 'common' or tag_name not in self.allowed_elements:
                return False, f"Disallowed element: {tag_name}"

            for attr, attr_value in element.attrib.items():
                attr_name = attr.split('}')[-1]
                if (
                    attr_name not in self.allowed_elements[tag_name]
                    and attr_name not in self.allowed_elements['common']):
                    return False, f"Disallowed attribute: {attr_name} on element {tag_name}"

                if 'data:' in attr_value.lower():
                    return False, f"Embedded data not allowed in attribute: {attr_name}"

        return True, None

    def check(self, svg_code: Union[str, bytes]) -> None:
        """
        Validate SVG markup, raising on failure.

        Args:
            svg_code: The SVG markup to validate
        """
        is_valid, message = self.validate(svg_code)
        if not is_valid:
            logger.error(f"SVG validation failed: {message}")
            raise ValidationError(message)
        logger.debug("SVG validation passed")
