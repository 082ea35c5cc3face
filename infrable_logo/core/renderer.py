"""
SVG rendering utilities to convert SVG code to raster images.
"""
import io
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

from infrable_logo.config.default import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

DEFAULT_SIZE = (DEFAULT_CONFIG["png_size"], DEFAULT_CONFIG["png_size"])


class RenderError(Exception):
    """Raised when SVG markup cannot be rasterized."""
    pass


class SVGRenderer:
    """
    Renders SVG code to PIL Images, e.g. to export the logo as PNG.
    """

    def __init__(self, default_size: Tuple[int, int] = DEFAULT_SIZE):
        """
        Initialize the SVG renderer.

        Args:
            default_size: Default size (width, height) for rendered images
        """
        self.default_size = default_size
        self._check_dependencies()

    def _check_dependencies(self) -> None:
        """Load cairosvg, which needs the native cairo library at import."""
        try:
            import cairosvg
        except (ImportError, OSError) as e:
            raise RenderError(f"cairosvg is not available: {e}") from e
        self.cairosvg = cairosvg

    def render_svg(
        self,
        svg_code: Union[str, bytes],
        output_path: Optional[Union[str, Path]] = None,
        size: Optional[Tuple[int, int]] = None
    ) -> Image.Image:
        """
        Convert SVG code to a PIL Image.

        Args:
            svg_code: SVG code as a string or bytes
            output_path: Optional path to save the rendered image
            size: Optional (width, height) tuple for rendered image

        Returns:
            PIL Image of the rendered SVG
        """
        data = svg_code.encode('utf-8') if isinstance(svg_code, str) else svg_code
        width, height = size or self.default_size

        try:
            png_data = self.cairosvg.svg2png(
                bytestring=data,
                output_width=width,
                output_height=height
            )
            image = Image.open(io.BytesIO(png_data))
            image.load()
        except Exception as e:
            logger.error(f"Error rendering SVG: {e}")
            logger.debug(f"Problematic SVG code: {data[:100]!r}...")
            raise RenderError(f"Error rendering SVG: {e}") from e

        if output_path:
            output_path = Path(output_path)
            try:
                output_path.parent.mkdir(exist_ok=True, parents=True)
                image.save(output_path, format="PNG")
            except OSError as e:
                raise RenderError(f"Could not save image to {output_path}: {e}") from e
            logger.info(f"PNG saved to {output_path}")

        return image

    def render_svg_file(
        self,
        svg_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
        size: Optional[Tuple[int, int]] = None
    ) -> Image.Image:
        """
        Render an SVG file to a PIL Image.

        Args:
            svg_path: Path to the SVG file
            output_path: Optional path to save the rendered image
            size: Optional (width, height) tuple for rendered image

        Returns:
            PIL Image of the rendered SVG
        """
        svg_path = Path(svg_path)

        if not svg_path.exists():
            raise RenderError(f"SVG file not found: {svg_path}")

        return self.render_svg(svg_path.read_bytes(), output_path, size)
