from infrable_logo.core.renderer import RenderError, SVGRenderer
from infrable_logo.core.validator import SVGValidator, ValidationError

__all__ = ["RenderError", "SVGRenderer", "SVGValidator", "ValidationError"]
