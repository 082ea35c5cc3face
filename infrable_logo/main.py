"""
Command-line interface for the Infrable logo generator.

Generates the Infrable logo programmatically. The output is an SVG file,
which can optionally be rendered to PNG as well.
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

from infrable_logo.config.default import COLOR_SCHEMES, DEFAULT_CONFIG
from infrable_logo.core.renderer import RenderError, SVGRenderer
from infrable_logo.core.validator import SVGValidator, ValidationError
from infrable_logo.generation.logo_builder import build_logo
from infrable_logo.generation.svg_generator import (
    FileWriteError, SVGGenerator, SerializationError
)
from infrable_logo.models.document import DocumentError
from infrable_logo.models.shape import ShapeError
from infrable_logo.utils.io import ConfigError, load_config, merge_configs
from infrable_logo.utils.logger import get_logger, log_exception, setup_logger

logger = get_logger(__name__)

EXPECTED_ERRORS = (
    ConfigError, DocumentError, FileWriteError, RenderError,
    SerializationError, ShapeError, ValidationError,
)


def non_negative_int(value: str) -> int:
    """Argument type for sizes."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="logo",
        description="Generates the Infrable logo as an SVG file.",
    )

    parser.add_argument(
        "--size", "-s",
        type=non_negative_int,
        help=f"size of the generated logo (default: {DEFAULT_CONFIG['size']})",
    )

    parser.add_argument(
        "--invert", "-i",
        action="store_true",
        help="whether to invert the colorscheme (same as --scheme dark)",
    )

    parser.add_argument(
        "--scheme",
        type=str,
        help=f"colour scheme, one of: {', '.join(sorted(COLOR_SCHEMES))} "
             f"(default: {DEFAULT_CONFIG['scheme']})",
    )

    parser.add_argument(
        "--no-decorations",
        dest="decorations",
        action="store_false",
        default=None,
        help="draw only the two polygons, without accent circles",
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        help=f"path of the SVG file to write (default: {DEFAULT_CONFIG['output']})",
    )

    parser.add_argument(
        "--png",
        type=str,
        help="also render the logo to this PNG file",
    )

    parser.add_argument(
        "--png-size",
        type=non_negative_int,
        help=f"edge length of the PNG in pixels (default: {DEFAULT_CONFIG['png_size']})",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        default=None,
        help="validate the markup before writing it",
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="path to a JSON configuration file",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="also write log records to this file",
    )

    parser.add_argument(
        "--log-json",
        action="store_true",
        help="write log records as JSON lines",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="enable verbose logging",
    )

    return parser.parse_args(argv)


CONFIG_TYPES = {
    "output": str,
    "scheme": str,
    "decorations": bool,
    "validate": bool,
    "max_svg_size": int,
    "png_size": int,
}


def check_config(config: Dict[str, Any]) -> None:
    """
    Check the types of the options the CLI consumes directly.

    Size, stroke divisor and colour schemes are checked by build_logo.

    Args:
        config: Effective configuration
    """
    for key, expected in CONFIG_TYPES.items():
        value = config.get(key)
        # bool is a subclass of int
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(f"Option '{key}' must be of type {expected.__name__}: {value!r}")

    for key in ("max_svg_size", "png_size"):
        if config[key] <= 0:
            raise ConfigError(f"Option '{key}' must be positive: {config[key]}")


def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Combine defaults, the configuration file and command-line options.

    Args:
        args: Parsed command-line arguments

    Returns:
        Effective configuration
    """
    config = dict(DEFAULT_CONFIG)

    if args.config:
        config = merge_configs(config, load_config(args.config))

    overrides = {
        "size": args.size,
        "scheme": args.scheme,
        "decorations": args.decorations,
        "output": args.output,
        "png_size": args.png_size,
        "validate": args.validate,
    }
    config.update({key: value for key, value in overrides.items() if value is not None})

    if args.invert:
        config["scheme"] = "dark"

    check_config(config)
    return config


def run(config: Dict[str, Any], png_path: Optional[str] = None) -> str:
    """
    Generate the logo.

    Args:
        config: Effective configuration
        png_path: Optional path for a rendered PNG copy

    Returns:
        Path to the written SVG file
    """
    document = build_logo(config)
    generator = SVGGenerator()

    if config["validate"]:
        SVGValidator(max_svg_size=config["max_svg_size"]).check(generator.marshal(document))

    svg_path = generator.save_svg(document, config["output"])

    if png_path:
        size = config["png_size"]
        SVGRenderer().render_svg_file(svg_path, png_path, size=(size, size))

    return svg_path


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        args = parse_args(argv)
    except SystemExit as e:
        # argparse exits with 0 for --help and 2 for usage errors
        return 0 if e.code in (0, None) else 1

    try:
        setup_logger("DEBUG" if args.verbose else None, log_file=args.log_file,
                     use_json=args.log_json)
    except OSError as e:
        log_exception(logger, e)
        return 1

    try:
        config = build_config(args)
        svg_path = run(config, png_path=args.png)
    except EXPECTED_ERRORS as e:
        log_exception(logger, e)
        return 1

    logger.info(f"Logo written to {svg_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
