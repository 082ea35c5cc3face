"""
Default configuration settings for logo generation.
"""

DEFAULT_CONFIG = {
    # Canvas settings
    "size": 500,  # Edge length of the square canvas
    "output": "logo.svg",  # Output filename

    # Styling
    "scheme": "infrable",  # Key into COLOR_SCHEMES
    "stroke_divisor": 30,  # Stroke width is the canvas size over this
    "decorations": True,  # Whether to draw the accent circles

    # Validation settings
    "validate": False,  # Whether to validate the markup before writing
    "max_svg_size": 10000,  # Maximum SVG size in bytes

    # Rendering settings
    "png_size": 512,  # Edge length of exported PNG images
}

# Colour schemes: background, polygon fills, separating stroke, circle accents
COLOR_SCHEMES = {
    "light": {
        "background": "#ffffff",
        "primary": "#000000",
        "secondary": "#000000",
        "stroke": "#ffffff",
        "accent": "#ffffff",
    },
    "dark": {
        "background": "#000000",
        "primary": "#ffffff",
        "secondary": "#ffffff",
        "stroke": "#000000",
        "accent": "#000000",
    },
    "infrable": {
        "background": "#ffffff",
        "primary": "#1d3557",
        "secondary": "#457b9d",
        "stroke": "#ffffff",
        "accent": "#e63946",
    },
}
