"""CSS color text: token parsing, notation parsers and formatting."""

from .tokens import parse_number, parse_percentage, parse_number_255, parse_alpha, parse_hue
from .formatter import (
    trim_float,
    format_css,
    format_hex,
    format_rgb_css,
    format_hsl_css,
    format_oklch_css,
    format_p3_css,
)
from .parser import (
    parse_color,
    parse_hex,
    parse_rgb,
    parse_hsl,
    parse_oklch,
    parse_p3,
)

__all__ = [
    # tokens
    "parse_number",
    "parse_percentage",
    "parse_number_255",
    "parse_alpha",
    "parse_hue",
    # formatting
    "trim_float",
    "format_css",
    "format_hex",
    "format_rgb_css",
    "format_hsl_css",
    "format_oklch_css",
    "format_p3_css",
    # parsing
    "parse_color",
    "parse_hex",
    "parse_rgb",
    "parse_hsl",
    "parse_oklch",
    "parse_p3",
]
