"""chromacss: CSS color parsing, formatting and color-space conversion."""

from .types.color_types import RGB, HSL, Oklab, Oklch, P3, ColorSpace
from .types.format_type import CssFormat
from .exceptions import ColorParseError
# css before colors: the parser builds ColorValue instances
from .css import parse_color, format_css, trim_float
from .colors.color import ColorValue
from .conversions import (
    srgb_to_linear,
    linear_to_srgb,
    rgb_to_oklab,
    oklab_to_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    p3_to_rgb,
    rgb_to_p3,
    rgb_to_hsl,
    hsl_to_rgb,
    convert,
    np_convert,
)

__version__ = "1.0.0"

__all__ = [
    # value records
    "RGB",
    "HSL",
    "Oklab",
    "Oklch",
    "P3",
    "ColorSpace",
    "CssFormat",
    # color value and parsing
    "ColorValue",
    "ColorParseError",
    "parse_color",
    "format_css",
    "trim_float",
    # conversions
    "srgb_to_linear",
    "linear_to_srgb",
    "rgb_to_oklab",
    "oklab_to_rgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "p3_to_rgb",
    "rgb_to_p3",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "convert",
    "np_convert",
    "__version__",
]
