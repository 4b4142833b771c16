# No dependencies
from enum import Enum


class CssFormat(str, Enum):
    """Textual notation a color is rendered in by ``to_css``."""
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"
    P3 = "p3"
    HEX = "hex"


# Fallthrough order used by parse_color when no format is declared.
# Hex input is tried under CssFormat.RGB, before rgb()/rgba().
PARSE_ORDER = (
    CssFormat.OKLCH,
    CssFormat.HEX,
    CssFormat.RGB,
    CssFormat.HSL,
    CssFormat.P3,
)

# Space in which each notation natively stores its channels
format_spaces = {
    CssFormat.RGB: "rgb",
    CssFormat.HEX: "rgb",
    CssFormat.HSL: "hsl",
    CssFormat.OKLCH: "oklch",
    CssFormat.P3: "p3",
}

CSS_DECIMALS = 4
RGB_MAX = 255
HUE_360 = 360
PERCENT = 100.0
CHROMA_EPSILON = 1e-12
