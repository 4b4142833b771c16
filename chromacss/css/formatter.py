from boundednumbers import clamp, clamp01

from ..conversions.numbers import round_half_up
from ..types.color_types import RGB, HSL, Oklch, P3, ColorRecord
from ..types.format_type import CssFormat, CSS_DECIMALS, RGB_MAX, HUE_360, PERCENT


def trim_float(value: float, decimals: int = CSS_DECIMALS) -> str:
    """Fixed-point text with trailing zeros and a trailing point removed (0.5000 -> 0.5)."""
    text = f"{value:.{decimals}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text

def _alpha_suffix(alpha: float) -> str:
    a = clamp01(alpha)
    return "" if a >= 1 else f" / {trim_float(a)}"

def _to_byte(channel: float) -> int:
    return round_half_up(clamp(channel, 0, RGB_MAX))

def _format_hue(hue: float) -> str:
    # hues just under 360 round up to it; 360 and 0 are the same angle
    text = trim_float(hue)
    return "0" if text == str(HUE_360) else text


def format_hex(rgb: RGB) -> str:
    """``#RRGGBB``, or ``#RRGGBBAA`` when alpha is below 1. Uppercase digits."""
    rr, gg, bb = (f"{_to_byte(c):02X}" for c in (rgb.r, rgb.g, rgb.b))
    if rgb.a >= 1:
        return f"#{rr}{gg}{bb}"
    return f"#{rr}{gg}{bb}{_to_byte(rgb.a * RGB_MAX):02X}"

def format_rgb_css(rgb: RGB) -> str:
    r, g, b = (_to_byte(c) for c in (rgb.r, rgb.g, rgb.b))
    return f"rgb({r} {g} {b}{_alpha_suffix(rgb.a)})"

def format_hsl_css(hsl: HSL) -> str:
    return f"hsl({_format_hue(hsl.h)} {trim_float(hsl.s)}% {trim_float(hsl.l)}%{_alpha_suffix(hsl.a)})"

def format_oklch_css(lch: Oklch) -> str:
    return (
        f"oklch({trim_float(lch.l * PERCENT)}% {trim_float(lch.c)} {_format_hue(lch.h)}"
        f"{_alpha_suffix(lch.a)})"
    )

def format_p3_css(p3: P3) -> str:
    return (
        f"color(display-p3 {trim_float(p3.r)} {trim_float(p3.g)} {trim_float(p3.b)}"
        f"{_alpha_suffix(p3.a)})"
    )


def format_css(record: ColorRecord, fmt: CssFormat | str) -> str:
    """
    Render a value record as CSS text in the given notation.

    Args:
        record: RGB for ``rgb``/``hex``, HSL for ``hsl``, Oklch for ``oklch``,
            P3 for ``p3``
        fmt: Target notation

    Returns:
        str: CSS color text, with the ``/ alpha`` segment omitted when opaque
    """
    fmt = CssFormat(fmt)
    if fmt == CssFormat.RGB:
        return format_rgb_css(record)
    elif fmt == CssFormat.HEX:
        return format_hex(record)
    elif fmt == CssFormat.HSL:
        return format_hsl_css(record)
    elif fmt == CssFormat.OKLCH:
        return format_oklch_css(record)
    elif fmt == CssFormat.P3:
        return format_p3_css(record)
    raise ValueError(f"Unsupported CSS format: {fmt}")
