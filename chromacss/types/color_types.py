from __future__ import annotations
from typing import Literal, NamedTuple, Tuple

ColorSpace = Literal["rgb", "hsl", "oklab", "oklch", "p3"]
COLOR_SPACES: Tuple[str, ...] = ("rgb", "hsl", "oklab", "oklch", "p3")


class RGB(NamedTuple):
    """sRGB in device scale: r, g, b in [0, 255] (unclamped floats), a in [0, 1]."""
    r: float
    g: float
    b: float
    a: float = 1.0


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in [0, 100]."""
    h: float
    s: float
    l: float
    a: float = 1.0


class Oklab(NamedTuple):
    l: float
    a: float
    b: float


class Oklch(NamedTuple):
    """Polar Oklab: l in [0, 1], c >= 0, h in degrees [0, 360)."""
    l: float
    c: float
    h: float
    a: float = 1.0


class P3(NamedTuple):
    """Display-P3 gamma-encoded components in [0, 1]."""
    r: float
    g: float
    b: float
    a: float = 1.0


ColorRecord = RGB | HSL | Oklab | Oklch | P3

record_classes: dict[str, type] = {
    "rgb": RGB,
    "hsl": HSL,
    "oklab": Oklab,
    "oklch": Oklch,
    "p3": P3,
}
