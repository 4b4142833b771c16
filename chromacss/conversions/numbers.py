import math

from boundednumbers import clamp01
from boundednumbers.functions import cyclic_wrap_float

from ..types.format_type import HUE_360


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) with a floored modulo.

    Tiny negative inputs can wrap to exactly 360.0 in floating point; those
    fold back to 0.
    """
    h = cyclic_wrap_float(h, 0.0, float(HUE_360))
    return 0.0 if h >= HUE_360 else h

def clamp_channel(value: float) -> float:
    """clamp01 for matrix outputs; NaN (from inf - inf on overflowing input) maps to 0."""
    return 0.0 if math.isnan(value) else clamp01(value)

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (127.5 -> 128)."""
    return int(math.floor(value + 0.5))
