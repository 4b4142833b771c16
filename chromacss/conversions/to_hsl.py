import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp01
from boundednumbers.np_functions import clamp01 as np_clamp01

from ..types.color_types import RGB, HSL
from ..types.format_type import RGB_MAX, HUE_360, PERCENT
from .numbers import normalize_hue, round_half_up

# below this the saturation denominator is treated as zero
EPS = 1e-12

## RGB to HSL conversions

def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Convert RGB to HSL.

    Args:
        rgb: RGB record with channels in [0, 255]

    Returns:
        HSL: (hue [0,360), saturation [0,100], lightness [0,100], alpha)
    """
    r = rgb.r / RGB_MAX
    g = rgb.g / RGB_MAX
    b = rgb.b / RGB_MAX

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return HSL(0.0, 0.0, lightness * PERCENT, clamp01(rgb.a))

    denom = 1 - abs(2 * lightness - 1)
    saturation = 0.0 if abs(denom) < EPS else delta / denom

    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return HSL(normalize_hue(hue * 60), saturation * PERCENT, lightness * PERCENT, clamp01(rgb.a))

## HSL to RGB conversions

def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p

def hsl_to_rgb(hsl: HSL) -> RGB:
    """
    Convert HSL to RGB.

    Args:
        hsl: HSL record, saturation and lightness in [0, 100]

    Returns:
        RGB: integer channels in [0, 255], alpha clamped to [0, 1]
    """
    h = normalize_hue(hsl.h) / HUE_360
    # CSS clamps saturation and lightness to [0%, 100%]
    s = clamp01(hsl.s / PERCENT)
    l = clamp01(hsl.l / PERCENT)

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return RGB(
        round_half_up(r * RGB_MAX),
        round_half_up(g * RGB_MAX),
        round_half_up(b * RGB_MAX),
        clamp01(hsl.a),
    )

## Vectorized

def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r = np.asarray(r, dtype=float) / RGB_MAX
    g = np.asarray(g, dtype=float) / RGB_MAX
    b = np.asarray(b, dtype=float) / RGB_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros(out_shape)
    denom = 1 - np.abs(2 * lightness - 1)
    mask_s = (delta > 0) & (np.abs(denom) >= EPS)
    saturation[mask_s] = delta[mask_s] / denom[mask_s]

    hue = np.zeros(out_shape)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r]
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    hue = (hue * 60) % HUE_360
    hue = np.where(hue >= HUE_360, 0.0, hue)

    return np.stack([hue, saturation * PERCENT, lightness * PERCENT], axis=-1)

def _np_hue_to_rgb(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )

def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, lightness in [0, 100]

    Returns:
        rgb: array of shape (..., 3) with channels rounded to whole numbers in [0, 255]
    """
    h = (np.asarray(h, dtype=float) % HUE_360) / HUE_360
    s = np_clamp01(np.asarray(s, dtype=float) / PERCENT)
    l = np_clamp01(np.asarray(l, dtype=float) / PERCENT)
    h, s, l = np.broadcast_arrays(h, s, l)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = np.where(s == 0, l, _np_hue_to_rgb(p, q, h + 1 / 3))
    g = np.where(s == 0, l, _np_hue_to_rgb(p, q, h))
    b = np.where(s == 0, l, _np_hue_to_rgb(p, q, h - 1 / 3))

    return np.floor(np.stack([r, g, b], axis=-1) * RGB_MAX + 0.5)
