import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp01
from boundednumbers.np_functions import clamp01 as np_clamp01

from ..types.color_types import RGB, Oklab, Oklch
from ..types.format_type import RGB_MAX, CHROMA_EPSILON
from .linear import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
from .matrices import M1_OKLAB, M2_OKLAB, M2_INV_OKLAB, M1_INV_OKLAB, apply_matrix, np_apply_matrix
from .numbers import normalize_hue, clamp_channel

## RGB <-> Oklab

def rgb_to_oklab(rgb: RGB) -> Oklab:
    """
    Convert sRGB to Oklab.

    Channels are normalized to [0, 1] and clamped before linearization, so
    out-of-range RGB maps onto the sRGB gamut boundary.

    Args:
        rgb: RGB record with channels in [0, 255]

    Returns:
        Oklab: (l, a, b)
    """
    r = srgb_to_linear(clamp01(rgb.r / RGB_MAX))
    g = srgb_to_linear(clamp01(rgb.g / RGB_MAX))
    b = srgb_to_linear(clamp01(rgb.b / RGB_MAX))

    lms = apply_matrix(M1_OKLAB, r, g, b)
    l_, m_, s_ = (math.cbrt(v) for v in lms)

    return Oklab(*apply_matrix(M2_OKLAB, l_, m_, s_))

def oklab_to_rgb(lab: Oklab, alpha: float = 1.0) -> RGB:
    """
    Convert Oklab to sRGB.

    Args:
        lab: Oklab record
        alpha: Opacity carried over unchanged apart from clamping to [0, 1]

    Returns:
        RGB: channels clamped to [0, 1] then scaled to [0, 255]
    """
    l_, m_, s_ = apply_matrix(M2_INV_OKLAB, lab.l, lab.a, lab.b)
    l, m, s = l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_

    r_lin, g_lin, b_lin = apply_matrix(M1_INV_OKLAB, l, m, s)

    return RGB(
        clamp_channel(linear_to_srgb(r_lin)) * RGB_MAX,
        clamp_channel(linear_to_srgb(g_lin)) * RGB_MAX,
        clamp_channel(linear_to_srgb(b_lin)) * RGB_MAX,
        clamp01(alpha),
    )

## Oklab <-> Oklch

def oklab_to_oklch(lab: Oklab, alpha: float = 1.0) -> Oklch:
    """Convert Oklab to its polar form. Near-gray colors get hue 0."""
    c = math.hypot(lab.a, lab.b)
    if c < CHROMA_EPSILON:
        h = 0.0
    else:
        h = normalize_hue(math.degrees(math.atan2(lab.b, lab.a)))
    return Oklch(lab.l, c, h, clamp01(alpha))

def oklch_to_oklab(lch: Oklch) -> Oklab:
    """Convert Oklch to Oklab. Alpha is not part of Oklab and is dropped."""
    hr = math.radians(lch.h)
    return Oklab(lch.l, lch.c * math.cos(hr), lch.c * math.sin(hr))

## Vectorized

def np_rgb_to_oklab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert sRGB to Oklab.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        oklab: array of shape (..., 3)
    """
    r = np_srgb_to_linear(np_clamp01(np.asarray(r, dtype=float) / RGB_MAX))
    g = np_srgb_to_linear(np_clamp01(np.asarray(g, dtype=float) / RGB_MAX))
    b = np_srgb_to_linear(np_clamp01(np.asarray(b, dtype=float) / RGB_MAX))

    lms = np.cbrt(np_apply_matrix(M1_OKLAB, r, g, b))
    return np_apply_matrix(M2_OKLAB, lms[..., 0], lms[..., 1], lms[..., 2])

def np_oklab_to_rgb(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert Oklab to sRGB.

    Returns:
        rgb: array of shape (..., 3) with channels in [0, 255]
    """
    lms_ = np_apply_matrix(M2_INV_OKLAB, l, a, b)
    lms = lms_ ** 3
    lin = np_apply_matrix(M1_INV_OKLAB, lms[..., 0], lms[..., 1], lms[..., 2])
    return np_clamp01(np.nan_to_num(np_linear_to_srgb(lin), nan=0.0)) * RGB_MAX

def np_oklab_to_oklch(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert Oklab to Oklch, returns shape (..., 3)."""
    l = np.asarray(l, dtype=float)
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    l, a, b = np.broadcast_arrays(l, a, b)

    c = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a)) % 360
    h = np.where((c < CHROMA_EPSILON) | (h >= 360), 0.0, h)
    return np.stack([l, c, h], axis=-1)

def np_oklch_to_oklab(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """Vectorized: Convert Oklch to Oklab, returns shape (..., 3)."""
    l = np.asarray(l, dtype=float)
    c = np.asarray(c, dtype=float)
    hr = np.radians(np.asarray(h, dtype=float))
    l, c, hr = np.broadcast_arrays(l, c, hr)
    return np.stack([l, c * np.cos(hr), c * np.sin(hr)], axis=-1)
