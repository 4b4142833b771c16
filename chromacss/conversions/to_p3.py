import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.np_functions import clamp01 as np_clamp01

from ..types.color_types import RGB, P3
from ..types.format_type import RGB_MAX
from .linear import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
from .matrices import M_P3_TO_SRGB, M_SRGB_TO_P3, apply_matrix, np_apply_matrix
from .numbers import clamp_channel


def p3_to_rgb(p3: P3) -> RGB:
    """
    Convert Display-P3 to sRGB.

    Display-P3 shares the sRGB transfer curve, so both ends use the same
    linear-light transform. Colors outside the sRGB gamut are clamped per
    channel.

    Args:
        p3: P3 record with channels in [0, 1]

    Returns:
        RGB: channels in [0, 255]
    """
    r_lin, g_lin, b_lin = apply_matrix(
        M_P3_TO_SRGB,
        srgb_to_linear(p3.r),
        srgb_to_linear(p3.g),
        srgb_to_linear(p3.b),
    )
    return RGB(
        clamp_channel(linear_to_srgb(r_lin)) * RGB_MAX,
        clamp_channel(linear_to_srgb(g_lin)) * RGB_MAX,
        clamp_channel(linear_to_srgb(b_lin)) * RGB_MAX,
        p3.a,
    )

def rgb_to_p3(rgb: RGB) -> P3:
    """
    Convert sRGB to Display-P3.

    The result is not clamped: sRGB sits almost entirely inside P3, and values
    a hair outside [0, 1] only show up for channels at the gamut boundary.

    Args:
        rgb: RGB record with channels in [0, 255]

    Returns:
        P3: channels in the [0, 1] scale
    """
    r_lin, g_lin, b_lin = apply_matrix(
        M_SRGB_TO_P3,
        srgb_to_linear(rgb.r / RGB_MAX),
        srgb_to_linear(rgb.g / RGB_MAX),
        srgb_to_linear(rgb.b / RGB_MAX),
    )
    return P3(
        linear_to_srgb(r_lin),
        linear_to_srgb(g_lin),
        linear_to_srgb(b_lin),
        rgb.a,
    )

def np_p3_to_rgb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert Display-P3 (0..1) to sRGB (0..255), shape (..., 3)."""
    lin = np_apply_matrix(
        M_P3_TO_SRGB,
        np_srgb_to_linear(r),
        np_srgb_to_linear(g),
        np_srgb_to_linear(b),
    )
    return np_clamp01(np.nan_to_num(np_linear_to_srgb(lin), nan=0.0)) * RGB_MAX

def np_rgb_to_p3(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert sRGB (0..255) to unclamped Display-P3, shape (..., 3)."""
    lin = np_apply_matrix(
        M_SRGB_TO_P3,
        np_srgb_to_linear(np.asarray(r, dtype=float) / RGB_MAX),
        np_srgb_to_linear(np.asarray(g, dtype=float) / RGB_MAX),
        np_srgb_to_linear(np.asarray(b, dtype=float) / RGB_MAX),
    )
    return np_linear_to_srgb(lin)
