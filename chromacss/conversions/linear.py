import math

import numpy as np
from numpy import ndarray as NDArray

# sRGB transfer function breakpoints
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308


def srgb_to_linear(u: float) -> float:
    """Convert gamma-encoded sRGB (nominally 0..1) to linear light.

    Values outside [0, 1] are extrapolated, not rejected. Results too large
    for a float come back as ``inf``.
    """
    if u <= SRGB_TO_LINEAR_TH:
        return u / 12.92
    try:
        return ((u + 0.055) / 1.055) ** 2.4
    except OverflowError:
        return math.inf

def linear_to_srgb(u: float) -> float:
    """Convert linear-light RGB to gamma-encoded sRGB."""
    if u <= LINEAR_TO_SRGB_TH:
        return 12.92 * u
    try:
        return 1.055 * (u ** (1/2.4)) - 0.055
    except OverflowError:
        return math.inf

def np_srgb_to_linear(u: NDArray) -> NDArray:
    """Vectorized: Convert gamma-encoded sRGB to linear light."""
    u = np.asarray(u, dtype=float)
    # the power branch only ever sees values above the threshold
    safe = np.maximum(u, SRGB_TO_LINEAR_TH)
    return np.where(
        u <= SRGB_TO_LINEAR_TH,
        u / 12.92,
        ((safe + 0.055) / 1.055) ** 2.4
    )

def np_linear_to_srgb(u: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB to gamma-encoded sRGB."""
    u = np.asarray(u, dtype=float)
    safe = np.maximum(u, LINEAR_TO_SRGB_TH)
    return np.where(
        u <= LINEAR_TO_SRGB_TH,
        12.92 * u,
        1.055 * (safe ** (1/2.4)) - 0.055
    )
