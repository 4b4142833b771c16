"""Fixed 3x3 matrices used by the Oklab and Display-P3 transforms.

Rows are output channels. The coefficients are the published reference values
and must stay exactly as written.
"""
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

Matrix3 = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]

# linear sRGB -> LMS
M1_OKLAB: Matrix3 = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)
# cube-rooted LMS -> Oklab
M2_OKLAB: Matrix3 = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)
# Oklab -> cube-rooted LMS
M2_INV_OKLAB: Matrix3 = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)
# LMS -> linear sRGB
M1_INV_OKLAB: Matrix3 = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# linear Display-P3 -> linear sRGB
M_P3_TO_SRGB: Matrix3 = (
    (1.2249401761, -0.2247460786, 0.0),
    (-0.0420569548, 1.0419018569, 0.0),
    (-0.0196378544, -0.0786361379, 1.0979486377),
)
# linear sRGB -> linear Display-P3
M_SRGB_TO_P3: Matrix3 = (
    (0.8224621186, 0.1775378814, 0.0),
    (0.0331941748, 0.9668058252, 0.0),
    (0.0170827216, 0.0723974418, 0.9108000000),
)


def apply_matrix(m: Matrix3, x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Multiply a 3-vector by ``m``, summing each row left to right."""
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )

def np_apply_matrix(m: Matrix3, x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """Vectorized: apply ``m`` to broadcast channel arrays, returns shape (..., 3)."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    z = np.asarray(z, dtype=float)
    return np.stack([
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    ], axis=-1)
