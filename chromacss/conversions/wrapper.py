import warnings
from typing import Callable, Dict, Tuple

import numpy as np

from ..types.color_types import (
    RGB, Oklab, Oklch, ColorRecord, ColorSpace, COLOR_SPACES, record_classes,
)
from .to_hsl import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
from .to_oklab import (
    rgb_to_oklab, oklab_to_rgb, oklab_to_oklch, oklch_to_oklab,
    np_rgb_to_oklab, np_oklab_to_rgb, np_oklab_to_oklch, np_oklch_to_oklab,
)
from .to_p3 import p3_to_rgb, rgb_to_p3, np_p3_to_rgb, np_rgb_to_p3

# Every route goes through RGB unless a direct conversion exists.
TO_RGB: Dict[str, Callable[..., RGB]] = {
    "rgb": lambda rgb: rgb,
    "hsl": hsl_to_rgb,
    "oklab": oklab_to_rgb,
    "oklch": lambda lch: oklab_to_rgb(oklch_to_oklab(lch), lch.a),
    "p3": p3_to_rgb,
}

FROM_RGB: Dict[str, Callable[[RGB], ColorRecord]] = {
    "rgb": lambda rgb: rgb,
    "hsl": rgb_to_hsl,
    "oklab": rgb_to_oklab,
    "oklch": lambda rgb: oklab_to_oklch(rgb_to_oklab(rgb), rgb.a),
    "p3": rgb_to_p3,
}

CONVERT_DIRECT: Dict[Tuple[str, str], Callable[..., ColorRecord]] = {
    ("oklab", "oklch"): oklab_to_oklch,
    ("oklch", "oklab"): oklch_to_oklab,
}

NpConversion = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]

NP_TO_RGB: Dict[str, NpConversion] = {
    "hsl": np_hsl_to_rgb,
    "oklab": np_oklab_to_rgb,
    "oklch": lambda l, c, h: np_oklab_to_rgb(*_unstack(np_oklch_to_oklab(l, c, h))),
    "p3": np_p3_to_rgb,
}

NP_FROM_RGB: Dict[str, NpConversion] = {
    "hsl": np_rgb_to_hsl,
    "oklab": np_rgb_to_oklab,
    "oklch": lambda r, g, b: np_oklab_to_oklch(*_unstack(np_rgb_to_oklab(r, g, b))),
    "p3": np_rgb_to_p3,
}

NP_CONVERT_DIRECT: Dict[Tuple[str, str], NpConversion] = {
    ("oklab", "oklch"): np_oklab_to_oklch,
    ("oklch", "oklab"): np_oklch_to_oklab,
}


def _unstack(arr: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    return arr[..., 0], arr[..., 1], arr[..., 2]

def _check_space(space: str) -> str:
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space


def convert(
    color: ColorRecord | tuple,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ColorRecord:
    """
    Convert a single color record between spaces.

    Plain tuples are accepted and read as a record of ``from_space``. Oklab
    carries no alpha: converting out of it yields an opaque color, and
    converting into it drops alpha.

    Args:
        color: Record (or tuple) in ``from_space``
        from_space: Source space ("rgb", "hsl", "oklab", "oklch", "p3")
        to_space: Target space

    Returns:
        Record of the ``to_space`` type
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    record = record_classes[fs](*color)

    if fs == ts:
        return record

    key = (fs, ts)
    if key in CONVERT_DIRECT:
        return CONVERT_DIRECT[key](record)

    return FROM_RGB[ts](TO_RGB[fs](record))


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """
    Vectorized: convert an array of colors with shape (..., 3) or (..., 4).

    A fourth channel is treated as alpha and passed through unchanged.
    Channel scales follow the records: RGB in [0, 255], HSL s/l in [0, 100],
    P3 in [0, 1].
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    color = np.asarray(color, dtype=float)

    if color.shape[-1] not in (3, 4):
        raise ValueError(f"Expected last dimension 3 or 4, got shape {color.shape}")

    if not np.all(np.isfinite(color)):
        warnings.warn(
            "np_convert received non-finite channel values; results for those colors are undefined",
            RuntimeWarning,
            stacklevel=2,
        )

    base = color[..., :3]
    alpha = color[..., 3:] if color.shape[-1] == 4 else None

    if fs == ts:
        converted = base.copy()
    elif (fs, ts) in NP_CONVERT_DIRECT:
        converted = NP_CONVERT_DIRECT[(fs, ts)](*_unstack(base))
    else:
        rgb = base if fs == "rgb" else NP_TO_RGB[fs](*_unstack(base))
        converted = rgb if ts == "rgb" else NP_FROM_RGB[ts](*_unstack(rgb))

    if alpha is not None:
        return np.concatenate([converted, alpha], axis=-1)
    return converted
