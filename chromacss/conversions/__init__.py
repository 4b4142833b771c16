"""
chromacss Color Space Conversions
=================================

Numeric transforms between sRGB, HSL, Oklab, Oklch and Display-P3, each in a
scalar form working on value records and a vectorized numpy form working on
channel arrays.

Conversion Functions
-------------------

Linear light:
    srgb_to_linear(u) / linear_to_srgb(u)
        sRGB transfer function decode / encode
    np_srgb_to_linear(u) / np_linear_to_srgb(u)
        Vectorized versions

RGB <-> Oklab <-> Oklch:
    rgb_to_oklab(rgb), oklab_to_rgb(lab, alpha)
    oklab_to_oklch(lab, alpha), oklch_to_oklab(lch)
    np_rgb_to_oklab(r, g, b), np_oklab_to_rgb(l, a, b)
    np_oklab_to_oklch(l, a, b), np_oklch_to_oklab(l, c, h)

RGB <-> Display-P3:
    p3_to_rgb(p3), rgb_to_p3(rgb)
    np_p3_to_rgb(r, g, b), np_rgb_to_p3(r, g, b)

RGB <-> HSL:
    rgb_to_hsl(rgb), hsl_to_rgb(hsl)
    np_rgb_to_hsl(r, g, b), np_hsl_to_rgb(h, s, l)

High-Level API
-------------
    convert(color, from_space, to_space)
        Record converter routed through RGB
    np_convert(color, from_space, to_space)
        Vectorized converter for (..., 3) or (..., 4) arrays

Examples
--------
>>> from chromacss.conversions import rgb_to_oklab, oklab_to_oklch
>>> from chromacss.types.color_types import RGB
>>>
>>> lab = rgb_to_oklab(RGB(255, 0, 0))
>>> oklab_to_oklch(lab)
Oklch(l=0.627955..., c=0.257683..., h=29.2338..., a=1.0)
>>>
>>> import numpy as np
>>> from chromacss.conversions import np_convert
>>> np_convert(np.array([[255, 0, 0], [0, 0, 255]]), "rgb", "hsl")
"""

from .linear import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)

from .to_oklab import (
    rgb_to_oklab,
    oklab_to_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    np_rgb_to_oklab,
    np_oklab_to_rgb,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
)

from .to_p3 import (
    p3_to_rgb,
    rgb_to_p3,
    np_p3_to_rgb,
    np_rgb_to_p3,
)

from .to_hsl import (
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
)

from .numbers import normalize_hue, round_half_up

# High-level API
from .wrapper import convert, np_convert

__all__ = [
    # Linear light
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # Oklab / Oklch
    'rgb_to_oklab',
    'oklab_to_rgb',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'np_rgb_to_oklab',
    'np_oklab_to_rgb',
    'np_oklab_to_oklch',
    'np_oklch_to_oklab',

    # Display-P3
    'p3_to_rgb',
    'rgb_to_p3',
    'np_p3_to_rgb',
    'np_rgb_to_p3',

    # HSL
    'rgb_to_hsl',
    'hsl_to_rgb',
    'np_rgb_to_hsl',
    'np_hsl_to_rgb',

    # Helpers
    'normalize_hue',
    'round_half_up',

    # High-level API
    'convert',
    'np_convert',
]
