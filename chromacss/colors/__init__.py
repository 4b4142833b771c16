"""
chromacss Color Values
======================

``ColorValue`` holds one color in whichever representation it was created
from (RGB, HSL, Oklch or Display-P3) and derives the others lazily.

Usage
-----
>>> from chromacss.colors import ColorValue
>>>
>>> color = ColorValue.from_oklch(0.7, 0.1, 30)
>>> color.materialized          # frozenset({'oklch'})
>>> color.to_hex()              # computes and caches Oklab and RGB
>>> color.to_css()              # 'oklch(70% 0.1 30)'
>>> color.to_css("hsl")         # same color in another notation
>>> color.with_alpha(0.5).to_css()
"""

from .color import ColorValue

__all__ = ["ColorValue"]
