"""Parsers for single CSS parameter tokens.

Every function returns ``None`` for a malformed token instead of raising, so
the format parsers can fall through to the next notation.
"""
import math
import re
from typing import Optional

from boundednumbers import clamp01

from ..conversions.numbers import normalize_hue
from ..types.format_type import RGB_MAX, PERCENT

# CSS <number>: optional sign, digits with optional fraction, optional exponent
NUM = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?"

NUMBER_RE = re.compile(NUM)
PERCENT_RE = re.compile(f"({NUM})%")
ANGLE_RE = re.compile(f"({NUM})(deg|rad|grad|turn)?", re.IGNORECASE)

# multiplier taking each unit to degrees
ANGLE_UNITS = {
    "deg": 1.0,
    "rad": 180 / math.pi,
    "grad": 0.9,
    "turn": 360.0,
}


def _finite(text: str) -> Optional[float]:
    value = float(text)
    return value if math.isfinite(value) else None


def parse_number(token: str) -> Optional[float]:
    """Bare CSS number, e.g. ``0.5`` or ``-1e2``."""
    if not NUMBER_RE.fullmatch(token):
        return None
    return _finite(token)

def parse_percentage(token: str) -> Optional[float]:
    """Numeric value of an ``N%`` token, unclamped (``50%`` -> 50.0)."""
    m = PERCENT_RE.fullmatch(token)
    if not m:
        return None
    return _finite(m.group(1))

def parse_number_255(token: str) -> Optional[float]:
    """RGB channel: a bare number as-is, or a percentage of 255."""
    if token.endswith("%"):
        p = parse_percentage(token)
        return None if p is None else p / PERCENT * RGB_MAX
    return parse_number(token)

def parse_alpha(token: str) -> Optional[float]:
    """Alpha: a bare number or a percentage, clamped to [0, 1]."""
    if token.endswith("%"):
        p = parse_percentage(token)
        return None if p is None else clamp01(p / PERCENT)
    n = parse_number(token)
    return None if n is None else clamp01(n)

def parse_hue(token: str) -> Optional[float]:
    """
    Parse an angle with an optional unit and normalize it to degrees in [0, 360).

    Args:
        token: e.g. ``120``, ``-30deg``, ``1.5rad``, ``100grad``, ``0.25turn``

    Returns:
        Hue in degrees, or None when the token is not an angle
    """
    m = ANGLE_RE.fullmatch(token)
    if not m:
        return None
    value = _finite(m.group(1))
    if value is None:
        return None
    unit = (m.group(2) or "deg").lower()
    degrees = value * ANGLE_UNITS[unit]
    if not math.isfinite(degrees):
        return None
    return normalize_hue(degrees)
