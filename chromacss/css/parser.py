"""
Parsers for the supported CSS color notations.

Each ``parse_*`` function takes stripped text and returns a value record, or
``None`` when the text is not that notation. ``parse_color`` chains them in
``PARSE_ORDER`` and only raises once every format has been tried.
"""
from __future__ import annotations

import re
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from boundednumbers import clamp01

from ..colors.color import ColorValue
from ..exceptions import ColorParseError
from ..types.color_types import RGB, HSL, Oklch, P3, ColorRecord
from ..types.format_type import CssFormat, PARSE_ORDER, RGB_MAX, PERCENT, format_spaces
from .tokens import parse_number, parse_percentage, parse_number_255, parse_alpha, parse_hue

HEX_RE = re.compile(r"#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")
FUNCTION_RE = re.compile(r"([a-zA-Z-]+)\((.*)\)", re.DOTALL)


class FunctionArgs(NamedTuple):
    """Parameter list of a functional notation, split but not yet parsed."""
    name: str
    tokens: List[str]
    alpha: Optional[str]  # token after "/", if any
    comma_separated: bool


def split_function(text: str, names: set[str], allow_commas: bool = True) -> Optional[FunctionArgs]:
    """
    Split ``name(params)`` into positional tokens and an optional ``/`` alpha.

    Parameters are either all comma-separated or all whitespace-separated; a
    mixed list leaves a token with inner whitespace, which no token parser
    accepts.
    """
    m = FUNCTION_RE.fullmatch(text)
    if not m or m.group(1).lower() not in names:
        return None

    body = m.group(2).strip()
    if not body:
        return None

    parts = body.split("/")
    if len(parts) > 2:
        return None
    left = parts[0].strip()
    alpha = parts[1].strip() if len(parts) == 2 else None
    if alpha == "":
        return None

    comma_separated = "," in left
    if comma_separated:
        if not allow_commas:
            return None
        tokens = [t.strip() for t in left.split(",")]
    else:
        tokens = left.split()

    if not tokens or any(not t for t in tokens):
        return None
    return FunctionArgs(m.group(1).lower(), tokens, alpha, comma_separated)


def _channels(args: FunctionArgs, count: int) -> Optional[Tuple[List[str], Optional[str]]]:
    """Pick ``count`` channel tokens plus the alpha token.

    Only the legacy comma form may carry alpha as a trailing positional token.
    """
    tokens = args.tokens
    if args.alpha is not None:
        return (tokens, args.alpha) if len(tokens) == count else None
    if len(tokens) == count:
        return tokens, None
    if args.comma_separated and len(tokens) == count + 1:
        return tokens[:count], tokens[count]
    return None


def _alpha_or_opaque(token: Optional[str]) -> Optional[float]:
    return 1.0 if token is None else parse_alpha(token)


## Hex

def parse_hex(text: str) -> Optional[RGB]:
    """``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``."""
    m = HEX_RE.fullmatch(text)
    if not m:
        return None
    h = m.group(1)
    if len(h) in (3, 4):
        h = "".join(ch + ch for ch in h)

    r = int(h[0:2], 16)
    g = int(h[2:4], 16)
    b = int(h[4:6], 16)
    a = int(h[6:8], 16) if len(h) == 8 else RGB_MAX
    return RGB(r, g, b, a / RGB_MAX)

## rgb() / rgba()

def parse_rgb(text: str) -> Optional[RGB]:
    """``rgb(R G B [/ A])``, ``rgb(R, G, B)`` or ``rgba(R, G, B, A)``."""
    args = split_function(text, {"rgb", "rgba"})
    if args is None:
        return None
    picked = _channels(args, 3)
    if picked is None:
        return None
    channels, alpha_token = picked

    values = [parse_number_255(t) for t in channels]
    a = _alpha_or_opaque(alpha_token)
    if any(v is None for v in values) or a is None:
        return None
    return RGB(*values, a)

## hsl() / hsla()

def parse_hsl(text: str) -> Optional[HSL]:
    """``hsl(H S% L% [/ A])`` or the comma forms ``hsl(H, S%, L%)`` / ``hsla(H, S%, L%, A)``."""
    args = split_function(text, {"hsl", "hsla"})
    if args is None:
        return None
    picked = _channels(args, 3)
    if picked is None:
        return None
    (h_tok, s_tok, l_tok), alpha_token = picked

    h = parse_hue(h_tok)
    s = parse_percentage(s_tok)
    l = parse_percentage(l_tok)
    a = _alpha_or_opaque(alpha_token)
    if h is None or s is None or l is None or a is None:
        return None
    return HSL(h, s, l, a)

## oklch()

def _parse_oklch_lightness(token: str) -> Optional[float]:
    if token.endswith("%"):
        p = parse_percentage(token)
        return None if p is None else clamp01(p / PERCENT)
    n = parse_number(token)
    return None if n is None else clamp01(n)

def _parse_chroma(token: str) -> Optional[float]:
    c = parse_number(token)
    if c is None or c < 0:
        return None
    return c

def parse_oklch(text: str) -> Optional[Oklch]:
    """``oklch(L C H [/ A])`` with whitespace-separated components.

    L is a number or percentage clamped to [0, 1]. A negative chroma is
    rejected rather than clamped.
    """
    args = split_function(text, {"oklch"}, allow_commas=False)
    if args is None or len(args.tokens) != 3:
        return None
    l_tok, c_tok, h_tok = args.tokens

    l = _parse_oklch_lightness(l_tok)
    c = _parse_chroma(c_tok)
    h = parse_hue(h_tok)
    a = _alpha_or_opaque(args.alpha)
    if l is None or c is None or h is None or a is None:
        return None
    return Oklch(l, c, h, a)

## color(display-p3 ...)

def parse_p3(text: str) -> Optional[P3]:
    """``color(display-p3 R G B [/ A])`` with bare numbers only."""
    args = split_function(text, {"color"}, allow_commas=False)
    if args is None or len(args.tokens) != 4:
        return None
    space, *channels = args.tokens
    if space.lower() != "display-p3":
        return None

    values = [parse_number(t) for t in channels]
    a = _alpha_or_opaque(args.alpha)
    if any(v is None for v in values) or a is None:
        return None
    return P3(*values, a)


FORMAT_PARSERS: Dict[CssFormat, Callable[[str], Optional[ColorRecord]]] = {
    CssFormat.OKLCH: parse_oklch,
    CssFormat.HEX: parse_hex,
    CssFormat.RGB: parse_rgb,
    CssFormat.HSL: parse_hsl,
    CssFormat.P3: parse_p3,
}

# a declared format also accepts the notations that share its representation
DECLARED_FORMATS: Dict[CssFormat, Tuple[CssFormat, ...]] = {
    CssFormat.RGB: (CssFormat.HEX, CssFormat.RGB),
    CssFormat.HEX: (CssFormat.HEX,),
    CssFormat.HSL: (CssFormat.HSL,),
    CssFormat.OKLCH: (CssFormat.OKLCH,),
    CssFormat.P3: (CssFormat.P3,),
}


def parse_color(text: str, fmt: CssFormat | str | None = None) -> ColorValue:
    """
    Parse CSS color text into a lazily converting ``ColorValue``.

    Args:
        text: Hex, ``rgb()``/``rgba()``, ``hsl()``/``hsla()``, ``oklch()`` or
            ``color(display-p3 ...)``; surrounding whitespace is ignored
        fmt: Optional declared notation. Only that notation is tried.

    Returns:
        ColorValue holding the parsed representation. Hex input is tagged for
        ``rgb()`` output.

    Raises:
        ColorParseError: if no supported notation matches
        ValueError: if ``fmt`` is not a known notation
    """
    stripped = text.strip()
    formats = PARSE_ORDER if fmt is None else DECLARED_FORMATS[CssFormat(fmt)]

    for candidate in formats:
        record = FORMAT_PARSERS[candidate](stripped)
        if record is not None:
            preferred = CssFormat.RGB if candidate == CssFormat.HEX else candidate
            return ColorValue(**{format_spaces[candidate]: record}, preferred=preferred)

    raise ColorParseError(text)
