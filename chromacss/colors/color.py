from __future__ import annotations
import warnings
from typing import Optional, Self

from boundednumbers import clamp01

from ..conversions.to_hsl import rgb_to_hsl, hsl_to_rgb
from ..conversions.to_oklab import rgb_to_oklab, oklab_to_rgb, oklab_to_oklch, oklch_to_oklab
from ..conversions.to_p3 import rgb_to_p3, p3_to_rgb
from ..css.formatter import format_css, format_hex
from ..types.color_types import RGB, HSL, Oklab, Oklch, P3, ColorRecord, ColorSpace, COLOR_SPACES
from ..types.format_type import CssFormat, format_spaces

# representations a caller may supply; Oklab is only ever a cached intermediate
NATIVE_SPACES = ("rgb", "oklch", "hsl", "p3")

default_formats = {
    "rgb": CssFormat.RGB,
    "oklch": CssFormat.OKLCH,
    "hsl": CssFormat.HSL,
    "p3": CssFormat.P3,
}


class ColorValue:
    """
    A color that holds whichever representation it was built from and
    computes the others on first request.

    Derived representations come from the transform functions and are cached
    for the lifetime of the instance. Accessors return fresh record instances.
    The instance is frozen after ``__init__``; only the cache is filled later.

    The cache is not synchronized. Concurrent first access from several
    threads can compute the same derivation twice, which yields identical
    records.
    """
    __slots__ = ('_rgb', '_hsl', '_oklab', '_oklch', '_p3', '_preferred', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        *,
        rgb: Optional[RGB] = None,
        hsl: Optional[HSL] = None,
        oklch: Optional[Oklch] = None,
        p3: Optional[P3] = None,
        preferred: CssFormat | str | None = None,
    ) -> None:
        supplied = {
            space: record
            for space, record in (("rgb", rgb), ("oklch", oklch), ("hsl", hsl), ("p3", p3))
            if record is not None
        }
        if not supplied:
            raise ValueError("ColorValue needs at least one of rgb, hsl, oklch or p3")
        if len(supplied) > 1:
            warnings.warn(
                f"ColorValue built from {', '.join(supplied)}; "
                "consistency between supplied representations is not checked",
                UserWarning,
                stacklevel=2,
            )

        self._rgb = RGB(*rgb) if rgb is not None else None
        self._hsl = HSL(*hsl) if hsl is not None else None
        self._oklch = Oklch(*oklch) if oklch is not None else None
        self._p3 = P3(*p3) if p3 is not None else None
        self._oklab = None

        if preferred is None:
            preferred = default_formats[next(iter(supplied))]
        self._preferred = CssFormat(preferred)

        # freeze instance; the cache is filled through _store
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: float = 1.0) -> Self:
        return cls(rgb=RGB(r, g, b, a))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> Self:
        return cls(hsl=HSL(h, s, l, a))

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float, a: float = 1.0) -> Self:
        return cls(oklch=Oklch(l, c, h, a))

    @classmethod
    def from_p3(cls, r: float, g: float, b: float, a: float = 1.0) -> Self:
        return cls(p3=P3(r, g, b, a))

    # ------------------ CACHE ------------------
    def _store(self, name: str, record: ColorRecord) -> ColorRecord:
        object.__setattr__(self, name, record)
        return record

    def _get_rgb(self) -> RGB:
        if self._rgb is not None:
            return self._rgb
        if self._oklch is not None:
            return self._store('_rgb', oklab_to_rgb(self._get_oklab(), self._oklch.a))
        if self._hsl is not None:
            return self._store('_rgb', hsl_to_rgb(self._hsl))
        if self._p3 is not None:
            return self._store('_rgb', p3_to_rgb(self._p3))
        raise RuntimeError("ColorValue has no representation to derive RGB from")

    def _get_oklab(self) -> Oklab:
        if self._oklab is not None:
            return self._oklab
        if self._oklch is not None:
            return self._store('_oklab', oklch_to_oklab(self._oklch))
        return self._store('_oklab', rgb_to_oklab(self._get_rgb()))

    def _get_oklch(self) -> Oklch:
        if self._oklch is not None:
            return self._oklch
        return self._store('_oklch', oklab_to_oklch(self._get_oklab(), self._get_rgb().a))

    def _get_hsl(self) -> HSL:
        if self._hsl is not None:
            return self._hsl
        return self._store('_hsl', rgb_to_hsl(self._get_rgb()))

    def _get_p3(self) -> P3:
        if self._p3 is not None:
            return self._p3
        return self._store('_p3', rgb_to_p3(self._get_rgb()))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def preferred(self) -> CssFormat:
        """Notation ``to_css`` renders by default."""
        return self._preferred

    @property
    def materialized(self) -> frozenset[str]:
        """Spaces computed or supplied so far."""
        return frozenset(
            space for space in COLOR_SPACES
            if getattr(self, f'_{space}') is not None
        )

    @property
    def alpha(self) -> float:
        return self._native()[1].a

    def _native(self) -> tuple[str, ColorRecord]:
        """The representation alpha edits apply to: the preferred one if held, else the first held."""
        preferred_space = format_spaces[self._preferred]
        if getattr(self, f'_{preferred_space}') is not None:
            return preferred_space, getattr(self, f'_{preferred_space}')
        for space in NATIVE_SPACES:
            record = getattr(self, f'_{space}')
            if record is not None:
                return space, record
        raise RuntimeError("ColorValue has no representation")

    # ------------------ ACCESSORS ------------------
    def to_rgb(self) -> RGB:
        return RGB(*self._get_rgb())

    def to_hex(self) -> str:
        return format_hex(self._get_rgb())

    def to_oklab(self) -> Oklab:
        return Oklab(*self._get_oklab())

    def to_oklch(self) -> Oklch:
        return Oklch(*self._get_oklch())

    def to_hsl(self) -> HSL:
        return HSL(*self._get_hsl())

    def to_p3(self) -> P3:
        return P3(*self._get_p3())

    def convert(self, space: ColorSpace) -> ColorRecord:
        """Return the representation for ``space`` ("rgb", "hsl", "oklab", "oklch", "p3")."""
        space = space.lower()
        if space not in COLOR_SPACES:
            raise ValueError(f"Unknown space: {space}")
        return getattr(self, f'to_{space}')()

    def to_css(self, fmt: CssFormat | str | None = None) -> str:
        """
        Render as CSS text.

        Args:
            fmt: Notation to render in. Defaults to the notation the value was
                parsed from (or built in).

        Returns:
            str: e.g. ``oklch(70% 0.1 30)`` or ``rgb(255 0 0 / 0.5)``
        """
        fmt = self._preferred if fmt is None else CssFormat(fmt)
        return format_css(self.convert(format_spaces[fmt]), fmt)

    def with_alpha(self, alpha: float) -> Self:
        """
        Return a new color with the alpha of its native representation replaced.

        Args:
            alpha: New opacity, clamped to [0, 1]

        Returns:
            New ColorValue with the same preferred notation.
        """
        space, record = self._native()
        return self.__class__(**{space: record._replace(a=clamp01(alpha))}, preferred=self._preferred)

    def __str__(self) -> str:
        return self.to_css()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_css()!r})"
