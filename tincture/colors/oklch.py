from __future__ import annotations
import re
from typing import ClassVar, Tuple

from ..errors import (
    InvalidComponentCountError,
    InvalidComponentValueError,
    OutOfRangeValueError,
    UnknownColorFormatError,
)
from ..hashing import DEFAULT_HASH_FUNCTION, HashFunction, get_hash_function
from ..types.color_types import ColorSpace
from ..units import CHROMA_MAX, HUE_360, Chroma, Hue, UnitFloat
from .color_base import ColorBase

_OKLCH_WRAPPER_RE = re.compile(r"^oklch\s*\(\s*|\s*\)$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")

# saturate() never pushes chroma past this (roughly the sRGB gamut edge)
SATURATE_LIMIT = 0.4


class OKLCH(ColorBase):
    """
    OKLCH: perceptual lightness ``[0, 1]``, chroma ``[0, 0.5]``, hue in degrees.

    Examples:
        >>> OKLCH.parse("oklch(0.628 0.2577 29.23)").to_rgb().to_hex()
        '#ff0000'
    """
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "oklch"
    channels:      ClassVar[Tuple[str, str, str]] = ("lightness", "chroma", "hue")
    channel_types: ClassVar[Tuple[type, type, type]] = (UnitFloat, Chroma, Hue)
    hue_index:     ClassVar[int] = 2

    @property
    def lightness(self) -> UnitFloat:
        return self._value[0]

    @property
    def chroma(self) -> Chroma:
        return self._value[1]

    @property
    def hue(self) -> Hue:
        return self._value[2]

    # ------------------ PARSING ------------------
    @classmethod
    def parse(cls, text: str) -> "OKLCH":
        """Parse ``oklch(l c h)`` with space separated, non-negative numbers."""
        if not isinstance(text, str):
            raise UnknownColorFormatError("Input must be a string", "oklch")
        inner = _OKLCH_WRAPPER_RE.sub("", text.strip()).strip()
        parts = inner.split()
        if len(parts) != 3:
            raise InvalidComponentCountError("oklch", 3, len(parts))

        for name, part in zip(cls.channels, parts):
            if not _NUMBER_RE.match(part):
                raise InvalidComponentValueError("oklch", name, part)
        l, c, h = (float(p) for p in parts)

        if not 0 <= l <= 1:
            raise OutOfRangeValueError("oklch", "lightness", l, 0, 1)
        if not 0 <= c <= CHROMA_MAX:
            raise OutOfRangeValueError("oklch", "chroma", c, 0, CHROMA_MAX)
        if not 0 <= h < HUE_360:
            raise OutOfRangeValueError("oklch", "hue", h, 0, HUE_360)
        return cls(l, c, h)

    @classmethod
    def derive(cls, seed: int, lightness: float = 0.58,
               chroma_range: Tuple[float, float] = (0.10, 0.18),
               hue_spread: int = 997, hue_base: float = 137.508) -> "OKLCH":
        """
        Build a color from an integer seed (usually a string hash).

        Hue walks the golden angle (``hue_base``) ``seed % hue_spread``
        times; the second byte of the seed picks chroma inside
        ``chroma_range``. Lightness is fixed so derived colors share a tone.
        """
        if not isinstance(seed, int) or isinstance(seed, bool):
            raise TypeError("Seed must be an integer")
        h32 = seed & 0xFFFFFFFF
        hue = (hue_base * (h32 % hue_spread)) % HUE_360
        low, high = chroma_range
        chroma = low + ((h32 >> 8) & 0xFF) / 255.0 * (high - low)
        return cls(lightness, chroma, hue)

    @classmethod
    def from_string(cls, text: str, hash_function: str | HashFunction = DEFAULT_HASH_FUNCTION,
                    **options) -> "OKLCH":
        return cls.derive(get_hash_function(hash_function)(text), **options)

    # ------------------ OPERATIONS ------------------
    def lighten(self, amount: float = 0.1) -> "OKLCH":
        amount = self._amount(amount)
        l = self.lightness.value
        return self.replace(lightness=l + amount * (1 - l))

    def darken(self, amount: float = 0.1) -> "OKLCH":
        amount = self._amount(amount)
        return self.replace(lightness=self.lightness.value * (1 - amount))

    def saturate(self, amount: float = 0.02) -> "OKLCH":
        return self.replace(chroma=min(self.chroma.value + amount, SATURATE_LIMIT))

    def desaturate(self, amount: float = 0.02) -> "OKLCH":
        return self.replace(chroma=max(self.chroma.value - amount, 0.0))

    def rotate(self, amount: float = 10) -> "OKLCH":
        return self.replace(hue=self.hue + amount)

    # ------------------ OUTPUT ------------------
    def to_css_oklch(self) -> str:
        return "oklch({:.4f} {:.4f} {:.2f})".format(*self.to_tuple())

    def to_css(self) -> str:
        return self.to_css_oklch()

    def to_css_vars(self) -> str:
        """Custom properties ``--ul``, ``--uc``, ``--uh`` for CSS templating."""
        return "--ul:{:.4f};--uc:{:.4f};--uh:{:.2f};".format(*self.to_tuple())

    def to_css_color_mix(self, bg_css: str = "var(--bg)", a_pct: float = 72, bg_pct: float = 28) -> str:
        return f"color-mix(in oklch, {self.to_css_oklch()} {a_pct}%, {bg_css} {bg_pct}%)"
