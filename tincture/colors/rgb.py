from __future__ import annotations
import re
from typing import ClassVar, Tuple

from ..conversions import relative_luminance
from ..errors import (
    InvalidComponentCountError,
    InvalidComponentValueError,
    OutOfRangeValueError,
    UnknownColorFormatError,
)
from ..hashing import DEFAULT_HASH_FUNCTION, HashFunction, get_hash_function
from ..types.color_types import ColorSpace
from ..units import COMPONENT_MAX, Component, round_half_up
from .color_base import ColorBase
from .hex import looks_like_hex, parse_hex

_RGB_WRAPPER_RE = re.compile(r"^rgb\s*\(\s*|\s*\)$", re.IGNORECASE)
_INTEGER_RE = re.compile(r"^-?\d+$")


class RGB(ColorBase):
    """
    sRGB color with integer channels in ``[0, 255]``.

    Examples:
        >>> RGB(255, 87, 51).to_hex()
        '#ff5733'
        >>> RGB.parse("rgb(255, 87, 51)") == RGB.parse("#FF5733")
        True
    """
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "rgb"
    channels:      ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")
    channel_types: ClassVar[Tuple[type, type, type]] = (Component, Component, Component)

    @property
    def red(self) -> Component:
        return self._value[0]

    @property
    def green(self) -> Component:
        return self._value[1]

    @property
    def blue(self) -> Component:
        return self._value[2]

    # ------------------ PARSING ------------------
    @classmethod
    def parse(cls, text: str) -> "RGB":
        """Parse ``#hex``, ``rgb(r, g, b)`` or a bare ``r, g, b`` list."""
        if not isinstance(text, str):
            raise UnknownColorFormatError("Input must be a string", "rgb")
        stripped = text.strip()
        if looks_like_hex(stripped):
            return parse_hex(stripped)
        return cls._parse_functional(stripped)

    @classmethod
    def _parse_functional(cls, text: str) -> "RGB":
        inner = _RGB_WRAPPER_RE.sub("", text).strip()
        parts = [p.strip() for p in inner.split(",")]
        if len(parts) != 3:
            raise InvalidComponentCountError("rgb", 3, len(parts))

        values = []
        for name, part in zip(cls.channels, parts):
            if not _INTEGER_RE.match(part):
                raise InvalidComponentValueError("rgb", name, part)
            value = int(part)
            if not 0 <= value <= COMPONENT_MAX:
                raise OutOfRangeValueError("rgb", name, value, 0, COMPONENT_MAX)
            values.append(value)
        return cls(*values)

    @classmethod
    def derive(cls, seed: int, brightness: float = 180, saturation: float = 0.7) -> "RGB":
        """
        Build a color from an integer seed (usually a string hash).

        The low three bytes of the seed give the raw channels, which are
        pulled towards their mean by ``saturation`` and scaled so that
        ``brightness`` 127.5 keeps them unchanged.
        """
        if not isinstance(seed, int) or isinstance(seed, bool):
            raise TypeError("Seed must be an integer")
        h32 = seed & 0xFFFFFFFF
        raw = (h32 & 0xFF, (h32 >> 8) & 0xFF, (h32 >> 16) & 0xFF)
        avg = sum(raw) / 3.0
        scale = brightness / 127.5
        return cls(*(
            round_half_up(min(max((avg + (c - avg) * saturation) * scale, 0), COMPONENT_MAX))
            for c in raw
        ))

    @classmethod
    def from_string(cls, text: str, hash_function: str | HashFunction = DEFAULT_HASH_FUNCTION,
                    **options) -> "RGB":
        """Stable color for ``text``: hash it, then :meth:`derive`."""
        return cls.derive(get_hash_function(hash_function)(text), **options)

    # ------------------ OPERATIONS ------------------
    def luminance(self) -> float:
        return relative_luminance(*(c / COMPONENT_MAX for c in self.to_tuple()))

    def lighten(self, amount: float = 0.1) -> "RGB":
        """Move every channel ``amount`` of the way towards 255."""
        amount = self._amount(amount)
        return RGB(*(c + (COMPONENT_MAX - c) * amount for c in self.to_tuple()))

    def darken(self, amount: float = 0.1) -> "RGB":
        """Scale every channel by ``1 - amount``."""
        amount = self._amount(amount)
        return RGB(*(c * (1 - amount) for c in self.to_tuple()))

    # ------------------ OUTPUT ------------------
    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.to_tuple())

    def to_css(self) -> str:
        return self.to_hex()

    def to_css_rgb(self) -> str:
        return "rgb({}, {}, {})".format(*self.to_tuple())
