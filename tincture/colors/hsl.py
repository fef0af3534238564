from __future__ import annotations
import re
from typing import ClassVar, Tuple

from ..errors import (
    InvalidComponentCountError,
    InvalidComponentValueError,
    OutOfRangeValueError,
    UnknownColorFormatError,
)
from ..types.color_types import ColorSpace
from ..units import Hue, Percentage, PERCENT_MAX
from ..units.degrees import format_number
from .color_base import ColorBase

_HSL_WRAPPER_RE = re.compile(r"^hsl\s*\(\s*|\s*\)$", re.IGNORECASE)
_HUE_RE = re.compile(r"^(-?\d+(?:\.\d+)?)(?:deg)?$", re.IGNORECASE)
_PERCENT_RE = re.compile(r"^(-?\d+(?:\.\d+)?)%?$")


class HSL(ColorBase):
    """
    Hue (degrees), saturation and lightness (percentages).

    Examples:
        >>> HSL(120, 100, 50).to_rgb().to_hex()
        '#00ff00'
        >>> HSL.parse("hsl(210, 40%, 60%)")
        HSL(hue=210.0, saturation=40.0, lightness=60.0)
    """
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "hsl"
    channels:      ClassVar[Tuple[str, str, str]] = ("hue", "saturation", "lightness")
    channel_types: ClassVar[Tuple[type, type, type]] = (Hue, Percentage, Percentage)
    hue_index:     ClassVar[int] = 0

    @property
    def hue(self) -> Hue:
        return self._value[0]

    @property
    def saturation(self) -> Percentage:
        return self._value[1]

    @property
    def lightness(self) -> Percentage:
        return self._value[2]

    @classmethod
    def parse(cls, text: str) -> "HSL":
        """Parse ``hsl(h, s%, l%)``; the ``%`` signs and a ``deg`` suffix are optional."""
        if not isinstance(text, str):
            raise UnknownColorFormatError("Input must be a string", "hsl")
        inner = _HSL_WRAPPER_RE.sub("", text.strip()).strip()
        parts = [p.strip() for p in inner.split(",")]
        if len(parts) != 3:
            raise InvalidComponentCountError("hsl", 3, len(parts))

        h_part, s_part, l_part = parts
        match = _HUE_RE.match(h_part)
        if not match:
            raise InvalidComponentValueError("hsl", "hue", h_part)
        values = [float(match.group(1))]

        for name, part in (("saturation", s_part), ("lightness", l_part)):
            match = _PERCENT_RE.match(part)
            if not match:
                raise InvalidComponentValueError("hsl", name, part)
            value = float(match.group(1))
            if not 0 <= value <= PERCENT_MAX:
                raise OutOfRangeValueError("hsl", name, value, 0, PERCENT_MAX)
            values.append(value)
        return cls(*values)

    def lighten(self, amount: float = 0.1) -> "HSL":
        """Move lightness ``amount`` of the remaining way towards 100%."""
        amount = self._amount(amount)
        l = self.lightness.value
        return self.replace(lightness=l + amount * (PERCENT_MAX - l))

    def darken(self, amount: float = 0.1) -> "HSL":
        """Scale lightness by ``1 - amount``."""
        amount = self._amount(amount)
        return self.replace(lightness=self.lightness.value * (1 - amount))

    def to_css(self) -> str:
        return (
            f"hsl({format_number(self.hue)}, {format_number(self.saturation)}%, "
            f"{format_number(self.lightness)}%)"
        )
