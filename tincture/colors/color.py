from __future__ import annotations
from typing import Union

from ..errors import EmptyInputError, UnknownColorFormatError
from ..types.color_types import ColorSpace, validate_space
from .color_base import ColorBase, build_registry
from .hex import looks_like_hex, parse_hex
from .hsl import HSL
from .named import lookup as lookup_named
from .oklch import OKLCH
from .rgb import RGB

space_to_class = build_registry(RGB, HSL, OKLCH)


def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    """Return this color expressed in ``to_space`` ("rgb", "hsl" or "oklch")."""
    target = space_to_class[validate_space(to_space)]
    if type(self) is target:
        return self
    return target(self)


ColorBase.convert = color_convert


def parse(value: Union[ColorBase, str, None]) -> ColorBase:
    """
    Parse any supported notation into a color.

    Sniffing order: ``#``/bare 3- or 6-digit hex, ``rgb(...)``, ``hsl(...)``,
    ``oklch(...)``, then a named color (``"goldenrod"``, ``"css:gray"``).
    Colors are returned unchanged.

    Raises:
        EmptyInputError: None or blank input
        UnknownColorFormatError: nothing matched (including unknown names)
        ParseError subclasses: a recognised notation with bad contents
    """
    if isinstance(value, ColorBase):
        return value
    if value is None:
        raise EmptyInputError("Can't pass None as a color")
    if not isinstance(value, str):
        raise UnknownColorFormatError(f"Can't parse {type(value).__name__} as a color")

    text = value.strip()
    if not text:
        raise EmptyInputError("Can't parse empty string")

    lowered = text.lower()
    if looks_like_hex(text):
        return parse_hex(text)
    if lowered.startswith("rgb"):
        return RGB.parse(text)
    if lowered.startswith("hsl"):
        return HSL.parse(text)
    if lowered.startswith("oklch"):
        return OKLCH.parse(text)

    found = lookup_named(text)
    if found is not None:
        return found
    raise UnknownColorFormatError(f"Unknown color {value!r}")


def is_color(value) -> bool:
    """True when :func:`parse` would accept ``value``."""
    try:
        parse(value)
    except ValueError:
        return False
    return True


class Color:
    """
    Entry point mirroring :func:`parse`.

    ``Color.parse("#ff0000")`` and ``Color["goldenrod"]`` both return an
    :class:`RGB`; ``Color.RGB`` etc. expose the concrete classes.
    """
    RGB = RGB
    HSL = HSL
    OKLCH = OKLCH

    parse = staticmethod(parse)
    is_color = staticmethod(is_color)

    def __class_getitem__(cls, value):
        return parse(value)

    def __new__(cls, value):
        return parse(value)
