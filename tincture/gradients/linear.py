from __future__ import annotations
import re
from collections.abc import Mapping
from numbers import Real
from typing import Any, ClassVar, Dict

from ..colors import HSL, OKLCH, RGB
from ..colors.color_base import ColorBase
from ..errors import GradientError
from ..units import Degrees, Direction
from .base import LinearGradient

_ANGLE_SUFFIX_RE = re.compile(r"(deg|°)\s*$", re.IGNORECASE)
_HSL_RE = re.compile(r"^\s*hsl\s*\(", re.IGNORECASE)
_OKLCH_RE = re.compile(r"^\s*oklch\s*\(", re.IGNORECASE)


class RGBLinearGradient(LinearGradient):
    __slots__ = ()
    color_class: ClassVar[type[ColorBase]] = RGB


class HSLLinearGradient(LinearGradient):
    """Interpolates around the hue wheel, so red to blue passes through magenta."""
    __slots__ = ()
    color_class: ClassVar[type[ColorBase]] = HSL


class OKLCHLinearGradient(LinearGradient):
    """Perceptually even lightness steps with shortest-arc hue."""
    __slots__ = ()
    color_class: ClassVar[type[ColorBase]] = OKLCH


GRADIENT_CLASSES: Dict[str, type[LinearGradient]] = {
    "rgb": RGBLinearGradient,
    "hsl": HSLLinearGradient,
    "oklch": OKLCHLinearGradient,
}


def _is_direction(arg: Any) -> bool:
    if isinstance(arg, (Direction, Degrees, Mapping)):
        return True
    if isinstance(arg, Real) and not isinstance(arg, bool):
        return True
    if isinstance(arg, str):
        return Direction.matches(arg) or bool(_ANGLE_SUFFIX_RE.search(arg))
    return False


def _detect_space(first: Any) -> str:
    if isinstance(first, ColorBase):
        return first.mode
    if isinstance(first, str):
        if _HSL_RE.match(first):
            return "hsl"
        if _OKLCH_RE.match(first):
            return "oklch"
        return "rgb"
    raise GradientError("First color must be a Color instance or String")


def linear(*args: Any, direction: Any = None) -> LinearGradient:
    """
    Build a linear gradient, picking the color space from the first color.

    An optional leading direction (``90``, ``"45deg"``, ``"to right"``,
    ``"from left to right"``, a Direction or a ``{"from":..., "to":...}``
    mapping) is followed by colors and ``(color, position)`` pairs, either
    as separate arguments or as one list.

    Examples:
        >>> linear("to right", "red", "blue").rasterize(width=3).to_list()
        >>> linear(["hsl(0, 100%, 50%)", ("hsl(240, 100%, 50%)", 1.0)])
    """
    items = list(args)
    if items and direction is None and _is_direction(items[0]):
        direction = items.pop(0)
    if len(items) == 1 and isinstance(items[0], list):
        items = items[0]
    if not items:
        raise GradientError("colors must have at least one color")

    first = items[0]
    if isinstance(first, (list, tuple)):
        first = first[0] if first else None
    gradient_class = GRADIENT_CLASSES[_detect_space(first)]
    return gradient_class.build(items, direction=direction)
