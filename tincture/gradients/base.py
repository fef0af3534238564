from __future__ import annotations
import math
from numbers import Real
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

from ..colors.color import parse
from ..colors.color_base import ColorBase
from ..errors import DegenerateGradientDimensionError, GradientError, InvalidStopColorError, InvalidStopPositionError
from ..units import Direction
from .bitmap import Bitmap
from .stop import Stop

DEFAULT_DIRECTION = "to bottom"


def balance_positions(positions: Sequence[Optional[float]]) -> List[float]:
    """
    Fill in missing stop positions.

    Open ends default to 0.0 and 1.0. Each run of missing positions is spread
    evenly between the positioned stops on either side of it; a run between
    two stops at the same position collapses onto that position.

    >>> balance_positions([0.0, None, 0.5, None, 1.0])
    [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    result: List[Optional[float]] = list(positions)
    if not result:
        return []
    if result[0] is None:
        result[0] = 0.0
    if result[-1] is None:
        result[-1] = 1.0

    i = 1
    while i < len(result):
        if result[i] is not None:
            i += 1
            continue
        left = i - 1
        right = i
        while result[right] is None:
            right += 1
        filled = np.linspace(result[left], result[right], right - left + 1)[1:-1]
        result[left + 1:right] = [float(p) for p in filled]
        i = right + 1
    return [float(p) for p in result]


class LinearGradient:
    """
    Multi-stop linear gradient over one color space.

    Subclasses pick the space through ``color_class``; positioning, direction
    handling and rasterization are shared and only the color's own ``blend``
    differs (hue spaces interpolate around the wheel).
    """
    __slots__ = ('_stops', '_direction')

    color_class: ClassVar[type[ColorBase]]

    def __init__(self, stops: Sequence[Stop], direction: Any = None) -> None:
        if not isinstance(stops, (list, tuple)):
            raise GradientError("stops must be a list or tuple")
        if len(stops) < 2:
            raise GradientError("must have at least 2 stops")
        for i, stop in enumerate(stops):
            if not isinstance(stop, Stop):
                raise GradientError(f"stops[{i}] must be a Stop")
            if not isinstance(stop.color, self.color_class):
                raise InvalidStopColorError(
                    f"stops[{i}].color must be an {self.color_class.__name__} color"
                )
        for a, b in zip(stops, stops[1:]):
            if a.position > b.position:
                raise GradientError("stops must be sorted by position")

        self._stops = tuple(stops)
        self._direction = Direction.build(DEFAULT_DIRECTION if direction is None else direction)

    @property
    def stops(self) -> Tuple[Stop, ...]:
        return self._stops

    @property
    def direction(self) -> Direction:
        return self._direction

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def _to_color(cls, item: Any, index: int) -> ColorBase:
        if isinstance(item, str):
            item = parse(item)
        if not isinstance(item, ColorBase):
            raise InvalidStopColorError(
                f"colors[{index}] must be a Color instance or a color string, got {type(item).__name__}"
            )
        return item if isinstance(item, cls.color_class) else item.convert(cls.color_class.mode)

    @classmethod
    def build(cls, items: Sequence[Any], direction: Any = None) -> "LinearGradient":
        """
        Build from colors and ``(color, position)`` pairs.

        Strings are parsed and every color is converted into this gradient's
        space. Missing positions are filled by :func:`balance_positions`.
        """
        if not items:
            raise GradientError("colors must have at least one color")

        colors: List[ColorBase] = []
        positions: List[Optional[float]] = []
        for i, item in enumerate(items):
            if isinstance(item, (list, tuple)):
                if len(item) != 2:
                    raise GradientError(f"colors[{i}] must be a color or a (color, position) pair")
                color, position = item
                if isinstance(position, bool) or not isinstance(position, Real):
                    raise InvalidStopPositionError(
                        f"colors[{i}] position must be a number, got {position!r}"
                    )
                positions.append(float(position))
            else:
                color = item
                positions.append(None)
            colors.append(cls._to_color(color, i))

        stops = [Stop(c, p) for c, p in zip(colors, balance_positions(positions))]
        return cls(stops, direction=direction)

    # ------------------ SAMPLING ------------------
    def find_bracket_stops(self, position: float) -> Tuple[Stop, Stop]:
        """The adjacent pair of stops around ``position`` (edge pair outside the range)."""
        stops = self._stops
        if position < stops[0].position:
            return stops[0], stops[1]
        for start, end in zip(stops, stops[1:]):
            if start.position <= position <= end.position:
                return start, end
        return stops[-2], stops[-1]

    def color_at(self, position: float) -> ColorBase:
        start, end = self.find_bracket_stops(position)
        if start.position == end.position:
            return start.color
        t = (position - start.position) / (end.position - start.position)
        return start.color.blend(end.color, t)

    def positions(self, width: int, height: int) -> np.ndarray:
        """
        Position along the gradient axis for every pixel, shape (height, width).

        The axis points along the direction's ``to`` angle: 0 is up, 90 is right.
        """
        theta = math.radians(float(self._direction.to))
        # snap so axis-aligned directions carry no float noise
        dx, dy = round(math.sin(theta), 12), round(math.cos(theta), 12)
        nx = np.linspace(0.0, 1.0, width) if width > 1 else np.array([0.5])
        ny = np.linspace(0.0, 1.0, height) if height > 1 else np.array([0.5])
        raw = (nx[None, :] - 0.5) * dx + (0.5 - ny[:, None]) * dy + 0.5
        return bound_type_to_np_function[BoundType.CLAMP](raw, 0.0, 1.0)

    def rasterize(self, width: int = 1, height: int = 1) -> Bitmap:
        for name, size in (("width", width), ("height", height)):
            if isinstance(size, bool) or not isinstance(size, int) or size < 1:
                raise DegenerateGradientDimensionError(f"{name} must be at least 1, got {size!r}")

        grid = self.positions(width, height)
        cache: Dict[float, ColorBase] = {}
        pixels = []
        for row in grid.tolist():
            line = []
            for p in row:
                color = cache.get(p)
                if color is None:
                    color = cache[p] = self.color_at(p)
                line.append(color)
            pixels.append(line)
        return Bitmap(width, height, pixels)

    def __repr__(self):
        return f"{self.__class__.__name__}(stops={list(self._stops)!r}, direction={str(self._direction)!r})"
