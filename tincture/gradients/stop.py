from __future__ import annotations
import math
from numbers import Real

from ..colors.color_base import ColorBase
from ..errors import InvalidStopColorError, InvalidStopPositionError


class Stop:
    """A color anchored at ``position`` in ``[0, 1]`` along a gradient."""
    __slots__ = ('_color', '_position', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, color: ColorBase, position: float) -> None:
        if not isinstance(color, ColorBase):
            raise InvalidStopColorError(
                f"color must be a Color instance, got {type(color).__name__}: {color!r}"
            )
        if isinstance(position, bool) or not isinstance(position, Real):
            raise InvalidStopPositionError(
                f"position must be a number, got {type(position).__name__}: {position!r}"
            )
        position = float(position)
        if math.isnan(position) or not 0.0 <= position <= 1.0:
            raise InvalidStopPositionError(f"position must be between 0.0 and 1.0, got {position}")
        self._color = color
        self._position = position
        super().__setattr__('_is_frozen', True)

    @property
    def color(self) -> ColorBase:
        return self._color

    @property
    def position(self) -> float:
        return self._position

    def __eq__(self, other):
        if not isinstance(other, Stop):
            return NotImplemented
        return self._position == other._position and self._color == other._color

    def __hash__(self):
        return hash((self._color, self._position))

    def __repr__(self):
        return f"Stop({self._color!r}, {self._position})"
