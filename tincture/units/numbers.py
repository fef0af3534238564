"""
Bounded numeric newtypes.

Each type is a real ``int``/``float`` subclass whose constructor applies a
range policy: clamping for channel values, cyclic wrapping for angles.
Arithmetic on an instance returns a new instance of the same type with the
policy applied again, so a value can never leave its range.
"""
from __future__ import annotations
import math
import operator
from numbers import Real
from typing import Callable, ClassVar, Optional, Union

from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float

NumberLike = Union[Real, str]

COMPONENT_MAX = 255
HUE_360 = 360.0
CHROMA_MAX = 0.5
PERCENT_MAX = 100.0


def to_float(value: NumberLike) -> float:
    """Coerce a number or numeric string to float (ValueError otherwise)."""
    if isinstance(value, str):
        return float(value.strip())
    return float(value)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def safe_divide(a: float, b: float) -> float:
    """Divide, sending a zero divisor to a signed infinity (0 / 0 gives 0)."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return 0.0
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class _ClosedArithmetic:
    """Mixin that keeps ``+ - * /``, negation and ``abs`` inside the type."""
    __slots__ = ()

    def _operate(self, other, op: Callable, reflected: bool = False):
        if not isinstance(other, Real):
            return NotImplemented
        a, b = float(self), float(other)
        if reflected:
            a, b = b, a
        return type(self)(op(a, b))

    def __add__(self, other):
        return self._operate(other, operator.add)

    def __radd__(self, other):
        return self._operate(other, operator.add, reflected=True)

    def __sub__(self, other):
        return self._operate(other, operator.sub)

    def __rsub__(self, other):
        return self._operate(other, operator.sub, reflected=True)

    def __mul__(self, other):
        return self._operate(other, operator.mul)

    def __rmul__(self, other):
        return self._operate(other, operator.mul, reflected=True)

    def __truediv__(self, other):
        return self._operate(other, safe_divide)

    def __rtruediv__(self, other):
        return self._operate(other, safe_divide, reflected=True)

    def __neg__(self):
        return type(self)(-float(self))

    def __abs__(self):
        return type(self)(abs(float(self)))


class Component(_ClosedArithmetic, int):
    """An integer channel value clamped to ``[0, 255]``, rounding half up."""

    lower: ClassVar[int] = 0
    upper: ClassVar[int] = COMPONENT_MAX

    def __new__(cls, value: NumberLike = 0):
        raw = float(clamp(to_float(value), cls.lower, cls.upper))
        return super().__new__(cls, round_half_up(raw))

    @property
    def value(self) -> int:
        return int(self)

    def __repr__(self):
        return f"Component({int(self)})"


class BoundedFloat(_ClosedArithmetic, float):
    """A float clamped to the inclusive range ``[lower, upper]``."""

    lower: ClassVar[float] = 0.0
    upper: ClassVar[float] = 1.0

    def __new__(cls, value: NumberLike = 0.0):
        return super().__new__(cls, float(clamp(to_float(value), cls.lower, cls.upper)))

    @property
    def value(self) -> float:
        return float(self)

    def __repr__(self):
        return f"{self.__class__.__name__}({float(self)})"


class UnitFloat(BoundedFloat):
    """A floating-point number clamped to the inclusive range ``[0, 1]``."""


class Chroma(BoundedFloat):
    """OKLCH chroma, clamped to ``[0, 0.5]``."""
    upper: ClassVar[float] = CHROMA_MAX


class Percentage(BoundedFloat):
    """
    A percentage clamped to ``[0, 100]``.

    ``Percentage(75)`` is 75 %; ``Percentage(3, 4)`` builds the same value
    from a numerator and a denominator (a zero denominator gives 0 %).
    """
    upper: ClassVar[float] = PERCENT_MAX

    def __new__(cls, value: NumberLike = 0.0, denominator: Optional[NumberLike] = None):
        if denominator is not None:
            den = to_float(denominator)
            value = 0.0 if den == 0 else to_float(value) / den * 100.0
        return super().__new__(cls, value)

    def to_ratio(self) -> float:
        """Return the percentage as a fraction in ``[0, 1]``."""
        return float(self) / 100.0

    def format(self, decimal_places: int = 1) -> str:
        return f"{float(self):.{decimal_places}f}%"

    def __str__(self):
        return self.format()


class Hue(_ClosedArithmetic, float):
    """An angle in degrees wrapped into ``[0, 360)``."""

    period: ClassVar[float] = HUE_360

    def __new__(cls, value: NumberLike = 0.0):
        return super().__new__(cls, wrap_angle(to_float(value), cls.period))

    @property
    def value(self) -> float:
        return float(self)

    def __repr__(self):
        return f"{self.__class__.__name__}({float(self)})"


WrappingAngle = Hue
ClampedComponent = Component
ClampedPercentage = Percentage


def wrap_angle(value: float, period: float = HUE_360) -> float:
    if not math.isfinite(value):
        return 0.0
    wrapped = float(cyclic_wrap_float(value, 0.0, period))
    # float rounding can land exactly on the period (e.g. -1e-17 % 360)
    if wrapped >= period or wrapped < 0.0:
        wrapped = wrapped % period
        if wrapped >= period:
            wrapped = 0.0
    return wrapped + 0.0


__all__ = [
    "NumberLike",
    "COMPONENT_MAX",
    "HUE_360",
    "CHROMA_MAX",
    "PERCENT_MAX",
    "to_float",
    "round_half_up",
    "safe_divide",
    "Component",
    "BoundedFloat",
    "UnitFloat",
    "Chroma",
    "Percentage",
    "Hue",
    "WrappingAngle",
    "ClampedComponent",
    "ClampedPercentage",
    "wrap_angle",
]
