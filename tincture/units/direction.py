"""
Gradient directions as ``(from, to)`` angle pairs.
"""
from __future__ import annotations
import re
from collections.abc import Mapping
from numbers import Real
from typing import ClassVar, Tuple

from ..errors import DegreesParseError
from .degrees import Degrees

_TO_SPLIT = re.compile(r"(?:^|\s)to(?:\s|$)")


class Direction:
    """
    A pair of angles: where a gradient comes from and where it goes.

    Either side may be omitted when parsing, in which case it is inferred as
    the opposite of the other side.

    Examples:
        >>> Direction.parse("to top")            # from bottom to top
        >>> Direction.parse("from left to right")
        >>> Direction.parse("45deg to 225deg")
        >>> Direction.build({"from": 0, "to": 180})
    """
    __slots__ = ('_from', '_to', '_is_frozen')

    BOTTOM_TO_TOP: ClassVar["Direction"]
    LEFT_TO_RIGHT: ClassVar["Direction"]
    TOP_TO_BOTTOM: ClassVar["Direction"]
    RIGHT_TO_LEFT: ClassVar["Direction"]
    BOTTOM_LEFT_TO_TOP_RIGHT: ClassVar["Direction"]
    TOP_LEFT_TO_BOTTOM_RIGHT: ClassVar["Direction"]
    TOP_RIGHT_TO_BOTTOM_LEFT: ClassVar["Direction"]
    BOTTOM_RIGHT_TO_TOP_LEFT: ClassVar["Direction"]

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, from_, to) -> None:
        self._from = Degrees.build(from_)
        self._to = Degrees.build(to)
        super().__setattr__('_is_frozen', True)

    @property
    def from_(self) -> Degrees:
        return self._from

    @property
    def to(self) -> Degrees:
        return self._to

    # ------------------ CONSTRUCTION ------------------
    @staticmethod
    def matches(text) -> bool:
        """True when ``text`` reads like a direction rather than a bare angle."""
        if not isinstance(text, str):
            return False
        normalized = " ".join(text.lower().split())
        return (
            normalized.startswith("to ")
            or normalized.startswith("from ")
            or " to " in normalized
        )

    @classmethod
    def parse(cls, text: str) -> "Direction":
        if not isinstance(text, str):
            raise DegreesParseError("Direction must be a string")
        normalized = " ".join(text.lower().split())
        if normalized.startswith("from "):
            normalized = normalized[len("from "):]

        match = _TO_SPLIT.search(normalized)
        if match:
            left = normalized[:match.start()].strip()
            right = normalized[match.end():].strip()
        else:
            left, right = normalized, ""

        if not left and not right:
            raise DegreesParseError(f"Invalid direction: {text!r}")
        if not left:
            to = Degrees.build(right)
            return cls(to.opposite, to)
        if not right:
            from_ = Degrees.build(left)
            return cls(from_, from_.opposite)
        return cls(Degrees.build(left), Degrees.build(right))

    @classmethod
    def build(cls, value) -> "Direction":
        """
        Accepts a Direction, a mapping with ``from``/``to`` keys, a number or
        Degrees (meaning "towards that angle"), or a string.
        """
        if isinstance(value, Direction):
            return value
        if isinstance(value, Mapping):
            if "from" not in value or "to" not in value:
                raise DegreesParseError("Direction mapping must have 'from' and 'to' keys")
            return cls(value["from"], value["to"])
        if isinstance(value, Degrees) or (isinstance(value, Real) and not isinstance(value, bool)):
            to = Degrees.build(value)
            return cls(to.opposite, to)
        if isinstance(value, str):
            if cls.matches(value):
                return cls.parse(value)
            to = Degrees.parse(value)
            return cls(to.opposite, to)
        raise DegreesParseError(
            f"Expected Direction, mapping, number or string, got {type(value).__name__}"
        )

    @classmethod
    def all(cls) -> Tuple["Direction", ...]:
        return (
            cls.BOTTOM_TO_TOP,
            cls.LEFT_TO_RIGHT,
            cls.TOP_TO_BOTTOM,
            cls.RIGHT_TO_LEFT,
            cls.BOTTOM_LEFT_TO_TOP_RIGHT,
            cls.TOP_LEFT_TO_BOTTOM_RIGHT,
            cls.TOP_RIGHT_TO_BOTTOM_LEFT,
            cls.BOTTOM_RIGHT_TO_TOP_LEFT,
        )

    # ------------------ OUTPUT ------------------
    def to_css(self) -> str:
        return f"from {self._from} to {self._to}"

    def __str__(self):
        return self.to_css()

    def __repr__(self):
        return f"Direction(from_={self._from!r}, to={self._to!r})"

    def __eq__(self, other):
        if not isinstance(other, Direction):
            return NotImplemented
        return float(self._from) == float(other._from) and float(self._to) == float(other._to)

    def __hash__(self):
        return hash((Direction, float(self._from), float(self._to)))


Direction.BOTTOM_TO_TOP = Direction(Degrees.BOTTOM, Degrees.TOP)
Direction.LEFT_TO_RIGHT = Direction(Degrees.LEFT, Degrees.RIGHT)
Direction.TOP_TO_BOTTOM = Direction(Degrees.TOP, Degrees.BOTTOM)
Direction.RIGHT_TO_LEFT = Direction(Degrees.RIGHT, Degrees.LEFT)
Direction.BOTTOM_LEFT_TO_TOP_RIGHT = Direction(Degrees.BOTTOM_LEFT, Degrees.TOP_RIGHT)
Direction.TOP_LEFT_TO_BOTTOM_RIGHT = Direction(Degrees.TOP_LEFT, Degrees.BOTTOM_RIGHT)
Direction.TOP_RIGHT_TO_BOTTOM_LEFT = Direction(Degrees.TOP_RIGHT, Degrees.BOTTOM_LEFT)
Direction.BOTTOM_RIGHT_TO_TOP_LEFT = Direction(Degrees.BOTTOM_RIGHT, Degrees.TOP_LEFT)
