"""
Angles for gradient directions.

``Degrees`` is a wrapping angle that may carry a CSS keyword name
("top", "bottom left", ...). It parses bare numbers, ``"45deg"`` / ``"45°"``
and CSS side keywords such as ``"to bottom left"``.
"""
from __future__ import annotations
import re
from numbers import Real
from typing import ClassVar, Dict, Iterable, Optional, Tuple

from ..errors import DegreesParseError, InvalidDirectionKeywordError
from .numbers import Hue, NumberLike, wrap_angle

_NUMBER_RE = re.compile(r"^([-+]?(?:\d+(?:\.\d*)?|\.\d+))\s*(deg|°)?$", re.IGNORECASE)

# sorted keyword tuple -> angle
KEYWORD_ANGLES: Dict[Tuple[str, ...], float] = {
    ("top",): 0.0,
    ("right",): 90.0,
    ("bottom",): 180.0,
    ("left",): 270.0,
    ("right", "top"): 45.0,
    ("bottom", "right"): 135.0,
    ("bottom", "left"): 225.0,
    ("left", "top"): 315.0,
}


def _tokens(text: str) -> Tuple[str, ...]:
    return tuple(sorted(text.lower().replace("-", " ").replace("_", " ").split()))


def format_number(value: float) -> str:
    return str(round(float(value), 4))


class Degrees(Hue):
    """A wrapping angle in ``[0, 360)`` with an optional keyword name."""

    TOP: ClassVar["Degrees"]
    RIGHT: ClassVar["Degrees"]
    BOTTOM: ClassVar["Degrees"]
    LEFT: ClassVar["Degrees"]
    TOP_RIGHT: ClassVar["Degrees"]
    BOTTOM_RIGHT: ClassVar["Degrees"]
    BOTTOM_LEFT: ClassVar["Degrees"]
    TOP_LEFT: ClassVar["Degrees"]

    _named: ClassVar[Tuple["Degrees", ...]] = ()
    _by_name: ClassVar[Dict[str, "Degrees"]] = {}

    def __new__(cls, value: NumberLike = 0.0, name: Optional[str] = None,
                aliases: Iterable[str] = ()):
        obj = super().__new__(cls, value)
        obj.name = name
        obj.aliases = tuple(aliases)
        super(Degrees, obj).__setattr__('_is_frozen', True)
        return obj

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def build(cls, value) -> "Degrees":
        """Turn a Degrees, a number or a string into a Degrees."""
        if isinstance(value, Degrees):
            return value
        if isinstance(value, Real) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise DegreesParseError(
            f"Expected Numeric, String, or Degrees, got {type(value).__name__}"
        )

    @classmethod
    def parse(cls, text) -> "Degrees":
        """
        Parse an angle.

        Accepts a bare number, ``"-12.5"``, ``"45deg"``, ``"45°"``, a CSS side
        keyword (``"to top right"``) or a keyword name (``"bottom left"``,
        ``"north"``). Keyword order does not matter.
        """
        if isinstance(text, Real) and not isinstance(text, bool):
            return cls(text)
        if not isinstance(text, str):
            raise DegreesParseError("Input must be a string")

        stripped = text.strip()
        match = _NUMBER_RE.match(stripped)
        if match:
            return cls(float(match.group(1)))

        lowered = " ".join(stripped.lower().split())
        if lowered.startswith("to "):
            key = _tokens(lowered[3:])
            if key not in KEYWORD_ANGLES:
                raise InvalidDirectionKeywordError(
                    f"Invalid direction keyword: {stripped!r}"
                )
            found = cls.find_by_name(" ".join(key))
            return found if found is not None else cls(KEYWORD_ANGLES[key])

        found = cls.find_by_name(lowered) if lowered else None
        if found is None:
            raise DegreesParseError(f"Invalid degrees format: {text!r}")
        return found

    @classmethod
    def find_by_name(cls, name: str) -> Optional["Degrees"]:
        """Look up a named angle by name or alias; None when unknown."""
        if not isinstance(name, str):
            return None
        key = _tokens(name)
        found = cls._by_name.get(" ".join(key))
        if found is None:
            found = cls._by_name.get("".join(key))
        return found

    @classmethod
    def named(cls) -> Tuple["Degrees", ...]:
        return cls._named

    @classmethod
    def _register(cls, *angles: "Degrees") -> None:
        by_name: Dict[str, Degrees] = {}
        for angle in angles:
            for label in (angle.name, *angle.aliases):
                key = _tokens(label)
                by_name[" ".join(key)] = angle
                by_name["".join(key)] = angle
                by_name[re.sub(r"[\s_-]+", "", label.lower())] = angle
        cls._named = tuple(angles)
        cls._by_name = by_name

    # ------------------ OPERATIONS ------------------
    @property
    def opposite(self) -> "Degrees":
        """The angle pointing the other way, named when a keyword matches."""
        value = wrap_angle(float(self) + 180.0)
        for angle in self._named:
            if float(angle) == value:
                return angle
        return Degrees(value)

    def to_css(self) -> str:
        return f"{format_number(self)}deg"

    def __str__(self):
        if self.name:
            return self.name
        return f"{format_number(self)}°"

    def __repr__(self):
        if self.name:
            return f"Degrees({float(self)}, name={self.name!r})"
        return f"Degrees({float(self)})"


Degrees.TOP = Degrees(0, "top", ("north",))
Degrees.RIGHT = Degrees(90, "right", ("east",))
Degrees.BOTTOM = Degrees(180, "bottom", ("south",))
Degrees.LEFT = Degrees(270, "left", ("west",))
Degrees.TOP_RIGHT = Degrees(45, "top right", ("northeast",))
Degrees.BOTTOM_RIGHT = Degrees(135, "bottom right", ("southeast",))
Degrees.BOTTOM_LEFT = Degrees(225, "bottom left", ("southwest",))
Degrees.TOP_LEFT = Degrees(315, "top left", ("northwest",))

Degrees._register(
    Degrees.TOP, Degrees.RIGHT, Degrees.BOTTOM, Degrees.LEFT,
    Degrees.TOP_RIGHT, Degrees.BOTTOM_RIGHT, Degrees.BOTTOM_LEFT, Degrees.TOP_LEFT,
)
