"""
Exception types raised by tincture.

Every error derives from :class:`ColorError`, which is itself a
``ValueError``, so callers that already guard parsing with
``except ValueError`` keep working.
"""
from __future__ import annotations
from typing import Any, Optional


class ColorError(ValueError):
    """Base class for every error raised by tincture."""


class ParseError(ColorError):
    """Raised when textual input cannot be turned into a value.

    Attributes:
        space: Grammar that rejected the input ("rgb", "hsl", "oklch", "hex",
            "named", "ansi", "degrees") or None when no grammar matched.
    """

    def __init__(self, message: str, space: Optional[str] = None) -> None:
        super().__init__(message)
        self.space = space


class EmptyInputError(ParseError):
    pass


class UnknownColorFormatError(ParseError):
    pass


class InvalidComponentCountError(ParseError):
    """Wrong number of values inside a functional notation."""

    def __init__(self, space: str, expected: int, got: int) -> None:
        super().__init__(f"Expected {expected} {space.upper()} values, got {got}", space)
        self.expected = expected
        self.got = got


class InvalidComponentValueError(ParseError):
    """A field that is not a number (or not the kind of number expected)."""

    def __init__(self, space: str, field: str, value: Any) -> None:
        super().__init__(f"Invalid {field} value: {str(value)!r}", space)
        self.field = field
        self.value = value


class OutOfRangeValueError(ParseError):
    """A well-formed number outside the declared domain of its field."""

    def __init__(self, space: str, field: str, value: Any, low: float, high: float) -> None:
        super().__init__(
            f"{field.capitalize()} must be between {low:g} and {high:g}, got {value:g}", space
        )
        self.field = field
        self.value = value
        self.low = low
        self.high = high


class InvalidHexLengthError(ParseError):
    def __init__(self, length: int) -> None:
        super().__init__(
            f"Invalid number of characters (got {length}, expected 3 or 6)", "hex"
        )
        self.length = length


class InvalidHexCharactersError(ParseError):
    def __init__(self, characters: str) -> None:
        super().__init__(f"Invalid hex characters: {characters}", "hex")
        self.characters = characters


class DegreesParseError(ParseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, "degrees")


class InvalidDirectionKeywordError(DegreesParseError):
    pass


class NamedColorNotFoundError(ParseError):
    def __init__(self, name: str, database: str) -> None:
        super().__init__(f"Unknown color name in {database} database: {name!r}", "named")
        self.name = name
        self.database = database


class ANSIParseError(ParseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, "ansi")


class GradientError(ColorError):
    """Raised when a gradient or one of its stops cannot be built."""


class InvalidStopPositionError(GradientError):
    pass


class InvalidStopColorError(GradientError):
    pass


class DegenerateGradientDimensionError(GradientError):
    pass


__all__ = [
    "ColorError",
    "ParseError",
    "EmptyInputError",
    "UnknownColorFormatError",
    "InvalidComponentCountError",
    "InvalidComponentValueError",
    "OutOfRangeValueError",
    "InvalidHexLengthError",
    "InvalidHexCharactersError",
    "DegreesParseError",
    "InvalidDirectionKeywordError",
    "NamedColorNotFoundError",
    "ANSIParseError",
    "GradientError",
    "InvalidStopPositionError",
    "InvalidStopColorError",
    "DegenerateGradientDimensionError",
]
