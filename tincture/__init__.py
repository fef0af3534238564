"""
Tincture - Color Values, Conversions and Gradients
==================================================

A Python library for representing colors in RGB, HSL and OKLCH, converting
between them, parsing them from text, and rasterizing multi-stop gradients.

Key Features
------------
- Immutable color values (RGB, HSL, OKLCH) with structural equality
- Conversions through OKLab (Ottosson) and the sRGB transfer functions
- Parsing of hex, rgb(), hsl(), oklch(), X11/CSS names and ANSI SGR codes
- WCAG luminance and contrast helpers, blend/lighten/darken
- Color harmonies (complementary, triadic, shades, tints, ...)
- Linear gradients with auto-balanced stops and CSS-style directions
- Bounded unit types that never leave their range

Quick Start
-----------
>>> from tincture import parse, linear
>>>
>>> red = parse("#ff0000")
>>> red.to_oklch()
>>> red.blend("blue", 0.5).to_hex()
'#800080'
>>>
>>> bitmap = linear("to right", "red", "blue").rasterize(width=3)
>>> [c.to_hex() for c in bitmap]
['#ff0000', '#800080', '#0000ff']

Modules
-------
- units: bounded numbers, Degrees and Direction
- conversions: vectorized color space conversion kernels
- colors: color classes, parsing, named colors, ANSI codes, harmonies
- gradients: stops, linear gradients and bitmaps
- hashing: string hash functions for derived colors
- errors: exception hierarchy
"""

from .colors import (
    ColorBase,
    Color,
    RGB,
    HSL,
    OKLCH,
    parse,
    is_color,
    parse_ansi,
    parse_hex,
    lookup,
    parse_named,
    is_named,
    NamedColorDatabase,
    X11,
    CSS,
)
from .conversions import convert, np_convert
from .gradients import (
    Stop,
    Bitmap,
    LinearGradient,
    RGBLinearGradient,
    HSLLinearGradient,
    OKLCHLinearGradient,
    linear,
)
from .hashing import HASH_FUNCTIONS, get_hash_function, hash_string
from .units import (
    Component,
    Hue,
    Chroma,
    Percentage,
    UnitFloat,
    Degrees,
    Direction,
)
from .errors import (
    ColorError,
    ParseError,
    EmptyInputError,
    UnknownColorFormatError,
    InvalidComponentCountError,
    InvalidComponentValueError,
    OutOfRangeValueError,
    InvalidHexLengthError,
    InvalidHexCharactersError,
    DegreesParseError,
    InvalidDirectionKeywordError,
    NamedColorNotFoundError,
    ANSIParseError,
    GradientError,
    InvalidStopPositionError,
    InvalidStopColorError,
    DegenerateGradientDimensionError,
)

__version__ = "1.0.0"

__all__ = [
    # Colors
    "ColorBase", "Color", "RGB", "HSL", "OKLCH",
    "parse", "is_color", "parse_ansi", "parse_hex",

    # Named colors
    "lookup", "parse_named", "is_named", "NamedColorDatabase", "X11", "CSS",

    # Conversions
    "convert", "np_convert",

    # Gradients
    "Stop", "Bitmap", "LinearGradient",
    "RGBLinearGradient", "HSLLinearGradient", "OKLCHLinearGradient",
    "linear",

    # Hashing
    "HASH_FUNCTIONS", "get_hash_function", "hash_string",

    # Units
    "Component", "Hue", "Chroma", "Percentage", "UnitFloat", "Degrees", "Direction",

    # Errors
    "ColorError", "ParseError", "EmptyInputError", "UnknownColorFormatError",
    "InvalidComponentCountError", "InvalidComponentValueError", "OutOfRangeValueError",
    "InvalidHexLengthError", "InvalidHexCharactersError", "DegreesParseError",
    "InvalidDirectionKeywordError", "NamedColorNotFoundError", "ANSIParseError",
    "GradientError", "InvalidStopPositionError", "InvalidStopColorError",
    "DegenerateGradientDimensionError",
]
