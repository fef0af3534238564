from .color_base import ColorBase, DEFAULT_CONTRAST_RATIO, LIGHT_LUMINANCE_THRESHOLD
from .color import Color, parse, is_color, color_convert, space_to_class
from .rgb import RGB
from .hsl import HSL
from .oklch import OKLCH
from .hex import parse_hex, is_valid_hex
from .ansi import parse_ansi, is_ansi, palette_256
from .named import (
    NamedColorDatabase,
    X11,
    CSS,
    DATABASES,
    lookup,
    parse_named,
    is_named,
    normalize_name,
)

__all__ = [
    "ColorBase",
    "DEFAULT_CONTRAST_RATIO",
    "LIGHT_LUMINANCE_THRESHOLD",
    "Color",
    "parse",
    "is_color",
    "color_convert",
    "space_to_class",
    "RGB",
    "HSL",
    "OKLCH",
    "parse_hex",
    "is_valid_hex",
    "parse_ansi",
    "is_ansi",
    "palette_256",
    "NamedColorDatabase",
    "X11",
    "CSS",
    "DATABASES",
    "lookup",
    "parse_named",
    "is_named",
    "normalize_name",
]
