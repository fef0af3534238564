"""
ANSI SGR color codes to RGB.

Supported parameter forms:
    30-37 / 40-47 / 90-97 / 100-107   the eight standard colors
    38;5;N / 48;5;N                   256-color palette
    38;2;R;G;B / 48;2;R;G;B           24-bit true color
"""
from __future__ import annotations
import re
from typing import List, Union

from ..errors import ANSIParseError
from .rgb import RGB

_SGR_RE = re.compile(r"^\d+(?:;\d+)*$")

STANDARD_COLORS = (
    (0, 0, 0),        # black
    (255, 0, 0),      # red
    (0, 255, 0),      # green
    (255, 255, 0),    # yellow
    (0, 0, 255),      # blue
    (255, 0, 255),    # magenta
    (0, 255, 255),    # cyan
    (255, 255, 255),  # white
)

STANDARD_RANGES = (range(30, 38), range(40, 48), range(90, 98), range(100, 108))

EXTENDED_FOREGROUND = 38
EXTENDED_BACKGROUND = 48
EXTENDED_256 = 5
EXTENDED_TRUE_COLOR = 2


def parse_ansi(code: Union[str, int]) -> RGB:
    """Parse an SGR color parameter string (``"31"``, ``"38;5;196"``, ...) or int."""
    if isinstance(code, bool) or not isinstance(code, (str, int)):
        raise ANSIParseError("Input must be a string or integer")
    clean = str(code).strip()
    if not clean:
        raise ANSIParseError("Can't parse empty string")
    if not _SGR_RE.match(clean):
        raise ANSIParseError(
            f"Invalid ANSI format: {code!r} (must be numeric with optional semicolons)"
        )
    params = [int(p) for p in clean.split(";")]
    first = params[0]

    if first in (EXTENDED_FOREGROUND, EXTENDED_BACKGROUND):
        return _parse_extended(params)
    for codes in STANDARD_RANGES:
        if first in codes:
            return RGB(*STANDARD_COLORS[first - codes.start])
    raise ANSIParseError(f"Unknown ANSI color code: {clean}")


def is_ansi(code) -> bool:
    try:
        parse_ansi(code)
    except ANSIParseError:
        return False
    return True


def _parse_extended(params: List[int]) -> RGB:
    if len(params) < 3:
        raise ANSIParseError("Extended color format requires at least 3 parameters")
    kind = params[1]
    if kind == EXTENDED_256:
        if len(params) != 3:
            raise ANSIParseError("256-color format requires 3 parameters (e.g., 38;5;N)")
        return palette_256(params[2])
    if kind == EXTENDED_TRUE_COLOR:
        if len(params) != 5:
            raise ANSIParseError("True color format requires 5 parameters (e.g., 38;2;R;G;B)")
        for name, value in zip(RGB.channels, params[2:]):
            if not 0 <= value <= 255:
                raise ANSIParseError(f"{name.capitalize()} must be 0-255, got {value}")
        return RGB(*params[2:])
    raise ANSIParseError(
        f"Unknown extended color type: {kind} (expected 2 for true color or 5 for 256-color)"
    )


def palette_256(index: int) -> RGB:
    """xterm 256-color palette entry."""
    if not 0 <= index <= 255:
        raise ANSIParseError(f"256-color index must be 0-255, got {index}")
    if index < 16:
        return RGB(*STANDARD_COLORS[index % 8])
    if index < 232:
        index -= 16
        return RGB((index // 36) * 51, ((index % 36) // 6) * 51, (index % 6) * 51)
    gray = 8 + (index - 232) * 10
    return RGB(gray, gray, gray)
