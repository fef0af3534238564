from __future__ import annotations
import re
import string

from ..errors import InvalidHexCharactersError, InvalidHexLengthError, UnknownColorFormatError

# a bare token that reads as hex without the leading '#'
BARE_HEX_RE = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def looks_like_hex(text: str) -> bool:
    stripped = text.strip()
    return stripped.startswith("#") or bool(BARE_HEX_RE.match(stripped))


def parse_hex_digits(text: str) -> tuple[int, int, int]:
    """
    Parse ``#RGB`` / ``#RRGGBB`` (``#`` optional, any case) into channel ints.

    Raises:
        InvalidHexLengthError: not 3 or 6 digits
        InvalidHexCharactersError: a digit outside 0-9a-f
    """
    if not isinstance(text, str):
        raise UnknownColorFormatError("Input must be a string", "hex")
    digits = text.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) not in (3, 6):
        raise InvalidHexLengthError(len(digits))
    invalid = [ch for ch in digits if ch not in string.hexdigits]
    if invalid:
        raise InvalidHexCharactersError(", ".join(invalid))
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def is_valid_hex(text) -> bool:
    if not isinstance(text, str):
        return False
    try:
        parse_hex_digits(text)
    except (InvalidHexLengthError, InvalidHexCharactersError):
        return False
    return True


def parse_hex(text: str):
    from .rgb import RGB  # local import to avoid cycles
    return RGB(*parse_hex_digits(text))
