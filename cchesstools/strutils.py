"""Small string helpers."""

import re

_WHITESPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def split(text: str, delimiter: str) -> list[str]:
    """Split text on a delimiter; a trailing delimiter yields no empty last token."""
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def trim(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip(_WHITESPACE)


def is_integer(text: str) -> bool:
    """Return True if text is an optionally signed run of decimal digits."""
    digits = text[1:] if text[:1] in ("+", "-") else text
    return bool(digits) and all(c in "0123456789" for c in digits)


def to_integer(text: str) -> int:
    """Parse the leading integer of text; return 0 when none fits a 32-bit int."""
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return 0
    return value