"""Small string helpers: trimming, replacing, case, searching and formatting."""

from __future__ import annotations

import re
import string

SPACES = " \t\r\n"

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_DIGITS = "0123456789ABCDEF"
_MAX_BASE = 16
_JSON_ESCAPE = re.compile(r"\\u(.{4})", re.DOTALL)
_HEX4 = re.compile(r"[0-9A-Fa-f]{4}")


def trim_right(s: str, spaces: str = SPACES) -> str:
    """Strip any of ``spaces`` from the end of ``s``."""
    return s.rstrip(spaces)


def trim_left(s: str, spaces: str = SPACES) -> str:
    """Strip any of ``spaces`` from the start of ``s``."""
    return s.lstrip(spaces)


def trim(s: str, spaces: str = SPACES) -> str:
    """Strip any of ``spaces`` from both ends of ``s``."""
    return trim_left(trim_right(s, spaces), spaces)


def replace_all(base: str, src: str, des: str) -> str:
    """Replace every non-overlapping ``src`` in ``base`` with ``des``, left to right."""
    if not src:
        raise ValueError("replace_all needs a non-empty search string")
    return base.replace(src, des)


def fix_newline(s: str) -> str:
    """Normalise line endings to CR LF, collapsing doubled CRs or LFs around them."""
    result = replace_all(s, "\n", "\r\n")
    result = replace_all(result, "\r\r\n", "\r\n")
    result = replace_all(result, "\r", "\r\n")
    return replace_all(result, "\r\n\n", "\r\n")


def to_upper(s: str) -> str:
    """Upper-case the ASCII letters of ``s``, leaving everything else alone."""
    return s.translate(_ASCII_UPPER)


def to_lower(s: str) -> str:
    """Lower-case the ASCII letters of ``s``, leaving everything else alone."""
    return s.translate(_ASCII_LOWER)


def _fold(text: str) -> str:
    # Per-character folding keeps indices aligned with the original text.
    return "".join(
        upper if len(upper := ch.upper()) == 1 else ch for ch in text
    )


def find_ci(s: str, sub: str) -> int:
    """Return the index of the first case-insensitive match of ``sub`` in ``s``, or -1."""
    if not s:
        return -1
    return _fold(s).find(_fold(sub))


def int_to_str(num: int, base: int = 10) -> str:
    """Render a non-negative integer in ``base`` (capped at 16) with upper-case digits."""
    if num < 0:
        raise ValueError("int_to_str needs a non-negative number")
    if base < 2:
        raise ValueError("base must be at least 2")
    base = min(base, _MAX_BASE)
    digits = []
    while True:
        num, digit = divmod(num, base)
        digits.append(_DIGITS[digit])
        if num == 0:
            break
    return "".join(reversed(digits))


def starts_with(s: str, target: str) -> bool:
    """Tell whether ``s`` begins with ``target``."""
    return s.startswith(target)


def ends_with(s: str, target: str) -> bool:
    """Tell whether ``s`` ends with ``target``."""
    return s.endswith(target)


def decode_json_escapes(s: str) -> str:
    """Collect the characters of every ``\\uXXXX`` escape in ``s``; other text is dropped.

    Surrogate pairs are joined into a single character.
    """
    units = []
    for match in _JSON_ESCAPE.finditer(s):
        digits = match.group(1)
        if not _HEX4.fullmatch(digits):
            raise ValueError(f"invalid \\u escape: {match.group(0)!r}")
        units.append(chr(int(digits, 16)))
    text = "".join(units)
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")