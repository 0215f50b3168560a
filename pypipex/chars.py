"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_ATOI_SPACE = frozenset("\t\n\v\f\r ")
_STRTOL_SPACE = frozenset("\t\r ")


def _code(c: Char) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _like(original: Char, code: int) -> Char:
    """Return ``code`` in the same form (str or int) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the range of a signed 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for code points 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - (ord("a") - ord("A")))
    return c


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + (ord("a") - ord("A")))
    return c


def _skip(text: str, start: int, spaces: frozenset[str]) -> int:
    while start < len(text) and text[start] in spaces:
        start += 1
    return start


def _sign(text: str, pos: int) -> tuple[int, int]:
    if pos < len(text) and text[pos] in "+-":
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. On overflow of a 64-bit accumulator the result is the 64-bit
    limit truncated to 32 bits.
    """
    pos = _skip(text, 0, _ATOI_SPACE)
    sign, pos = _sign(text, pos)
    result = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        digit = ord(ch) - ord("0")
        if result > (LONG_MAX - digit) // 10:
            return _to_int32(LONG_MAX if sign == 1 else LONG_MIN)
        result = result * 10 + digit
    return _to_int32(sign * result)


def is_int(text: str) -> bool:
    """True when ``text`` is a whole decimal number within the 32-bit range.

    Only tabs, carriage returns and spaces may precede it, and nothing may
    follow it.
    """
    pos = _skip(text, 0, _STRTOL_SPACE)
    sign, pos = _sign(text, pos)
    digits = text[pos:]
    if not digits:
        return False
    result = 0
    for ch in digits:
        if not is_digit(ch):
            return False
        result = result * 10 + sign * (ord(ch) - ord("0"))
        if not INT_MIN <= result <= INT_MAX:
            return False
    return True


def strtol(text: str) -> tuple[int, int]:
    """Parse a leading decimal integer.

    Returns ``(value, end)`` where ``end`` is the index just past the parsed
    part. On overflow the value is clamped to the 32-bit limit of the sign and
    ``end`` points just past the digit that overflowed.
    """
    pos = _skip(text, 0, _STRTOL_SPACE)
    sign, pos = _sign(text, pos)
    result = 0
    while pos < len(text) and is_digit(text[pos]):
        digit = ord(text[pos]) - ord("0")
        if result > (LONG_MAX - digit) // 10:
            return (INT_MIN if sign == -1 else INT_MAX), pos + 1
        result = result * 10 + digit
        pos += 1
    return sign * result, pos


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    return str(n)