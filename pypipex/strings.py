"""String helpers with C-string semantics: NUL ends a string."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

_NUL = "\0"


def _cstr(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.split(_NUL, 1)[0]


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    text = _cstr(text)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    text = _cstr(text)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return -1, 0 or 1."""
    a = _cstr(s1)[:n]
    b = _cstr(s2)[:n]
    if a == b:
        return 0
    return 1 if a > b else -1


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0; a miss gives None.
    """
    little = _cstr(little)
    if not little:
        return 0
    index = _cstr(big)[: max(length, 0)].find(little)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the new buffer contents and the length of ``src``. With a size of
    zero the buffer is left as it was.
    """
    src = _cstr(src)
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the new buffer contents and the length the full result would have
    had; when ``size`` does not exceed ``dst`` that length is ``size`` plus the
    length of ``src``.
    """
    dst = _cstr(dst)
    src = _cstr(src)
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start`` on."""
    text = _cstr(text)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _cstr(s1) + _cstr(s2)


def strtrim(text: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``text``."""
    return _cstr(text).strip(_cstr(charset))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in _cstr(text).split(sep) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(_cstr(text)))


def striteri(buf: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of ``buf`` in place with ``func(index, char)``."""
    for index, ch in enumerate(buf):
        if ch == _NUL:
            break
        buf[index] = func(index, ch)