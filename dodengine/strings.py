"""Small helpers for C-style string handling used by the platform layer."""

import string

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _until_nul(source: str) -> str:
    """Return the part of ``source`` before the first NUL character."""
    return source.split("\0", 1)[0]


def _convert_prefix(source: str, size: int, table: dict) -> str:
    if size < 0:
        raise ValueError("size must not be negative")
    count = min(size, len(_until_nul(source)))
    return source[:count].translate(table) + source[count:]


def to_lower(source: str, size: int) -> str:
    """Lower-case (ASCII only) at most ``size`` characters, stopping at a NUL."""
    return _convert_prefix(source, size, _LOWER)


def to_upper(source: str, size: int) -> str:
    """Upper-case (ASCII only) at most ``size`` characters, stopping at a NUL."""
    return _convert_prefix(source, size, _UPPER)


def find_char(source: str, c: str) -> bool:
    """Tell whether ``c`` occurs in ``source`` before any NUL character."""
    return c in _until_nul(source)


def strlcpy(src: str, size: int) -> str:
    """Return what fits in a buffer of ``size`` characters: at most ``size - 1``."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return ""
    return _until_nul(src)[: size - 1]


def split(source: str, c: str) -> list[str]:
    """Split ``source`` on ``c``, dropping empty pieces."""
    return [part for part in _until_nul(source).split(c) if part]