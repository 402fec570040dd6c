"""Building new strings from existing ones: copies, slices, joins, trims, splits."""

from typing import Callable, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")


def strdup(s: str) -> str:
    """Return a copy of s."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return "".join(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most length characters of s beginning at start.

    A start at or beyond the end gives an empty string; a missing s gives None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent.

    Returns None only when both are missing.
    """
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return strdup(s2)
    if s2 is None:
        return strdup(s1)
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip every character in charset from both ends of s.

    Returns None when either argument is missing.
    """
    if s is None or charset is None:
        return None
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> Optional[List[str]]:
    """Split s on the character sep, dropping empty pieces.

    Returns None when s is missing.
    """
    if s is None:
        return None
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Return a new string whose characters are f(index, char) for each char of s.

    Returns None when s or f is missing.
    """
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence[T]],
    f: Optional[Callable[[int, MutableSequence[T]], None]],
) -> Optional[MutableSequence[T]]:
    """Call f(index, s) for each position of the mutable sequence s.

    f may change s[index] in place. Returns s; a missing s or f does nothing.
    """
    if s is None or f is None:
        return s
    for index in range(len(s)):
        f(index, s)
    return s