"""Searching, comparing and converting strings."""

from typing import Optional, Tuple, Union

Char = Union[str, int]
Text = Union[str, bytes]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _char(c: Char) -> str:
    """Return c as a one-character string; an int is cut to its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _as_bytes(s: Text) -> bytes:
    return s.encode() if isinstance(s, str) else bytes(s)


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def strlen(s: Optional[str]) -> int:
    """Return the length of s; None counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: Optional[Text], s2: Optional[Text], n: int) -> int:
    """Compare at most n bytes of two strings.

    Returns the difference of the first unequal bytes, 0 when they match,
    and -1 when either string is missing.
    """
    if s1 is None or s2 is None:
        return -1
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    a = _as_bytes(s1)
    b = _as_bytes(s2)
    for i in range(n):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of little in the first length characters of big, or None.

    An empty needle is found at index 0.
    """
    if not little:
        return 0
    for start in range(min(len(big), max(length, 0))):
        if start + len(little) > length:
            break
        if big.startswith(little, start):
            return start
    return None


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one sign is accepted, parsing stops at
    the first non-digit, and the result wraps to a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + ord(text[pos]) - ord("0")
        pos += 1
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters.

    Returns the text that fits (leaving room for a terminator) and the full
    length of src, so truncation shows as a length of size or more.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters.

    Returns the resulting text and the length it tried to create. When size
    does not exceed the length of dst, dst is left alone and the length is
    len(src) + size.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)