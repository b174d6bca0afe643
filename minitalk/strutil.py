"""Small string helpers with the semantics of the classic C string routines."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import NamedTuple, Optional

_INT_BITS = 32
_WHITESPACE = frozenset("\t\n\v\f\r ")


class Concatenation(NamedTuple):
    """Result of a bounded concatenation: the new text and the length it tried to build."""

    text: str
    length: int


def _wrap_int(value: int) -> int:
    """Wrap *value* into the range of a signed 32-bit integer."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; text with no digits yields 0.
    The result wraps like a 32-bit signed integer.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        result = result * 10 + (ord(char) - ord("0"))
    return _wrap_int(result * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    return str(int(number))


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in *charset*."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* wholly inside the first *length* characters of *haystack*.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters; return the difference at the first mismatch.

    A NUL character, or the end of a string, ends the comparison.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(first, second, fillvalue="\0")
    for left, right in islice(pairs, n):
        if left != right:
            return ord(left) - ord(right)
        if left == "\0":
            break
    return 0


def strjoin(first: str, second: str) -> str:
    """Return *first* followed by *second*."""
    return first + second


def strlcat(dst: str, src: str, size: int) -> Concatenation:
    """Append *src* to *dst* so that the result fits a buffer of *size* characters.

    The buffer holds a terminator, so at most ``size - 1`` characters remain.
    The returned length is the one the full concatenation would have, or
    ``len(src) + size`` when *size* does not exceed the length of *dst*.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return Concatenation(dst, len(src) + size)
    room = size - len(dst) - 1
    return Concatenation(dst + src[:room], len(dst) + len(src))