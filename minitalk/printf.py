"""A small printf with the conversions %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_UINT32_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


class FormatError(ValueError):
    """Raised for a format string that cannot be rendered."""


def _signed32(value: Any) -> int:
    number = operator.index(value) & _UINT32_MASK
    return number - (1 << 32) if number >= 1 << 31 else number


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c expects a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _unsigned(value: Any) -> str:
    return str(operator.index(value) & _UINT32_MASK)


def _hex_lower(value: Any) -> str:
    return format(operator.index(value) & _UINT32_MASK, "x")


def _hex_upper(value: Any) -> str:
    # Zero renders as nothing at all in upper-case hex.
    number = operator.index(value) & _UINT32_MASK
    return format(number, "X") if number else ""


def _pointer(value: Any) -> str:
    number = 0 if value is None else operator.index(value) & _ULONG_MASK
    return "0x" + format(number, "x") if number else "(nil)"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda value: str(_signed32(value)),
    "i": lambda value: str(_signed32(value)),
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _convert(spec: str, values: Iterator[Any]) -> tuple[str, int]:
    if spec == "%":
        return "%", 1
    conversion = _CONVERSIONS.get(spec)
    if conversion is None:
        # An unknown conversion character is echoed but not counted.
        return spec, 0
    try:
        value = next(values)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None
    text = conversion(value)
    return text, len(text)


def _pieces(fmt: Optional[str], args: tuple[Any, ...]) -> Iterator[tuple[str, int]]:
    """Yield each piece of output together with the count it contributes."""
    if fmt is None:
        raise FormatError("format must not be None")
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    for char in chars:
        if char != "%":
            yield char, 1
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends with a lone '%'")
        yield _convert(spec, values)


def render(fmt: Optional[str], *args: Any) -> str:
    """Return the text that :func:`printf` would write."""
    return "".join(text for text, _ in _pieces(fmt, args))


def printf(fmt: Optional[str], *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to *file* (standard output by default).

    Returns the number of characters counted. Output produced before a
    format error has already been written when the error is raised.
    """
    stream = sys.stdout if file is None else file
    count = 0
    for text, counted in _pieces(fmt, args):
        stream.write(text)
        count += counted
    return count