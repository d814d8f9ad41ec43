"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_NULL_TEXT = "(null)"
_MISSING = object()


def _int32(value: Any) -> int:
    """Wrap an integer into the range of a 32-bit signed int."""
    return (operator.index(value) + 2**31) % 2**32 - 2**31


def _uint32(value: Any) -> int:
    """Wrap an integer into the range of a 32-bit unsigned int."""
    return operator.index(value) % 2**32


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return _NULL_TEXT if value is None else str(value)


def format_pointer(value: int) -> str:
    """An address as ``0x`` followed by lower-case hex digits; zero is ``0x0``."""
    return "0x" + format(operator.index(value) % 2**64, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": format_pointer,
    "d": lambda value: str(_int32(value)),
    "i": lambda value: str(_int32(value)),
    "u": lambda value: str(_uint32(value)),
    "x": lambda value: format(_uint32(value), "x"),
    "X": lambda value: format(_uint32(value), "X"),
}


def _convert(spec: str, arguments: Iterator[Any]) -> str:
    conversion = _CONVERSIONS.get(spec)
    if conversion is None:
        # Any other character after '%' stands for itself, '%%' included.
        return spec
    argument = next(arguments, _MISSING)
    if argument is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    return conversion(argument)


def format_printf(template: str, *args: Any) -> str:
    """The text ``template`` produces with ``args`` substituted in order.

    Arguments left over are ignored; too few raise ``TypeError``.
    """
    pieces: list[str] = []
    arguments = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("template ends with a lone '%'")
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(template, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)