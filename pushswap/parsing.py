"""Turning command-line arguments into the list of integers to sort."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = " \n\t\v\f\r"
_DIGITS = "0123456789"


class ParseError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""


def is_valid_element(text: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(char in _DIGITS for char in body)


def has_duplicates(values: Sequence[int]) -> bool:
    """True when any value appears more than once."""
    return len(set(values)) != len(values)


def split_words(text: str, separator: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    return [word for word in text.split(separator) if word]


def split_arguments(args: Sequence[str]) -> list[str]:
    """Split every argument on spaces; an argument of only whitespace is an error."""
    for arg in args:
        if all(char in _WHITESPACE for char in arg):
            raise ParseError("argument is empty or blank")
    return split_words(" ".join(args), " ")


def parse_args(args: Sequence[str]) -> list[int]:
    """Return the integers named by ``args`` (program name excluded)."""
    numbers = []
    for word in split_arguments(args):
        if not is_valid_element(word):
            raise ParseError(f"not an integer: {word!r}")
        number = int(word)
        if not INT_MIN <= number <= INT_MAX:
            raise ParseError(f"out of range: {word!r}")
        numbers.append(number)
    if has_duplicates(numbers):
        raise ParseError("duplicate values")
    return numbers