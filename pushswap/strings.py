"""String helpers with the bounds and edge cases of the classic C routines.

Positions are returned as indices into the string, or ``None`` where nothing
is found.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pushswap.chars import is_digit

_WHITESPACE = " \t\n\v\f\r"
_LLONG_MAX = 2**63 - 1
_NUL = "\0"


def _to_int32(number: int) -> int:
    """Wrap ``number`` into the range of a 32-bit signed integer."""
    return (number + 2**31) % 2**32 - 2**31


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits.

    Parsing stops at the first non-digit. The result wraps to a 32-bit
    signed integer; a magnitude too large for 64 bits gives -1, or 0 when
    the number is negative.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] == "-":
        sign = -1
        body = body[1:]
    elif body[:1] == "+":
        body = body[1:]
    number = 0
    for char in body:
        if not is_digit(char):
            break
        if number * 10 > _LLONG_MAX:
            return 0 if sign < 0 else -1
        number = number * 10 + ord(char) - ord("0")
    return _to_int32(sign * number)


def itoa(number: int) -> str:
    """The decimal representation of ``number``."""
    return str(number)


def find_char(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; the NUL character matches the end."""
    char = _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; the NUL character matches the end."""
    char = _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def compare_n(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters.

    Returns the code-point difference at the first mismatch, where the end of
    a string counts as code point 0, or 0 when the prefixes are equal.
    """
    if limit <= 0:
        return 0
    left = first[:limit]
    right = second[:limit]
    for index in range(max(len(left), len(right))):
        a = left[index] if index < len(left) else _NUL
        b = right[index] if index < len(right) else _NUL
        if a != b:
            return ord(a) - ord(b)
    return 0


def find_substring(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at 0 regardless of ``limit``.
    """
    if not needle:
        return 0
    if limit <= 0:
        return None
    index = haystack.find(needle, 0, min(len(haystack), limit))
    return None if index < 0 else index


def copy_bounded(source: str, size: int) -> tuple[str, int]:
    """Copy into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``source``.
    """
    if size <= 0:
        return "", len(source)
    return source[: size - 1], len(source)


def concat_bounded(destination: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` within a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length the full result would have had;
    when ``size`` does not exceed ``destination`` nothing is appended and the
    length reported is ``len(source) + size``.
    """
    dest_len = len(destination)
    if size <= dest_len:
        return destination, len(source) + size
    room = size - dest_len - 1
    return destination + source[:room], dest_len + len(source)


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start : start + length]


def join(first: str, second: str) -> str:
    """The two strings one after the other."""
    return first + second


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_indexed(text: Iterable[str], func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for every character, for its side effects."""
    for index, char in enumerate(text):
        func(index, char)