"""ASCII character classification and case conversion.

Each function takes either a one-character string or an integer code point;
case conversion returns a value of the same kind it was given.
"""

from __future__ import annotations


def _code(char: str | int) -> int:
    if isinstance(char, int):
        return char
    if isinstance(char, str) and len(char) == 1:
        return ord(char)
    raise TypeError(f"expected one character or a code point, got {char!r}")


def is_alpha(char: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: str | int) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for printable ASCII, space to tilde."""
    return ord(" ") <= _code(char) <= ord("~")


def _shift_case(char: str | int, low: str, high: str, offset: int) -> str | int:
    code = _code(char)
    if ord(low) <= code <= ord(high):
        code += offset
    return chr(code) if isinstance(char, str) else code


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    return _shift_case(char, "a", "z", -32)


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    return _shift_case(char, "A", "Z", 32)