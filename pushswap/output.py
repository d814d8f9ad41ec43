"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import operator
from typing import TextIO


def put_char(char: str | int, stream: TextIO) -> None:
    """Write one character, given as a string or a byte value."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        stream.write(char)
    else:
        stream.write(chr(operator.index(char) & 0xFF))


def put_str(text: str | None, stream: TextIO) -> None:
    """Write ``text``; ``None`` writes nothing."""
    if text is not None:
        stream.write(text)


def put_endl(text: str | None, stream: TextIO) -> None:
    """Write ``text`` and a newline; ``None`` writes nothing at all."""
    if text is not None:
        stream.write(text + "\n")


def put_number(number: int, stream: TextIO) -> None:
    """Write ``number`` in decimal, with a leading minus when negative."""
    stream.write(str(operator.index(number)))