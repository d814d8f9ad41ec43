"""Byte-buffer helpers with the semantics of the classic C memory routines.

Buffers are ``bytearray`` objects; read-only inputs may be any bytes-like
object. Positions are indices into the buffer, or ``None`` when nothing is
found. Lengths larger than the buffers involved raise ``IndexError``.
"""

from __future__ import annotations

_SIZE_MAX = 2**64 - 1


def _check_length(length: int, *buffers: bytes | bytearray | memoryview) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if length > len(buffer):
            raise IndexError(f"length {length} exceeds buffer of {len(buffer)} bytes")


def fill(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes to ``value`` truncated to a byte."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def zero(buffer: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes to zero."""
    return fill(buffer, 0, length)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and _SIZE_MAX // size < count:
        raise OverflowError("requested allocation is too large")
    return bytearray(count * size)


def find_byte(data: bytes | bytearray | memoryview, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``length``."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(
    first: bytes | bytearray | memoryview,
    second: bytes | bytearray | memoryview,
    length: int,
) -> int:
    """Difference of the first unequal bytes within ``length``, or 0 when equal."""
    _check_length(length, first, second)
    for left, right in zip(first[:length], second[:length]):
        if left != right:
            return left - right
    return 0


def copy_bytes(
    destination: bytearray | None,
    source: bytes | bytearray | memoryview | None,
    length: int,
) -> bytearray | None:
    """Copy ``length`` bytes of ``source`` to the start of ``destination``.

    When both are ``None`` nothing is done and ``None`` is returned.
    """
    if destination is None and source is None:
        return None
    if destination is None or source is None:
        raise TypeError("destination and source must both be buffers")
    _check_length(length, destination, source)
    destination[:length] = bytes(source[:length])
    return destination


def move_bytes(buffer: bytearray, destination: int, source: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from ``source`` to ``destination``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if destination < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if max(destination, source) + length > len(buffer):
        raise IndexError("region extends past the end of the buffer")
    buffer[destination : destination + length] = buffer[source : source + length]
    return buffer