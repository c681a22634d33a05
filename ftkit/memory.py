"""Byte-buffer filling, copying, searching and comparison."""

from __future__ import annotations

import operator
from typing import Optional, Union

ByteLike = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]
ByteValue = Union[int, str]


def _byte(value: ByteValue) -> int:
    """Reduce a character or an integer to an unsigned byte value."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        code = ord(value)
        if code > 0xFF:
            raise ValueError(f"character {value!r} does not fit in a byte")
        return code
    return operator.index(value) & 0xFF


def _check_length(n: int, *buffers: ByteLike) -> int:
    """Validate that ``n`` bytes are available in every buffer."""
    n = operator.index(n)
    if n < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(
                f"length {n} exceeds buffer of {len(buffer)} bytes"
            )
    return n


def memset(buffer: WritableBuffer, value: ByteValue, length: int) -> WritableBuffer:
    """Fill the first ``length`` bytes of ``buffer`` with ``value``; return ``buffer``."""
    length = _check_length(length, buffer)
    buffer[:length] = bytes([_byte(value)]) * length
    return buffer


def bzero(buffer: WritableBuffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: WritableBuffer, src: ByteLike, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``; return ``dst``."""
    n = _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: WritableBuffer, src: ByteLike, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dst``, correct even when they overlap.

    Overlapping regions are expressed as memoryviews of one buffer.
    """
    n = _check_length(n, dst, src)
    chunk = bytes(src[:n])
    dst[:n] = chunk
    return dst


def memchr(data: ByteLike, value: ByteValue, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in the first
    ``n`` bytes of ``data``, or ``None``."""
    n = _check_length(n, data)
    index = bytes(data[:n]).find(_byte(value))
    return None if index < 0 else index


def memcmp(a: ByteLike, b: ByteLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    differing unsigned bytes, or 0."""
    n = _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0