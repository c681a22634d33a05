"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import operator
import os
from typing import Optional, Union

CharLike = Union[str, int]
TextLike = Union[str, bytes, bytearray]

STDERR_FD = 2


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of ``data`` to ``fd``, retrying partial writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    return bytes([operator.index(c) & 0xFF])


def _text_bytes(s: TextLike) -> bytes:
    return bytes(s) if isinstance(s, (bytes, bytearray)) else s.encode("utf-8")


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``."""
    _write_all(fd, _char_bytes(c))


def putstr_fd(s: Optional[TextLike], fd: int) -> None:
    """Write a string to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, _text_bytes(s))


def putendl_fd(s: Optional[TextLike], fd: int) -> None:
    """Write a string followed by a newline to ``fd``."""
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of an integer to ``fd``."""
    _write_all(fd, str(operator.index(n)).encode("ascii"))


def putstr_stderr(s: Optional[TextLike]) -> None:
    """Write a string to standard error; ``None`` writes nothing."""
    putstr_fd(s, STDERR_FD)


def putchar_stderr(c: CharLike) -> None:
    """Write one character to standard error."""
    putchar_fd(c, STDERR_FD)