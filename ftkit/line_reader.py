"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Reads newline-terminated lines from a file descriptor.

    Each line keeps its trailing newline; the final line may lack one.
    Data read past a newline is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._buffer = b""

    def _fill(self) -> None:
        while b"\n" not in self._buffer:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._buffer = b""
                raise
            if not chunk:
                break
            self._buffer += chunk

    def readline(self) -> Optional[bytes]:
        """Return the next line, or ``None`` when no data is left."""
        if b"\n" not in self._buffer:
            self._fill()
        if not self._buffer:
            return None
        line, sep, rest = self._buffer.partition(b"\n")
        self._buffer = rest
        return line + sep

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.readline()) is not None:
            yield line