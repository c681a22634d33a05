"""String comparison and size-bounded copying."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import NamedTuple, Union

Text = Union[str, bytes, bytearray]


class BoundedCopy(NamedTuple):
    """Result of a bounded copy: the new destination text and the length
    the function tried to create."""

    text: str
    length: int


def _as_bytes(s: Text) -> bytes:
    return bytes(s) if isinstance(s, (bytes, bytearray)) else s.encode("utf-8")


def _cstr(s: str) -> str:
    """Cut a string at its first NUL character."""
    return s.split("\0", 1)[0]


def _compare(s1: Text, s2: Text, limit: int | None) -> int:
    pairs = zip_longest(_as_bytes(s1), _as_bytes(s2), fillvalue=0)
    for a, b in islice(pairs, limit):
        if a != b or a == 0:
            return a - b
    return 0


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` bytes; return the difference of the first
    differing unsigned bytes, or 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    return _compare(s1, s2, n)


def strcmp(s1: Text, s2: Text) -> int:
    """Compare two strings bytewise as unsigned values."""
    return _compare(s1, s2, None)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")


def strlcpy(dst: str, src: str, size: int) -> BoundedCopy:
    """Copy ``src`` into a destination of ``size`` characters, terminator included.

    The returned length is always the full length of ``src``; a result
    shorter than that means the copy was truncated.
    """
    _check_size(size)
    src = _cstr(src)
    if size == 0:
        return BoundedCopy(dst, len(src))
    return BoundedCopy(src[: size - 1], len(src))


def strlcat(dst: str, src: str, size: int) -> BoundedCopy:
    """Append ``src`` to ``dst`` within a destination of ``size`` characters.

    The returned length is the initial destination length (at most
    ``size``) plus the full length of ``src``.
    """
    _check_size(size)
    dst, src = _cstr(dst), _cstr(src)
    if size == 0:
        return BoundedCopy(dst, len(src))
    dst_len = min(len(dst), size)
    if dst_len >= size:
        return BoundedCopy(dst, dst_len + len(src))
    room = size - dst_len - 1
    return BoundedCopy(dst + src[:room], dst_len + len(src))