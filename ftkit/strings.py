"""Splitting, trimming, searching and mapping of text."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return a one-character string from a character or a character code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words.

    Runs of separators count as one and separators at either end are
    ignored. Text with no words gives an empty list.
    """
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove every character found in ``charset`` from both ends of ``text``.

    ``None`` text gives ``None``; a ``None`` charset gives an unchanged copy.
    """
    if text is None:
        return None
    if not charset:
        return text
    return text.strip(charset)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if text is None:
        return None
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> str:
    """Concatenate two strings; a missing one counts as empty."""
    return (first or "") + (second or "")


def strnstr(haystack: str, needle: str, length: int) -> Optional[str]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match, or ``None``. An empty
    needle matches at the start.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return haystack
    index = haystack[:length].find(needle)
    return None if index < 0 else haystack[index:]


def strchr(text: str, char: CharLike) -> Optional[str]:
    """Return ``text`` from the first occurrence of ``char``, or ``None``.

    Searching for the NUL character gives the empty tail of the string.
    """
    target = _char(char)
    if target == "\0":
        return ""
    index = text.find(target)
    return None if index < 0 else text[index:]


def strrchr(text: str, char: CharLike) -> Optional[str]:
    """Return ``text`` from the last occurrence of ``char``, or ``None``.

    Searching for the NUL character gives the empty tail of the string.
    """
    target = _char(char)
    if target == "\0":
        return ""
    index = text.rfind(target)
    return None if index < 0 else text[index:]


def strmapi(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from ``func(index, char)`` for every character.

    A missing text or function gives ``None``.
    """
    if text is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``func(index, char)`` on each item of ``chars`` in place.

    A returned character replaces the item; ``None`` leaves it unchanged.
    A missing sequence or function does nothing.
    """
    if chars is None or func is None:
        return
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement