"""Character classification and conversions between text and numbers."""

from __future__ import annotations

import operator
from itertools import takewhile
from typing import Union

CharLike = Union[str, int]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_INT32_MODULUS = 1 << 32
_INT32_LIMIT = 1 << 31


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _wrap_int32(value: int) -> int:
    value %= _INT32_MODULUS
    return value - _INT32_MODULUS if value >= _INT32_LIMIT else value


def is_space(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return _code(c) in {ord(ch) for ch in _WHITESPACE}


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _convert_case(c: CharLike, low: str, high: str, shift: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    return _convert_case(c, "A", "Z", 32)


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    return _convert_case(c, "a", "z", -32)


def _parse_sign(text: str) -> tuple[int, str]:
    """Skip leading whitespace and one optional sign."""
    rest = text.lstrip("".join(_WHITESPACE))
    if rest[:1] in ("-", "+"):
        return (-1 if rest[0] == "-" else 1), rest[1:]
    return 1, rest


def _leading_digits(text: str) -> str:
    return "".join(takewhile(is_digit, text))


def atoi(text: str) -> int:
    """Parse a leading decimal integer with 32-bit signed wrap-around.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text without digits gives 0.
    """
    sign, rest = _parse_sign(text)
    result = 0
    for digit in _leading_digits(rest):
        result = _wrap_int32(result * 10 + int(digit))
    return _wrap_int32(result * sign)


def atoi_exit(text: str) -> int:
    """Parse a leading decimal integer and reduce it to an exit status (0-255)."""
    sign, rest = _parse_sign(text)
    digits = _leading_digits(rest)
    value = int(digits) if digits else 0
    return (value * sign) & 0xFF


def atof(text: str | None) -> float:
    """Parse a leading decimal number with an optional fractional part.

    No exponent is recognised. ``None`` or text without digits gives 0.0.
    """
    if text is None:
        return 0.0
    sign, rest = _parse_sign(text)
    integer_digits = _leading_digits(rest)
    rest = rest[len(integer_digits):]

    result = 0.0
    for digit in integer_digits:
        result = result * 10.0 + int(digit)

    fraction = 0.0
    if rest.startswith("."):
        divisor = 1.0
        for digit in _leading_digits(rest[1:]):
            fraction = fraction * 10.0 + int(digit)
            divisor *= 10.0
        if divisor > 1.0:
            fraction /= divisor

    return (result + fraction) * sign


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(operator.index(n))