"""Conversions between text and integers with fixed-width wrap-around."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse_signed(text: str) -> int:
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Anything unparsable gives 0; overflow wraps.
    """
    return _wrap(_parse_signed(text), 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit signed value."""
    return _wrap(_parse_signed(text), 64)


def atoi_base(text: str, base: str) -> int:
    """Weigh each character of ``text`` by its position in ``base``.

    Each matching position ``q`` contributes ``q * 2**k``, where ``k`` counts
    characters remaining to the right. The weight is a power of two whatever
    the length of ``base``, so this reads binary strings over any two-symbol
    alphabet. The result is a 32-bit signed value.
    """
    length = len(text)
    total = sum(
        position * (1 << (length - index - 1))
        for index, ch in enumerate(text)
        for position, symbol in enumerate(base)
        if ch == symbol
    )
    return _wrap(total, 32)


def itoa(number: int) -> str:
    """Render ``number``, taken as a 32-bit signed integer, in decimal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    return str(_wrap(number, 32))