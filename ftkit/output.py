"""Write characters, strings and numbers to text streams, with a small printf.

Every writer returns the number of characters it wrote. Numbers follow C
integer widths: signed and unsigned values are 32 bits and addresses are
64 bits, so out-of-range values wrap.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO, Union

from ftkit.conversions import itoa

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_TEXT = "(null)"
NIL_POINTER = "(nil)"

_UINT_MASK = (1 << 32) - 1
_UINTPTR_MASK = (1 << 64) - 1


def _write(stream: TextIO, text: str) -> int:
    stream.write(text)
    return len(text)


def _validate_base(base: str) -> None:
    if len(base) < 2:
        raise ValueError("a base needs at least two symbols")
    for ch in base:
        code = ord(ch)
        if code <= 32 or code >= 127 or ch in "+-":
            raise ValueError(f"invalid symbol {ch!r} in base")
    if len(set(base)) != len(base):
        raise ValueError("base symbols must be distinct")


def _render(number: int, base: str) -> str:
    radix = len(base)
    digits = []
    while True:
        number, remainder = divmod(number, radix)
        digits.append(base[remainder])
        if number == 0:
            break
    return "".join(reversed(digits))


def put_char(c: Union[str, int], stream: TextIO) -> int:
    """Write one character; an integer is taken as a byte-sized code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return _write(stream, c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return _write(stream, chr(c & 0xFF))


def put_str(text: Optional[str], stream: TextIO) -> int:
    """Write ``text``. A missing string writes ``(null)`` to standard error."""
    if text is None:
        return _write(sys.stderr, NULL_TEXT)
    return _write(stream, text)


def put_endl(text: Optional[str], stream: TextIO) -> None:
    """Write ``text`` followed by a newline; a missing string writes nothing."""
    if text is None:
        return
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(number: int, stream: TextIO) -> int:
    """Write ``number`` as a signed 32-bit decimal."""
    return _write(stream, itoa(number))


def put_unsigned(number: int, stream: TextIO) -> int:
    """Write ``number`` reduced to 32 bits in decimal.

    The digits come from the signed conversion, so values above 2**31 - 1
    are written as their signed 32-bit reading.
    """
    return _write(stream, itoa(number & _UINT_MASK))


def put_nbr_base(number: int, base: str, stream: TextIO) -> int:
    """Write ``number``, reduced to 64 unsigned bits, in the symbols of ``base``.

    A base must have at least two distinct printable symbols, none of them
    a space, ``+`` or ``-``; otherwise ``ValueError`` is raised.
    """
    _validate_base(base)
    return _write(stream, _render(number & _UINTPTR_MASK, base))


def put_hex(number: int, fmt: str, stream: TextIO) -> int:
    """Write ``number`` as 32-bit hexadecimal; ``fmt`` ``'X'`` selects upper case."""
    base = HEX_UPPER if fmt == "X" else HEX_LOWER
    return put_nbr_base(number & _UINT_MASK, base, stream)


def put_ptr(address: Optional[int], stream: TextIO) -> int:
    """Write an address as ``0x`` and lower-case hex; zero or ``None`` is ``(nil)``."""
    if not address:
        return _write(stream, NIL_POINTER)
    return _write(stream, "0x") + put_nbr_base(address, HEX_LOWER, stream)


def print_formatted(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write ``fmt`` with its conversions filled from ``args``.

    Supported conversions are ``%c %s %d %i %u %x %X %p %%``. An unknown
    conversion writes nothing and takes no argument; a lone ``%`` at the end
    is ignored. Too few arguments raise ``TypeError``.
    """
    if fmt is None:
        raise TypeError("format string is required")
    remaining = iter(args)

    def take() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    written = 0
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            written += put_char(ch, stream)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "c":
            written += put_char(take(), stream)
        elif spec == "s":
            written += put_str(take(), stream)
        elif spec in ("d", "i"):
            written += put_nbr(take(), stream)
        elif spec == "u":
            written += put_unsigned(take(), stream)
        elif spec in ("x", "X"):
            written += put_hex(take(), spec, stream)
        elif spec == "p":
            written += put_ptr(take(), stream)
        elif spec == "%":
            written += put_char("%", stream)
    return written