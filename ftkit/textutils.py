"""String helpers with the semantics of classic null-terminated string routines.

Positions are returned as indices into the text rather than as pointers, and
``None`` stands for a missing result.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple

NUL = "\0"


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _code_at(text: str, index: int) -> int:
    """Character code at ``index``, or 0 past the end of ``text``."""
    return ord(text[index]) if index < len(text) else 0


def is_int(text: Optional[str]) -> bool:
    """True when ``text`` starts with ``-`` or holds at least one digit."""
    if not text:
        return False
    return text[0] == "-" or any("0" <= ch <= "9" for ch in text)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    if char == NUL:
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; NUL gives ``len(text)``."""
    if char == NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strjoin(first: Optional[str], second: Optional[str]) -> str:
    """Concatenate two strings, treating ``None`` as empty."""
    return (first or "") + (second or "")


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the stored text and the length of ``src``; with ``size`` 0 nothing
    is stored.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the stored text and the length the full result would have had.
    When ``dst`` already fills the buffer it is left as is and the returned
    length is ``len(src) + size``.
    """
    _check_size(size, "size")
    if len(dst) >= size:
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each character, updating ``text`` in place.

    A non-``None`` return value replaces the character at that index.
    """
    for index in range(len(text)):
        replacement = func(index, text[index])
        if replacement is not None:
            text[index] = replacement


def strncmp(first: Optional[str], second: Optional[str], n: int) -> int:
    """Compare at most ``n`` characters, returning the difference of the first mismatch.

    A missing string or ``n`` of 0 gives 1.
    """
    _check_size(n, "n")
    if n == 0 or first is None or second is None:
        return 1
    for index in range(n):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0 or index == n - 1:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    for index in range(min(len(haystack), length)):
        if length - index >= len(needle) and haystack.startswith(needle, index):
            return index
    return None


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip characters in ``charset`` from both ends; ``None`` in gives ``None``."""
    if text is None or charset is None:
        return None
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``text`` from ``start``.

    A zero ``length`` gives ``None``; a ``start`` past the end gives ``""``.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if length == 0:
        return None
    if start > len(text):
        return ""
    return text[start : start + length]