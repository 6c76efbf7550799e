"""Helpers for matrices of characters.

A matrix is a sequence of rows; a row is a string or a list of
one-character strings. A ``None`` entry ends the rows early and a ``"\\0"``
character ends a row early, mirroring null-terminated storage.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Iterator, List, MutableSequence, Optional, Sequence, Union

NUL = "\0"

Row = Union[str, Sequence[str]]
Matrix = Sequence[Optional[Row]]


def _rows(matrix: Optional[Matrix]) -> Iterator[Row]:
    if matrix is None:
        return iter(())
    return takewhile(lambda row: row is not None, matrix)


def _chars(row: Row) -> Iterator[str]:
    return takewhile(lambda ch: ch != NUL, row)


def count_rows(matrix: Optional[Matrix]) -> int:
    """Number of rows before the first ``None``."""
    return sum(1 for _ in _rows(matrix))


def count_cols(matrix: Optional[Matrix]) -> int:
    """Length of the first row, up to its first NUL character."""
    first = next(_rows(matrix), None)
    if first is None:
        return 0
    return sum(1 for _ in _chars(first))


def count_elements(matrix: Optional[Matrix], char: str) -> int:
    """Total occurrences of ``char`` across all rows."""
    return sum(ch == char for row in _rows(matrix) for ch in _chars(row))


def allocate(rows: int, cols: int) -> List[List[str]]:
    """Create ``rows`` rows of ``cols`` NUL characters each."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    return [[NUL] * cols for _ in range(rows)]


def copy_matrix(matrix: Optional[Matrix]) -> Optional[List[Row]]:
    """Copy every row, each cut at its first NUL; ``None`` copies to ``None``.

    String rows stay strings; other rows become new lists.
    """
    if matrix is None:
        return None
    copies: List[Row] = []
    for row in _rows(matrix):
        chars = list(_chars(row))
        copies.append("".join(chars) if isinstance(row, str) else chars)
    return copies


def reset_to_x(matrix: Sequence[MutableSequence[str]], rows: int, cols: int) -> None:
    """Set the top-left ``rows`` by ``cols`` block of ``matrix`` to ``'X'`` in place."""
    for row in matrix[:rows]:
        for col in range(cols):
            row[col] = "X"