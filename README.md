# ftkit

Plain helpers with the behaviour of classic null-terminated string and
memory routines: character classes, lenient number parsing with 32/64-bit
wrap-around, string operations that return indices instead of pointers,
`bytearray` buffer operations, character matrices, a small printf, a
per-descriptor line reader, and two simple linked lists.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_upper`, `to_lower`. Each takes a one-character string or
  an integer code and works on the ASCII range only; the case functions
  return the same kind they were given.
- `ftkit.conversions`: `atoi` and `atol` skip leading whitespace, read one
  optional sign and the digits that follow, and wrap to 32 or 64 bits;
  unparsable text gives 0. `atoi_base` weighs each character by its position
  in the base times a power of two. `itoa` renders an integer taken as a
  signed 32-bit value.
- `ftkit.matrix`: matrices are sequences of rows (strings or lists of
  characters); a `None` row or a `"\0"` character ends them early.
  `count_rows`, `count_cols`, `count_elements`, `allocate` (rows of NUL
  characters), `copy_matrix`, and `reset_to_x` (fills a block with `'X'` in
  place).
- `ftkit.textutils`: `split` (drops empty pieces), `strchr`, `strrchr`,
  `strjoin`, `strlcpy` and `strlcat` (return the stored text and the length
  the full result would have had), `strmapi`, `striteri` (in place on a
  mutable sequence), `strncmp`, `strnstr`, `strtrim`, `substr`, `is_int`.
  Searches return an index or `None`.
- `ftkit.memory`: `zero`, `calloc`, `mem_chr`, `mem_cmp`, `mem_copy`,
  `mem_move` (overlap-safe, by offsets within one buffer), `mem_set`.
  Byte counts beyond a buffer's length or below zero raise `ValueError`.
- `ftkit.line_reader`: `LineReader(buffer_size=42)` reads from a file
  descriptor with `os.read` and returns one line as `bytes`, newline
  included, keeping leftover bytes per descriptor. `read_line(fd)` returns
  `None` at end of input; `lines(fd)` yields every line. `get_next_line(fd)`
  uses one shared reader.
- `ftkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`,
  `put_unsigned`, `put_hex`, `put_ptr`, `put_nbr_base` write to a text
  stream and return the number of characters written. `put_str(None, ...)`
  writes `(null)` to standard error; `put_ptr` writes `(nil)` for zero.
  `print_formatted(stream, fmt, *args)` supports
  `%c %s %d %i %u %x %X %p %%`; unknown conversions write nothing, and too
  few arguments raise `TypeError`.
- `ftkit.linked`: `LinkedList` of `Node` objects with `append`, `prepend`,
  `clear(delete)`, `last`, `map(func, delete)`, `for_each`, `len()` and
  iteration over contents.
- `ftkit.indexed`: `IndexedList` of `IndexedNode` integers that record their
  position. `add_back`, `add_front` (renumbers), `clear`, `last`, `reindex`,
  `min_value`/`max_value` (`INT_MAX`/`INT_MIN` when empty) and
  `min_index`/`max_index` (`ValueError` when empty). Iteration yields nodes.

## Example

```python
import sys

from ftkit.conversions import atoi
from ftkit.output import print_formatted
from ftkit.textutils import split

words = split("  alpha  beta gamma ", " ")
print_formatted(sys.stdout, "%d words, first is %s\n", len(words), words[0])
print(atoi("   -42abc"))  # -42
```

## What it does not include

This is a library only: it has no command-line program and no interactive
shell.