# amoa

A small toolbox of helpers: ASCII character classes, lenient integer
parsing with 32- and 64-bit wrap-around, string splitting and trimming,
bounded string search and copy, byte-buffer operations, a minimal
`printf`, a buffered line reader for file descriptors and a singly
linked list. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `amoa.chartype`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_lower`, `to_upper`. Each accepts a one-character string
  or an integer code; the case converters return the same kind they were
  given and change only ASCII letters.
- `amoa.integers`: `atoi`, `atol`, `int_abs`, `int_len`, `itoa`, and the
  constants `INT_MIN`, `INT_MAX`, `LONG_MIN`, `LONG_MAX`. Parsing skips
  leading whitespace, accepts one sign and stops at the first non-digit;
  `atoi` wraps into the 32-bit range and `atol` into the 64-bit range.
  `itoa`, `int_len` and `int_abs` raise `OverflowError` for values outside
  the 32-bit range, and `int_abs(INT_MIN)` wraps back to `INT_MIN`.
- `amoa.output`: `to_base`, `put_char`, `put_str`, `put_endl`, `put_nbr`,
  `put_nbr_base`, and the digit sets `DECIMAL`, `HEX_LOWER`, `HEX_UPPER`.
  The `put_*` functions write to any text stream, standard output by
  default.
- `amoa.printf`: `format_printf`, `printf`, `print_lines`. The supported
  conversions are `%c %s %p %d %i %u %x %X %%`. A `None` string prints as
  `(null)` and a `None` or zero pointer as `(nil)`; an unknown conversion
  prints nothing. `printf` returns the number of characters written.
- `amoa.strings`: `split`, `trim`, `substr`, `join`, `map_indexed`.
  `split` never returns empty pieces.
- `amoa.strsearch`: `find_char`, `rfind_char`, `compare`, `compare_n`,
  `find_bounded`, `bounded_concat`, `bounded_copy`. Strings behave as if
  NUL-terminated: searching for `"\0"` finds `len(text)`. Searches return
  an index or `None`; the bounded copy and concatenation return the new
  string together with the length the untruncated result would have had.
- `amoa.memory`: `mem_find`, `mem_compare`, `mem_copy`, `mem_move`,
  `mem_set`, `zero`, `zeroed`, `swap_bytes`. Reading functions take any
  bytes-like buffer; those that change a buffer need a mutable one such
  as `bytearray`. Asking for more bytes than a buffer holds raises
  `ValueError`.
- `amoa.lines`: `LineReader` and `get_next_line`. Lines are returned as
  `bytes` and keep their trailing newline; `None` marks the end of input.
  `get_next_line` remembers unread data per descriptor, for descriptors
  0 to 127.
- `amoa.linked`: `Node` and `LinkedList`, with `add_back`, `add_front`,
  `last`, `clear`, `iterate`, `map`, `len()` and iteration over contents.

## Examples

```python
from amoa.strings import split, trim
from amoa.integers import atoi
from amoa.printf import format_printf

split("  a b  c ", " ")           # ['a', 'b', 'c']
trim("xxhixx", "x")               # 'hi'
atoi("  -42abc")                  # -42
format_printf("%d-%x", 10, 255)   # '10-ff'
```

```python
import os
from amoa.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 64):
    print(line.decode(), end="")
os.close(fd)
```

```python
from amoa.linked import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
doubled = items.map(lambda x: x * 2)
list(doubled)                     # [0, 2, 4, 6]
```

## What it does not do

This is a library only: it installs no command-line program. `printf`
handles only the conversions listed above, without flags, widths or
precisions.