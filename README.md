# ftkit

A small library of everyday helpers: ASCII character tests, number parsing
and formatting with C-style integer wrapping, bounded string search and copy,
string building, byte-buffer operations, a singly linked list, a buffered
line reader and a compact `printf`-style formatter.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `ftkit.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`
  (each takes a one-character string or an int code), `is_str_digit`,
  `is_digit_sign`, `is_digit_sign_float`, and `to_lower` / `to_upper`, which
  return a string for a string argument and an int for an int argument.
- `ftkit.conversions`: `atoi` (wraps to signed 32-bit), `atol` (wraps to
  signed 64-bit), `atod` (digits and one decimal point, no exponent),
  `itoa`, `size_base`, `convert_base`. Bases outside 2..36 raise `ValueError`.
- `ftkit.strsearch`: `strchr`, `strrchr` and `strnstr` return an index or
  `None`; `strncmp` returns the difference of the first unequal character
  codes; `strlcpy` and `strlcat` return a `BoundedCopy` named tuple of
  `(text, length)`, where `length` is the length the full result would have.
- `ftkit.strbuild`: `split` (drops empty words), `strjoin`, `strmapi`,
  `striteri` (modifies a mutable sequence in place), `strtrim`, `substr`.
- `ftkit.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`
  and `memmove` on `bytearray` buffers. Counts beyond a buffer raise
  `IndexError`; `calloc` raises `MemoryError` above the signed 32-bit limit.
  `memmove` copies between two offsets of one buffer and handles overlap.
- `ftkit.linked_list`: `Node` and `LinkedList`. The list supports `append`,
  `prepend`, `last`, `clear`, `for_each`, `map`, `len()` and iteration.
  `map` raises `ValueError` if the mapping function returns `None`, after
  passing the contents mapped so far to the `delete` callback.
- `ftkit.lines`: `LineReader` reads a text or binary stream one line at a
  time through a fixed-size buffer (50 by default). Lines keep their
  newline; `read_line` returns `None` at the end of the stream.
- `ftkit.printing`: `sprintf`, `printf`, `format_number`, `format_unsigned`,
  `put_char`, `put_str`, `put_endl`, `put_nbr`. The output functions write to
  standard output unless `out=` is given, and return the number of
  characters written.

## Examples

```python
from ftkit.conversions import atoi, atod, itoa
from ftkit.strbuild import split, strtrim
from ftkit.strsearch import strlcpy
from ftkit.printing import sprintf
from ftkit.linked_list import LinkedList

atoi("  -42abc")            # -42
atod("3.25")                # about 3.25
itoa(-2147483648)           # "-2147483648"

split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
strlcpy("", "abcdef", 4)       # BoundedCopy(text="abc", length=6)

sprintf("%d items, %x hex, %s", 12, 255, "done")  # "12 items, ff hex, done"

numbers = LinkedList([1, 2, 3])
doubled = numbers.map(lambda n: n * 2, None)
list(doubled)               # [2, 4, 6]
len(doubled)                # 3
```

Reading lines:

```python
import io
from ftkit.lines import LineReader

reader = LineReader(io.StringIO("first\nsecond\n"), 50)
for line in reader:
    print(line, end="")
```

## What it does not do

- `sprintf` and `printf` support only `%%`, `%c`, `%s`, `%d`, `%i`, `%u`,
  `%x`, `%X` and `%p`; there are no widths, precisions or flags, and any
  other conversion raises `ValueError`.
- The package is a library only; it installs no command-line program.