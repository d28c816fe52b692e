# solong

Support library for a small tile-based puzzle game. It has the low-level
pieces such a game is built on: character and number conversion, byte-buffer
and string helpers with C-library semantics, a singly linked list,
printf-style formatting, a line-at-a-time stream reader, and the check of the
command-line argument that names a map file.

It needs nothing outside the standard library.

## Installing

```
pip install .
```

## Modules

### `solong.chars`

ASCII classification and conversion: `is_alnum`, `is_alpha`, `is_ascii`,
`is_digit`, `is_print`, `to_lower`, `to_upper`. Each takes a character code or
a one-character string; the case functions return the same type they were
given.

`atoi(text)` skips leading whitespace, accepts one sign and reads the leading
digits. On 64-bit overflow it returns -1 for positive input and 0 for negative
input. `itoa(n)` gives the decimal text of a 32-bit int and raises
`OverflowError` outside that range.

```python
from solong.chars import atoi, to_upper

atoi("  -42abc")   # -42
to_upper("q")      # "Q"
```

### `solong.memory`

Helpers over `bytearray`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
`memmove` and `memset`. Ranges outside the buffer raise `IndexError`;
`calloc` raises `MemoryError` when the size would exceed the 32-bit limit.
`memmove(buffer, dst, src, length)` copies within one buffer and handles
overlap. `memchr` returns an index or `None`.

### `solong.strings`

String functions with C semantics over Python strings. Where C returns a
pointer, these return an index, or `None` when nothing is found:
`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`, `strjoin`,
`substr`, `strtrim`, `split`, `strmapi`, `striteri`, `strlcpy`, `strlcat`.

`strlcpy(src, size)` and `strlcat(dst, src, size)` return a pair: the text
that fits in a buffer of `size` characters and the length the full result
would have had.

```python
from solong.strings import split, strlcpy

split("a,,b", ",")     # ["a", "b"]
strlcpy("hello", 3)    # ("he", 5)
```

### `solong.output`

`format_printf(fmt, *args)` expands the conversions `c`, `s`, `p`, `d`, `i`,
`u`, `x`, `X` and `%%`. `%s` of `None` prints `(null)`; an unknown conversion
is dropped and takes no argument; a trailing lone `%` raises `ValueError`, and
too few arguments raise `TypeError`. `printf` writes the result to standard
output and returns its length.

`format_hex`, `format_pointer` and `format_unsigned` format single values;
`put_char`, `put_str`, `put_endl` and `put_nbr` write to a stream, standard
output by default.

```python
from solong.output import format_printf

format_printf("%d items, %x", 3, 255)   # "3 items, ff"
```

### `solong.lines`

`LineReader(stream, buffer_size=42)` reads a text or binary stream in chunks
and returns one line at a time from `next_line()`, keeping the newline, and
`None` once the stream is exhausted. It is also iterable. `read_lines(stream)`
yields the lines with the default read size.

### `solong.linkedlist`

`LinkedList` with `push_front`, `push_back` (both return the new `Node`),
`last`, `len()`, iteration over contents, `clear(delete)`, `iterate(func)` and
`map(func, delete)`. If `func` raises during `map`, the contents already
produced are passed to `delete` before the exception propagates.

### `solong.args`

`validate_args(argv)` takes the arguments after the program name and returns
the map file name. It raises `ArgumentError` (a `ValueError`) when there is no
argument, more than one, a name that does not end in `.ber`, or no name before
the extension.

## What this package does not do

There is no game here yet: the package does not read or validate map files,
does not hold game state or move a player, does not open a window or draw
textures, and installs no command to play with. It provides only the helper
modules listed above.

## Running the tests

```
pip install .[test]
pytest
```