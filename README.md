# pypipex

`pypipex` is a set of small helpers with C-library semantics. They cover
character tests, number parsing, string routines in which a NUL character
ends a string, in-place byte-buffer operations and a singly linked list.

## Installation

```
pip install .
```

## Modules

### `pypipex.chars`

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` each take a
  one-character string or an int code point.
- `to_upper` and `to_lower` change only ASCII letters. The result has the
  same form as the argument.
- `atoi(text)` parses a leading decimal integer and wraps the result to
  32 bits.
- `is_int(text)` is true when the whole text is an integer that fits in
  32 bits.
- `strtol(text)` returns `(value, end)`. On overflow the value is clamped
  to the 32-bit limit of its sign.
- `itoa(n)` renders an integer in decimal.

### `pypipex.strings`

- Searching and comparing: `strchr`, `strrchr` and `strnstr` return an
  index or `None`. `strncmp` returns -1, 0 or 1.
- `strlcpy` and `strlcat` return the new buffer contents together with the
  length the full result would have had.
- Building new strings: `substr`, `strjoin`, `strtrim`, `split` (empty words
  are dropped) and `strmapi`.
- `striteri` updates a mutable sequence of characters in place.

```python
from pypipex.strings import split, strjoin

split("  ls  -l ", " ")   # ['ls', '-l']
strjoin("/usr/bin/", "ls")  # '/usr/bin/ls'
```

### `pypipex.memory`

- `memset`, `bzero`, `memcpy` and `memmove` modify a `bytearray` in place
  and return it. `memmove` works on overlapping ranges within one buffer.
- `memchr` returns the offset of the first matching byte, or `None`.
- `memcmp` returns the difference of the first pair of bytes that differ.
- `calloc(nmemb, size)` returns a zeroed buffer. It raises `OverflowError`
  when the total size exceeds the 32-bit int limit.
- Ranges that fall outside the buffer raise `IndexError`.

### `pypipex.linkedlist`

`LinkedList` is a singly linked list of `Node` objects. It provides:

- adding items with `push_front` and `push_back`;
- `len()` and iteration;
- `last()`, which returns the final node;
- `clear(release)`, `for_each(func)` and `map(func, release)`. If `func`
  raises during `map`, the items mapped so far are passed to `release`.

## What this package does not do

There is no command-line tool. The package does not start processes and
does not connect commands through pipes. It does not write to file
descriptors. Only the library helpers listed above are provided.

## Running the tests

```
pip install .[test]
pytest
```