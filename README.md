# miniprintf

A small printf-style formatter. Integers behave like C integers of a fixed
width (16, 32 or 64 bits). The formatter accepts a few flags and has some
conversions that the C library lacks: binary, reversed strings, ROT13 and
strings with escaped bytes.

## Installing

```
pip install .
```

## Use

```python
from miniprintf.printer import render, printf

text = render("%d items, %b in binary\n", 5, 5)
# text == "5 items, 101 in binary\n"

count = printf("%R\n", "Hello")   # writes "Uryyb\n" to standard output
# count == 6
```

- `render(fmt, *args)` returns the formatted text as a string.
- `printf(fmt, *args, file=None)` writes the formatted text to `file`. When
  `file` is not given, it writes to standard output. It returns the number
  of characters written.

Errors:

- A format that ends in a lone `%` raises `miniprintf.printer.FormatError`
  (a `ValueError`). So does a format that ends in `"% "`. Its `partial`
  attribute holds the text rendered before the fault. `printf` writes that
  text before it re-raises.
- Too few arguments for a conversion raise `TypeError`.
- An unknown conversion is not an error. The `%` stays in the output, and
  the characters after it are copied as ordinary text.

## Conversions

| Specifier | Output |
|-----------|--------|
| `%c` | one character, given as a one-character string or as a code (taken modulo 256) |
| `%s` | a string; `None` prints `(null)` |
| `%d`, `%i` | signed decimal, 32-bit |
| `%u` | unsigned decimal, 32-bit |
| `%b` | binary, 32-bit |
| `%o`, `%x`, `%X` | octal, lower-case hex, upper-case hex, 32-bit |
| `%S` | a string with bytes below 32 or from 127 up shown as `\xHH` (UTF-8 for `str`) |
| `%p` | an address as `0x...` in lower-case hex; `None` or `0` prints `(nil)` |
| `%r` | the string reversed; `None` prints `(llun)` |
| `%R` | the string in ROT13; `None` prints `(avyy)` |
| `%%` | a literal `%` |

Length modifiers:

- `l` (`%ld %li %lu %lo %lx %lX`) makes the conversion 64-bit.
- `h` (`%hd %hi %hu %ho %hx %hX`) makes it 16-bit.
- On its own, `%l` or `%h` prints a `%` and takes no argument.

Flags:

- `#` before `o`, `x` or `X` adds a `0`, `0x` or `0X` prefix. Zero still
  prints as plain `0`.
- `+` before `d` or `i` puts `+` in front of non-negative numbers.
- A space before `d` or `i` puts a space in front of non-negative numbers.
  The combinations `" +"` and `"+ "` behave like `+`.
- These flags are accepted before `u`, `o`, `x` and `X` but change
  nothing there. `% %` prints `%`.

Negative numbers in octal, hex and binary are shown in two's complement at
the conversion's width. Integers that do not fit the width wrap around, as
they would in C.

## Building blocks

Each conversion can also be used on its own:

- `miniprintf.digits` has `to_binary`, `binary_to_hex`, `binary_to_octal`
  and `strip_leading_zeros`.
- `miniprintf.radix` has `format_binary`, `format_octal`, `format_hex`,
  `format_alt_octal`, `format_alt_hex` and `format_address`.
- `miniprintf.integers` has `format_signed` and `format_unsigned`.
- `miniprintf.text` has `format_char`, `format_percent`, `format_string`,
  `format_reversed`, `format_rot13` and `format_escaped`.
- `miniprintf.specifiers` has `match_specifier(fmt, index)`. It returns the
  `Specifier` that a format string continues with at `index`, or `None`.
  `Specifier.render(args)` takes its value from an iterator.

## What it does not do

These parts of the C `printf` family are not supported:

- field widths, precision and zero padding
- floating-point conversions
- `%n`

There is no command-line program. The package is a library only.

## Tests

```
pip install .[test]
pytest
```