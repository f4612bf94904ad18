# ftformat

A small printf-style formatter. It reads conversion specifications of the
form `%[flags][width][.precision][length]conversion` and renders integers,
characters, strings and addresses. Integers wrap around to the width of the
type that the length modifier selects.

## Supported syntax

- Flags: `-`, `+`, space, `0`, `#`
- Width and precision: decimal numbers, for example `%8.3d`. A `.` with no
  digits after it means precision 0.
- Length modifiers: `hh` (8 bits), `h` (16 bits), none (32 bits), `l` and
  `ll` (64 bits). `L` is accepted, and the integer conversions ignore it.
- Flags, width, precision and length modifiers may come in any order and may
  repeat. A later width or precision replaces an earlier one.

| Conversion | Output |
| --- | --- |
| `c` | a character: a one-character string, or an integer reduced to one byte |
| `s` | a string, cut to the precision; `None` prints as `(null)` |
| `p` | an address as `0x` and lower-case hex digits; `None` prints as `0x0` |
| `d`, `i` | a signed decimal |
| `u` | an unsigned decimal |
| `o` | an octal number; `#` adds a leading `0` |
| `x`, `X` | a hexadecimal number; `#` adds `0x` or `0X` when the value is not zero |
| `%` | a literal percent sign, padded to the width |

If the character that ends a specification is not one of these, the
specification is consumed and produces no output.

## Usage

```python
from ftformat.printer import sprintf, printf

sprintf("%-6s|%05d|%#x", "ab", -42, 255)
# 'ab    |-0042|0xff'

sprintf("%hhd %hu", 300, -1)
# '44 65535'

count = printf("%s has %d items\n", "cart", 3)  # writes to stdout
```

`sprintf(fmt, *args)` returns the formatted string.
`printf(fmt, *args, file=None)` writes the text to `file`, or to standard
output when no file is given. It writes through an `OutputBuffer` in blocks
of up to 512 characters and returns the number of characters written.

Errors raise `ftformat.spec.FormatError`, a subclass of `ValueError`. This
happens when there are too few arguments, when an argument has the wrong
type for its conversion, or when the format is not a string.

## Lower-level pieces

- `ftformat.spec`: `parse_spec(text, start)` parses the specification whose
  `%` is at `text[start]` into a frozen `FormatSpec` with `flags` (a `Flag`),
  `width`, `precision` (`None` when absent), `modifiers`, `conversion` (a
  `Conversion` or `None`) and `span`. The `length` property gives the
  strongest integer modifier, and `has(flag)` tests a flag.
- `ftformat.intformat`: `format_signed`, `format_unsigned`, `format_octal`
  and the helpers `truncate`, `pad_width` and `pad_precision`.
- `ftformat.hexformat`: `format_hex` and `hex_prefix`.
- `ftformat.textformat`: `format_char`, `format_string`, `format_percent`
  and `format_pointer`.
- `ftformat.buffer`: `OutputBuffer`, a fixed-size buffer with `write`,
  `repeat`, `flush` and `getvalue`. It passes full blocks on to a sink
  callable and can be used as a context manager that flushes on exit.
- `ftformat.digits`: `to_decimal`, `to_octal` and `to_hex` for non-negative
  integers.
- `ftformat.longarith`: `mantissa_digits(mantissa, limit)` gives the first
  `limit` decimal digits of `1 / mantissa`. `multiply_digits(digits, factor)`
  multiplies a decimal digit string by an integer and keeps its leading zeros.

## What it does not do

Floating-point output is not provided. The `f` conversion is parsed, and
`sprintf` and `printf` raise `FormatError` when they meet it. There is no
command-line tool; the package is used as a library.

## Running the tests

```
pip install -e ".[test]"
pytest
```