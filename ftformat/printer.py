"""Formatting of whole format strings, to a string or to a stream."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from .buffer import OutputBuffer
from .hexformat import format_hex
from .intformat import format_octal, format_signed, format_unsigned
from .spec import Conversion, FormatError, FormatSpec, parse_spec
from .textformat import (
    format_char,
    format_percent,
    format_pointer,
    format_string,
)

_Renderer = Callable[[FormatSpec, Any], str]

_RENDERERS: dict[Conversion, _Renderer] = {
    Conversion.CHAR: format_char,
    Conversion.STRING: format_string,
    Conversion.POINTER: format_pointer,
    Conversion.SIGNED: format_signed,
    Conversion.UNSIGNED: format_unsigned,
    Conversion.OCTAL: format_octal,
    Conversion.HEX_LOWER: lambda spec, value: format_hex(spec, value, False),
    Conversion.HEX_UPPER: lambda spec, value: format_hex(spec, value, True),
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    """Yield the pieces of output produced by *fmt* applied to *args*."""
    if fmt is None:
        raise FormatError("format string is missing")
    if not isinstance(fmt, str):
        raise FormatError(f"format must be a string, got {type(fmt).__name__}")
    remaining = iter(args)
    pos = 0
    end = len(fmt)
    while pos < end:
        percent = fmt.find("%", pos)
        if percent == -1:
            yield fmt[pos:]
            return
        if percent > pos:
            yield fmt[pos:percent]
        spec = parse_spec(fmt, percent)
        pos = percent + spec.span
        conversion = spec.conversion
        if conversion is None:
            continue
        if conversion is Conversion.PERCENT:
            yield format_percent(spec)
            continue
        if conversion is Conversion.FLOAT:
            raise FormatError("floating-point conversion is not supported")
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError(
                f"not enough arguments for conversion at position {percent}"
            ) from None
        yield _RENDERERS[conversion](spec, value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with each conversion replaced by the next argument."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to *file* (standard output by default).

    Returns the number of characters written.
    """
    stream = sys.stdout if file is None else file
    with OutputBuffer(stream.write) as buffer:
        for piece in _render(fmt, args):
            buffer.write(piece)
    return buffer.printed