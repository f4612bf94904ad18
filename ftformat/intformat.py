"""Rendering of the integer conversions ``d``, ``i``, ``u`` and ``o``."""

from __future__ import annotations

import operator

from .digits import to_decimal, to_octal
from .spec import Flag, FormatError, FormatSpec, Length

_BITS = {
    Length.NONE: 32,
    Length.LL: 64,
    Length.L: 64,
    Length.H: 16,
    Length.HH: 8,
}


def _as_int(value: object) -> int:
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise FormatError(f"integer conversion needs an integer, got {type(value).__name__}") from None


def _precision(spec: FormatSpec) -> int:
    return -1 if spec.precision is None else spec.precision


def truncate(value: int, length: Length, signed: bool) -> int:
    """Reduce *value* to the integer type selected by *length*.

    Without a modifier the type is 32 bits wide, ``l`` and ``ll`` give 64,
    ``h`` 16 and ``hh`` 8. Signed types use two's complement.
    """
    bits = _BITS.get(length)
    if bits is None:
        raise FormatError(f"length modifier {length.value!r} does not apply to integers")
    value = _as_int(value)
    mask = (1 << bits) - 1
    result = value & mask
    if signed and result >> (bits - 1):
        result -= 1 << bits
    return result


def pad_width(spec: FormatSpec, sign: str, count: int) -> tuple[str, str]:
    """Return the width padding and the sign still left to print.

    Zeros are used only with the ``0`` flag, no ``-`` flag and no precision;
    in that case the sign goes in front of the zeros and is used up.
    """
    zero_fill = spec.precision is None and not spec.has(Flag.MINUS) and spec.has(Flag.ZERO)
    fill = "0" if zero_fill else " "
    prefix = ""
    if zero_fill and sign:
        prefix, sign = sign, ""
    return prefix + fill * max(count, 0), sign


def pad_precision(sign: str, count: int) -> str:
    """Return *sign* followed by *count* zeros of precision padding."""
    return sign + "0" * max(count, 0)


def _assemble(spec: FormatSpec, sign: str, digits: str, precision: int) -> str:
    used = max(precision, len(digits)) + len(sign)
    parts: list[str] = []
    left_padded = False
    if spec.width > used and not spec.has(Flag.MINUS):
        padding, sign = pad_width(spec, sign, spec.width - used)
        parts.append(padding)
        left_padded = True
    parts.append(pad_precision(sign, precision - len(digits)))
    parts.append(digits)
    if spec.width > used and not left_padded:
        parts.append(pad_width(spec, "", spec.width - used)[0])
    return "".join(parts)


def _digits(magnitude: int, precision: int, render) -> str:
    if magnitude == 0 and precision == 0:
        return ""
    return render(magnitude)


def format_signed(spec: FormatSpec, value: int) -> str:
    """Render *value* for a ``d`` or ``i`` conversion."""
    number = truncate(value, spec.length, signed=True)
    precision = _precision(spec)
    if number < 0:
        sign = "-"
    elif spec.has(Flag.PLUS):
        sign = "+"
    elif spec.has(Flag.SPACE):
        sign = " "
    else:
        sign = ""
    digits = _digits(abs(number), precision, to_decimal)
    return _assemble(spec, sign, digits, precision)


def format_unsigned(spec: FormatSpec, value: int) -> str:
    """Render *value* for a ``u`` conversion; no sign is ever printed."""
    number = truncate(value, spec.length, signed=False)
    precision = _precision(spec)
    digits = _digits(number, precision, to_decimal)
    return _assemble(spec, "", digits, precision)


def format_octal(spec: FormatSpec, value: int) -> str:
    """Render *value* for an ``o`` conversion, with a leading zero under ``#``."""
    number = truncate(value, spec.length, signed=False)
    precision = _precision(spec)
    digits = _digits(number, precision, to_octal)
    sign = ""
    if spec.has(Flag.HASH):
        if number == 0:
            sign = "0" if precision == 0 else ""
        else:
            sign = "0"
            if precision > len(digits):
                precision -= 1
    return _assemble(spec, sign, digits, precision)