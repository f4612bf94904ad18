"""Rendering of the hexadecimal conversions ``x`` and ``X``."""

from __future__ import annotations

from .digits import to_hex
from .intformat import pad_width, truncate
from .spec import Conversion, Flag, FormatSpec

_LOW_WORD = 0xFFFFFFFF


def hex_prefix(spec: FormatSpec, value: int, upper: bool = False) -> str:
    """Return ``0x`` or ``0X`` when the ``#`` flag asks for it, else ``""``.

    The prefix is left out for a zero value. Only the low 32 bits of *value*
    decide this, so a wide value whose low word is zero gets no prefix.
    """
    if spec.has(Flag.HASH) and value & _LOW_WORD:
        return "0X" if upper else "0x"
    return ""


def format_hex(spec: FormatSpec, value: int, upper: bool | None = None) -> str:
    """Render *value* for an ``x`` or ``X`` conversion.

    When *upper* is not given it follows the conversion of *spec*.
    """
    if upper is None:
        upper = spec.conversion is Conversion.HEX_UPPER
    number = truncate(value, spec.length, signed=False)
    precision = -1 if spec.precision is None else spec.precision
    prefix = hex_prefix(spec, number, upper)
    digits = "" if number == 0 and precision == 0 else to_hex(number, upper)
    used = max(precision, len(digits)) + len(prefix)

    parts: list[str] = []
    left_padded = spec.width > used and not spec.has(Flag.MINUS)
    if left_padded:
        if prefix and precision == -1 and spec.has(Flag.ZERO):
            parts.append(prefix)
            prefix = ""
        parts.append(pad_width(spec, "", spec.width - used)[0])
    parts.append(prefix)
    parts.append("0" * max(precision - len(digits), 0))
    parts.append(digits)
    if spec.width > used and not left_padded:
        parts.append(pad_width(spec, "", spec.width - used)[0])
    return "".join(parts)