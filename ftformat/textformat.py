"""Rendering of the ``c``, ``s``, ``%`` and ``p`` conversions."""

from __future__ import annotations

import operator

from .digits import to_hex
from .spec import Flag, FormatError, FormatSpec

_NULL_TEXT = "(null)"
_ADDRESS_MASK = (1 << 64) - 1


def _justify(spec: FormatSpec, body: str) -> str:
    """Pad *body* to the field width; zeros only with ``0`` and without ``-``."""
    count = spec.width - len(body)
    if count <= 0:
        return body
    if spec.has(Flag.MINUS):
        return body + " " * count
    fill = "0" if spec.has(Flag.ZERO) else " "
    return fill * count + body


def format_char(spec: FormatSpec, value: object) -> str:
    """Render *value* for a ``c`` conversion.

    An integer is reduced to one byte; a one-character string is used as is.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("character conversion needs a single character")
        char = value
    else:
        try:
            char = chr(operator.index(value) & 0xFF)  # type: ignore[arg-type]
        except TypeError:
            raise FormatError(
                f"character conversion needs a character, got {type(value).__name__}"
            ) from None
    return _justify(spec, char)


def format_string(spec: FormatSpec, value: str | None) -> str:
    """Render *value* for an ``s`` conversion; ``None`` prints as ``(null)``."""
    if value is None:
        value = _NULL_TEXT
    elif not isinstance(value, str):
        raise FormatError(f"string conversion needs a string, got {type(value).__name__}")
    if spec.precision is not None:
        value = value[:spec.precision]
    return _justify(spec, value)


def format_percent(spec: FormatSpec) -> str:
    """Render a literal ``%``, padded to the field width."""
    return _justify(spec, "%")


def format_pointer(spec: FormatSpec, address: int | None) -> str:
    """Render *address* for a ``p`` conversion as ``0x`` and hex digits.

    A precision of zero drops the digits, a larger one pads them with zeros.
    The field is always padded with spaces.
    """
    if address is None:
        address = 0
    try:
        number = operator.index(address) & _ADDRESS_MASK  # type: ignore[arg-type]
    except TypeError:
        raise FormatError(
            f"pointer conversion needs an address, got {type(address).__name__}"
        ) from None
    precision = -1 if spec.precision is None else spec.precision
    digits = "" if precision == 0 else to_hex(number)
    body = "0x" + "0" * max(precision - len(digits), 0) + digits
    if spec.has(Flag.MINUS):
        return body.ljust(spec.width)
    return body.rjust(spec.width)