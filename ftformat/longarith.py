"""Decimal digit-string arithmetic of arbitrary length."""

from __future__ import annotations

F_LIMIT = 20


def mantissa_digits(mantissa: int, limit: int = F_LIMIT) -> str:
    """Return the first *limit* decimal digits after the point of ``1 / mantissa``."""
    if mantissa <= 0:
        raise ValueError("mantissa must be positive")
    if limit < 0:
        raise ValueError("limit must not be negative")
    if limit == 0:
        return ""
    scale = 10 ** limit
    return str((scale // mantissa) % scale).zfill(limit)


def multiply_digits(digits: str, factor: int) -> str:
    """Multiply the decimal number in *digits* by *factor*.

    The result keeps at least as many digits as the input, so leading zeros
    survive; an empty input gives an empty result.
    """
    if factor < 0:
        raise ValueError("factor must not be negative")
    if not digits:
        return ""
    if not all(char in "0123456789" for char in digits):
        raise ValueError(f"not a decimal digit string: {digits!r}")
    return str(int(digits) * factor).zfill(len(digits))