"""Digit strings for non-negative integers in decimal, octal and hexadecimal."""

from __future__ import annotations


def _check(value: int) -> None:
    if value < 0:
        raise ValueError("digits are produced for non-negative values only")


def to_decimal(value: int) -> str:
    """Decimal digits of *value*; zero gives ``"0"``."""
    _check(value)
    return str(value)


def to_octal(value: int) -> str:
    """Octal digits of *value*, without prefix."""
    _check(value)
    return format(value, "o")


def to_hex(value: int, upper: bool = False) -> str:
    """Hexadecimal digits of *value*, in upper case when *upper* is true."""
    _check(value)
    return format(value, "X" if upper else "x")