"""Parsing of a single conversion specification such as ``%-08.3lx``."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

_DIGITS = re.compile(r"[0-9]+")


class FormatError(ValueError):
    """Raised when a format string or its arguments cannot be used."""


class Flag(enum.IntFlag):
    """Flag characters that may follow the ``%`` sign."""

    MINUS = 1
    PLUS = 2
    SPACE = 4
    ZERO = 8
    HASH = 16


_FLAG_CHARS = {
    "-": Flag.MINUS,
    "+": Flag.PLUS,
    " ": Flag.SPACE,
    "0": Flag.ZERO,
    "#": Flag.HASH,
}


class Length(enum.Enum):
    """Length modifiers; the integer ones are listed from strongest to weakest."""

    NONE = "none"
    LL = "ll"
    L = "l"
    H = "h"
    HH = "hh"
    LONG_DOUBLE = "L"


_INTEGER_LENGTHS = (Length.LL, Length.L, Length.H, Length.HH)


class Conversion(enum.Enum):
    """Conversion characters understood by the formatter."""

    CHAR = "c"
    STRING = "s"
    POINTER = "p"
    SIGNED = "d"
    OCTAL = "o"
    UNSIGNED = "u"
    HEX_UPPER = "X"
    HEX_LOWER = "x"
    FLOAT = "f"
    PERCENT = "%"

    @classmethod
    def _missing_(cls, value: object) -> Conversion | None:
        if value == "i":
            return cls.SIGNED
        return None


@dataclass(frozen=True)
class FormatSpec:
    """A parsed conversion specification.

    ``precision`` is ``None`` when no ``.`` was given. ``span`` is the number of
    characters of the format string the specification covers, ``%`` included.
    ``conversion`` is ``None`` when no known conversion character followed.
    """

    flags: Flag = Flag(0)
    width: int = 0
    precision: int | None = None
    modifiers: frozenset[Length] = field(default_factory=frozenset)
    conversion: Conversion | None = None
    span: int = 1

    def has(self, flag: Flag) -> bool:
        """Return whether every bit of *flag* is set."""
        return (self.flags & flag) == flag

    @property
    def length(self) -> Length:
        """The integer length modifier in effect: ll beats l, l beats h, h beats hh."""
        for candidate in _INTEGER_LENGTHS:
            if candidate in self.modifiers:
                return candidate
        return Length.NONE

    @property
    def long_double(self) -> bool:
        """Whether the ``L`` modifier was present."""
        return Length.LONG_DOUBLE in self.modifiers


def parse_spec(text: str, start: int) -> FormatSpec:
    """Parse the specification whose ``%`` sign is at ``text[start]``.

    Flags, width, precision and length modifiers may appear in any order and
    repeat; later widths and precisions replace earlier ones.
    """
    if not 0 <= start < len(text) or text[start] != "%":
        raise FormatError(f"no conversion specification at position {start}")

    end = len(text)
    pos = start + 1
    flags = Flag(0)
    width = 0
    precision: int | None = None
    modifiers: set[Length] = set()

    while True:
        before = pos
        while pos < end and text[pos] in _FLAG_CHARS:
            flags |= _FLAG_CHARS[text[pos]]
            pos += 1

        match = _DIGITS.match(text, pos)
        if match:
            width = int(match.group())
            pos = match.end()

        if pos < end and text[pos] == ".":
            match = _DIGITS.match(text, pos + 1)
            if match:
                precision = int(match.group())
                pos = match.end()
            else:
                precision = 0
                pos += 1

        while pos < end and text[pos] in "hlL":
            char = text[pos]
            doubled = text[pos + 1:pos + 2] == char
            if char == "h":
                modifiers.add(Length.HH if doubled else Length.H)
                pos += 2 if doubled else 1
            elif char == "l":
                modifiers.add(Length.LL if doubled else Length.L)
                pos += 2 if doubled else 1
            else:
                modifiers.add(Length.LONG_DOUBLE)
                pos += 1

        if pos == before:
            break

    conversion: Conversion | None = None
    if pos < end:
        try:
            conversion = Conversion(text[pos])
        except ValueError:
            conversion = None

    span = pos - start + (1 if conversion is not None else 0)
    return FormatSpec(
        flags=flags,
        width=width,
        precision=precision,
        modifiers=frozenset(modifiers),
        conversion=conversion,
        span=span,
    )