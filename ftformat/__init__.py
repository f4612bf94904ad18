"""printf-style formatting of integers, characters, strings and addresses with flags, width, precision and length modifiers."""

__version__ = "0.1.0"
__all__ = ["buffer", "digits", "hexformat", "intformat", "longarith", "printer", "spec", "textformat"]