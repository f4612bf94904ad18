"""A fixed-size output buffer that hands full blocks to a sink."""

from __future__ import annotations

from typing import Callable

BUF_SIZE = 512


class OutputBuffer:
    """Collect text and pass it on in blocks of at most ``size`` characters.

    A block is handed to the sink only when the buffer is full and more text
    is waiting, or when :meth:`flush` is called. ``printed`` counts the
    characters handed on so far.
    """

    def __init__(self, sink: Callable[[str], object] | None = None, size: int = BUF_SIZE) -> None:
        if size < 1:
            raise ValueError("buffer size must be positive")
        self._sink = sink
        self._size = size
        self._pending: list[str] = []
        self._pending_len = 0
        self._flushed: list[str] = []
        self.printed = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def pending(self) -> int:
        """Number of characters held but not yet flushed."""
        return self._pending_len

    def write(self, text: str) -> None:
        """Append *text*, flushing whenever the buffer fills up."""
        while text:
            room = self._size - self._pending_len
            chunk, text = text[:room], text[room:]
            if chunk:
                self._pending.append(chunk)
                self._pending_len += len(chunk)
            if text:
                self.flush()

    def repeat(self, char: str, count: int) -> None:
        """Append *char* *count* times; a count below one writes nothing."""
        if len(char) != 1:
            raise ValueError("repeat expects a single character")
        if count > 0:
            self.write(char * count)

    def flush(self) -> int:
        """Hand the held text to the sink and return how many characters it was."""
        if not self._pending_len:
            return 0
        data = "".join(self._pending)
        if self._sink is not None:
            self._sink(data)
        self._flushed.append(data)
        self.printed += len(data)
        self._pending.clear()
        self._pending_len = 0
        return len(data)

    def getvalue(self) -> str:
        """Return everything written so far, flushed or not."""
        return "".join(self._flushed) + "".join(self._pending)

    def __enter__(self) -> OutputBuffer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.flush()