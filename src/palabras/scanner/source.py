"""Character window over the tokenizer input.

The matcher addresses characters by absolute offset. CharSource serves those
offsets from an in-memory string, or from a text stream that is read lazily
in chunks as the matcher looks ahead. Consumed text is released so a stream
is never held in memory in full.

Exceptions raised by the stream's read() are not caught here.
"""

from __future__ import annotations

from typing import Protocol

from palabras.config import DEFAULT_READ_SIZE


class TextSource(Protocol):
    """Anything with a text read(size) method (io.StringIO, open(..., "r"))."""

    def read(self, size: int = -1, /) -> str: ...


class CharSource:
    """Absolute-offset access to input characters.

    Usage:
        >>> src = CharSource("abc")
        >>> src.at(1), src.at(3)
        ('b', '')
        >>> src.text(0, 2)
        'ab'

    """

    __slots__ = ("_buffer", "_base", "_reader", "_read_size", "_eof")

    def __init__(self, source: str | TextSource, read_size: int = DEFAULT_READ_SIZE) -> None:
        """Bind to a string or a text stream.

        Args:
            source: Input text, or a stream with a read(size) method
            read_size: Characters requested per read() call
        """
        self._base = 0
        self._read_size = read_size
        if isinstance(source, str):
            self._buffer = source
            self._reader: TextSource | None = None
            self._eof = True
        else:
            self._buffer = ""
            self._reader = source
            self._eof = False

    def at(self, pos: int) -> str:
        """Character at absolute offset pos, or "" past the end of input."""
        idx = pos - self._base
        while idx >= len(self._buffer):
            if self._eof:
                return ""
            self._fill()
        return self._buffer[idx]

    def text(self, start: int, end: int) -> str:
        """Characters in [start, end). Both offsets must be already buffered."""
        base = self._base
        return self._buffer[start - base : end - base]

    def release(self, pos: int) -> None:
        """Allow text before pos to be discarded (streams only)."""
        if self._reader is None:
            return
        consumed = pos - self._base
        # Compact only once the dead prefix outweighs the live tail
        if consumed > 0 and consumed * 2 >= len(self._buffer):
            self._buffer = self._buffer[consumed:]
            self._base = pos

    @property
    def buffered(self) -> int:
        """Number of characters currently held in memory."""
        return len(self._buffer)

    def _fill(self) -> None:
        chunk = self._reader.read(self._read_size)  # type: ignore[union-attr]
        if not isinstance(chunk, str):
            raise TypeError(f"input stream read() returned {type(chunk).__name__}, expected str")
        if chunk:
            self._buffer += chunk
        else:
            self._eof = True
            self._reader = None
