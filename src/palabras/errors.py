"""Exception classes for Palabras.

Provides standardized exceptions for error handling throughout Palabras.
Read failures from an input stream are not wrapped; they propagate
unchanged out of ``Tokenizer.advance()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from palabras.scanner.states import TokenizerState


class PalabrasError(Exception):
    """Base exception for all Palabras errors.

    Subclass this for specific error categories.
    """

    pass


class TokenizerStateError(PalabrasError):
    """Operation called in a state that does not allow it.

    Raised for programming errors such as calling ``advance()`` on a
    closed tokenizer or ``end()`` before the input is exhausted.
    """

    def __init__(self, operation: str, state: TokenizerState) -> None:
        """Initialize state error.

        Args:
            operation: Name of the rejected operation (e.g., "advance")
            state: State the tokenizer was in when the call was made
        """
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot call {operation}() while tokenizer is {state.name}")


class TableError(PalabrasError):
    """Malformed or missing Unicode property table data.

    Raised while loading a property snapshot, never while tokenizing.
    """

    def __init__(
        self,
        message: str,
        source_file: str | None = None,
        lineno: int | None = None,
    ) -> None:
        """Initialize table error with optional location.

        Args:
            message: Error description
            source_file: Table file being read (optional)
            lineno: Line number in the table file (1-indexed, optional)
        """
        self.message = message
        self.source_file = source_file
        self.lineno = lineno

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
