"""Tokenizer lifecycle states."""

from __future__ import annotations

from enum import Enum, auto


class TokenizerState(Enum):
    """Tokenizer lifecycle states.

    - CLOSED: No input bound; only reset() is valid
    - READY: Input bound, more tokens may follow
    - EXHAUSTED: End of input reached; advance() returns None, end() is valid

    """

    CLOSED = auto()
    READY = auto()
    EXHAUSTED = auto()
