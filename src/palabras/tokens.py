"""Token and TokenType definitions for the Palabras tokenizer.

The tokenizer produces a stream of Token objects for downstream filters.
Each Token has a type, the matched text, offsets in the original text, and
a position increment.

Thread Safety:
Token and MatchSpan are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Lifetime:
Every advance returns a fresh Token. Tokens stay valid after later advances
and after reset(), at the cost of one small allocation per emitted token.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Token types produced by the tokenizer.

    The value of each member is the fixed type tag downstream filters see.
    Declaration order is rule priority: when two rule families match spans
    of equal length, the earlier type wins.

    """

    NUMERIC = "<NUM>"  # 3.14, 1,000
    WORD = "<ALPHANUM>"  # I've, A1, カタカナ
    SOUTHEAST_ASIAN = "<SOUTHEAST_ASIAN>"  # Thai, Lao, Myanmar, Khmer runs
    IDEOGRAPHIC = "<IDEOGRAPHIC>"  # one Han character
    HIRAGANA = "<HIRAGANA>"  # one Hiragana character

    @property
    def tag(self) -> str:
        """Type tag string, e.g. "<ALPHANUM>"."""
        return self.value


# Tag strings for every emittable token type
TOKEN_TYPES: tuple[str, ...] = tuple(t.tag for t in TokenType)


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """A span matched at the cursor, before the overlong filter.

    Offsets are raw positions in the scanned text (no offset correction).
    A type of None marks the fallback rule: one code point consumed
    without producing a token.

    Attributes:
        start: Start position (inclusive)
        end: End position (exclusive), always > start
        type: Token type, or None for the fallback rule

    """

    start: int
    end: int
    type: TokenType | None

    @property
    def length(self) -> int:
        """Number of code points in the span."""
        return self.end - self.start

    @property
    def emittable(self) -> bool:
        """Whether the span can produce a token."""
        return self.type is not None


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        text: Exact characters of the matched span
        type: The token type (from TokenType enum)
        start_offset: Start offset in the original text (after correction)
        end_offset: End offset in the original text (after correction)
        position_increment: 1 plus the number of overlong spans dropped
            since the previous token

    """

    text: str
    type: TokenType
    start_offset: int
    end_offset: int
    position_increment: int = 1

    @property
    def tag(self) -> str:
        """Type tag string (convenience accessor)."""
        return self.type.tag

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        inc = f", +{self.position_increment}" if self.position_increment != 1 else ""
        return f"Token({self.type.name}, {text!r}, {self.start_offset}:{self.end_offset}{inc})"
