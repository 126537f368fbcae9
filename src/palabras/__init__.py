"""
Palabras: Unicode word tokenizer for Python

Splits text into words following the Unicode word-boundary rules
(UAX#29), with practical extensions for CJK and South-East-Asian text:
Han and Hiragana characters become one token each, and Thai, Lao,
Myanmar or Khmer runs stay whole. Zero runtime dependencies; Unicode
property data ships as a pinned snapshot.

Quick Start:
    >>> from palabras import tokenize
    >>> [(t.text, t.tag) for t in tokenize("I've paid 3.14 for 中文")]
    [("I've", '<ALPHANUM>'), ('paid', '<ALPHANUM>'), ('3.14', '<NUM>'),
     ('for', '<ALPHANUM>'), ('中', '<IDEOGRAPHIC>'), ('文', '<IDEOGRAPHIC>')]

    >>> # Pull tokens one at a time and reuse the tokenizer
    >>> from palabras import Tokenizer
    >>> tokenizer = Tokenizer(max_token_length=3)
    >>> tokenizer.reset("abcd efg")
    >>> tokenizer.advance()
    Token(WORD, 'efg', 5:8, +2)
    >>> tokenizer.advance() is None
    True
    >>> tokenizer.end()
    8

Installation:
    pip install palabras
"""

from collections.abc import Callable, Iterator

from palabras.config import DEFAULT_MAX_TOKEN_LENGTH, TokenizerConfig
from palabras.errors import PalabrasError, TableError, TokenizerStateError
from palabras.scanner import (
    CharClass,
    CharClassifier,
    Script,
    Tokenizer,
    TokenizerState,
    WordBreak,
    classify,
    default_classifier,
)
from palabras.scanner.source import TextSource
from palabras.tables import UNICODE_VERSION, PropertyTables, available_versions, load_tables
from palabras.tokens import TOKEN_TYPES, MatchSpan, Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str | TextSource,
    *,
    max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH,
    offset_correction: Callable[[int], int] | None = None,
) -> Iterator[Token]:
    """Tokenize text or a text stream.

    Args:
        source: Input text, or a stream with a read(size) method
        max_token_length: Longer spans are dropped (see Token.position_increment)
        offset_correction: Maps raw offsets back to the original text

    Returns:
        Iterator over the tokens, in input order.

    Example:
        >>> [t.text for t in tokenize("don't stop")]
        ["don't", 'stop']
    """
    tokenizer = Tokenizer(
        source,
        max_token_length=max_token_length,
        offset_correction=offset_correction,
    )
    return iter(tokenizer)


__all__ = [
    "DEFAULT_MAX_TOKEN_LENGTH",
    "TOKEN_TYPES",
    "UNICODE_VERSION",
    "CharClass",
    "CharClassifier",
    "MatchSpan",
    "PalabrasError",
    "PropertyTables",
    "Script",
    "TableError",
    "Token",
    "TokenType",
    "Tokenizer",
    "TokenizerConfig",
    "TokenizerState",
    "TokenizerStateError",
    "WordBreak",
    "__version__",
    "available_versions",
    "classify",
    "default_classifier",
    "load_tables",
    "tokenize",
]
