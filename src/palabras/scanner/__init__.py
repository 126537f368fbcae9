"""Modular UAX#29 word scanner for Palabras.

This package provides a pull-based tokenizer that applies the Unicode
word-boundary rules, keeps South-East-Asian runs intact, and splits Han
and Hiragana text into one token per character.

Architecture:
scanner/
├── __init__.py          # Re-exports Tokenizer, TokenizerState, classify
├── core.py              # Tokenizer class (mixin composition + lifecycle)
├── states.py            # TokenizerState enum
├── classes.py           # WordBreak/Script enums, UCD value aliases
├── classifier.py        # CharClassifier over a property snapshot
├── source.py            # CharSource: absolute-offset window over the input
├── matcher.py           # Longest match across rule families
├── overlong.py          # max_token_length filter, position increments
└── rules/               # Rule-family mixins
    ├── numeric.py       # Numeric runs (WB8, WB11, WB12)
    ├── word.py          # Letter/number/katakana runs (WB5-WB13b)
    ├── complex.py       # Complex_Context runs
    └── singleton.py     # Han and Hiragana singletons

Usage:
    >>> from palabras.scanner import Tokenizer
    >>> [t.text for t in Tokenizer("Hello, world")]
    ['Hello', 'world']

"""

from palabras.scanner.classes import CharClass, Script, WordBreak
from palabras.scanner.classifier import CharClassifier, classify, default_classifier
from palabras.scanner.core import Tokenizer
from palabras.scanner.source import CharSource
from palabras.scanner.states import TokenizerState

__all__ = [
    "CharClass",
    "CharClassifier",
    "CharSource",
    "Script",
    "Tokenizer",
    "TokenizerState",
    "WordBreak",
    "classify",
    "default_classifier",
]
