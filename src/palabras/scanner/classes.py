"""Character classes and property value aliases.

This module defines the boundary-relevant classes a code point can take and
the mapping from UCD property value names onto them.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple


class WordBreak(Enum):
    """Word_Break classes used by the boundary rules.

    This is the Unicode 6.0 value set. Values introduced later are folded
    onto it by WORD_BREAK_ALIASES.

    """

    ALETTER = auto()
    NUMERIC = auto()
    KATAKANA = auto()
    MIDLETTER = auto()  # : · (letters only)
    MIDNUMLET = auto()  # . ' (letters and numbers)
    MIDNUM = auto()  # , ; (numbers only)
    EXTENDNUMLET = auto()  # _
    FORMAT = auto()  # soft hyphen, bidi marks
    EXTEND = auto()  # combining marks
    CR = auto()
    LF = auto()
    NEWLINE = auto()
    OTHER = auto()


class Script(Enum):
    """Script classes the singleton rules care about."""

    HAN = auto()
    HIRAGANA = auto()
    OTHER = auto()


class CharClass(NamedTuple):
    """Classification of one code point.

    Attributes:
        word_break: Word_Break class
        script: Script class
        complex_context: True if Line_Break is Complex_Context (SA)

    """

    word_break: WordBreak
    script: Script
    complex_context: bool


# UCD Word_Break value names -> WordBreak. Unlisted names map to OTHER.
WORD_BREAK_ALIASES: dict[str, WordBreak] = {
    "ALetter": WordBreak.ALETTER,
    "Hebrew_Letter": WordBreak.ALETTER,
    "Numeric": WordBreak.NUMERIC,
    "Katakana": WordBreak.KATAKANA,
    "MidLetter": WordBreak.MIDLETTER,
    "MidNumLet": WordBreak.MIDNUMLET,
    "Single_Quote": WordBreak.MIDNUMLET,  # U+0027 was MidNumLet before 6.1
    "MidNum": WordBreak.MIDNUM,
    "ExtendNumLet": WordBreak.EXTENDNUMLET,
    "Format": WordBreak.FORMAT,
    "Extend": WordBreak.EXTEND,
    "ZWJ": WordBreak.EXTEND,  # split out of Extend in 9.0
    "CR": WordBreak.CR,
    "LF": WordBreak.LF,
    "Newline": WordBreak.NEWLINE,
}

SCRIPT_ALIASES: dict[str, Script] = {
    "Han": Script.HAN,
    "Hiragana": Script.HIRAGANA,
}

COMPLEX_CONTEXT_VALUES = frozenset({"SA", "Complex_Context"})

# Classes absorbed into the preceding character (WB4)
IGNORABLE = frozenset({WordBreak.FORMAT, WordBreak.EXTEND})

# Connectors between letters (WB6, WB7)
MID_LETTER = frozenset({WordBreak.MIDLETTER, WordBreak.MIDNUMLET})

# Connectors between numbers (WB11, WB12)
MID_NUMERIC = frozenset({WordBreak.MIDNUM, WordBreak.MIDNUMLET})

OTHER_CLASS = CharClass(WordBreak.OTHER, Script.OTHER, False)
