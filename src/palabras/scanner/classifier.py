"""Code point classification against a pinned property snapshot.

The classifier turns a code point into the CharClass the boundary rules
consume. It is data-driven: all knowledge of which character belongs to
which class lives in the PropertyTables it was built from.

Thread Safety:
A classifier is shared by every tokenizer using the same snapshot. The memo
dict only ever gains entries that are pure functions of the code point, so
concurrent writes are idempotent.

"""

from __future__ import annotations

import threading

from palabras.scanner.classes import (
    COMPLEX_CONTEXT_VALUES,
    OTHER_CLASS,
    SCRIPT_ALIASES,
    WORD_BREAK_ALIASES,
    CharClass,
    Script,
    WordBreak,
)
from palabras.tables import UNICODE_VERSION, PropertyTables, load_tables
from palabras.tables.ucd import MAX_CODE_POINT

# Code points classified eagerly at construction (Latin-1)
_PRELOAD_LIMIT = 0x100


class CharClassifier:
    """Resolve code points to boundary-relevant classes.

    Usage:
        >>> classifier = CharClassifier(load_tables())
        >>> classifier.classify(ord("a")).word_break
        <WordBreak.ALETTER: 1>
        >>> classifier.classify(ord("中")).script
        <Script.HAN: 1>

    """

    __slots__ = ("_tables", "_memo")

    def __init__(self, tables: PropertyTables) -> None:
        self._tables = tables
        self._memo: dict[int, CharClass] = {}
        for cp in range(_PRELOAD_LIMIT):
            self._memo[cp] = self._lookup(cp)

    @property
    def version(self) -> str:
        """Unicode version of the underlying snapshot."""
        return self._tables.version

    def classify(self, code_point: int) -> CharClass:
        """Classify a code point.

        Total over all integers: anything outside the Unicode scalar range,
        surrogates, and unassigned code points classify as OTHER.

        Args:
            code_point: Integer code point

        Returns:
            CharClass for the code point.
        """
        cls = self._memo.get(code_point)
        if cls is None:
            # Out-of-range values are not memoized
            if not 0 <= code_point <= MAX_CODE_POINT:
                return OTHER_CLASS
            cls = self._lookup(code_point)
            self._memo[code_point] = cls
        return cls

    def classify_char(self, char: str) -> CharClass:
        """Classify a one-character string."""
        return self.classify(ord(char))

    def _lookup(self, cp: int) -> CharClass:
        tables = self._tables
        wb_name = tables.word_break.lookup(cp)
        script_name = tables.script.lookup(cp)
        lb_name = tables.line_break.lookup(cp)
        return CharClass(
            WORD_BREAK_ALIASES.get(wb_name, WordBreak.OTHER) if wb_name else WordBreak.OTHER,
            SCRIPT_ALIASES.get(script_name, Script.OTHER) if script_name else Script.OTHER,
            lb_name in COMPLEX_CONTEXT_VALUES,
        )

    def __repr__(self) -> str:
        return f"CharClassifier(unicode={self.version!r})"


_default: CharClassifier | None = None
_default_lock = threading.Lock()


def default_classifier() -> CharClassifier:
    """Return the shared classifier for the pinned snapshot.

    Built on first call; later calls return the same instance.
    """
    global _default
    classifier = _default
    if classifier is not None:
        return classifier
    with _default_lock:
        if _default is None:
            _default = CharClassifier(load_tables(UNICODE_VERSION))
        return _default


def classify(code_point: int) -> CharClass:
    """Classify a code point with the default classifier."""
    return default_classifier().classify(code_point)
