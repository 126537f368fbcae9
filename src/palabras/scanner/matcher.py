"""Longest-match selection across the rule families.

At each cursor position every rule family reports the end of its longest
match; the longest span wins and rule priority breaks ties:

1. Numeric run          -> TokenType.NUMERIC
2. Word run             -> TokenType.WORD
3. Complex_Context run  -> TokenType.SOUTHEAST_ASIAN
4. Han character        -> TokenType.IDEOGRAPHIC
5. Hiragana character   -> TokenType.HIRAGANA
6. Any one character    -> no token (whitespace, punctuation, CR, LF, ...)

A match always covers at least one character, so the cursor always advances.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from palabras.scanner.classes import IGNORABLE, CharClass, Script, WordBreak
from palabras.tokens import MatchSpan, TokenType

if TYPE_CHECKING:
    from palabras.scanner.classifier import CharClassifier
    from palabras.scanner.source import CharSource

# Word-break classes that can start a numeric or word run
_RUN_STARTERS = frozenset(
    {
        WordBreak.ALETTER,
        WordBreak.NUMERIC,
        WordBreak.KATAKANA,
        WordBreak.EXTENDNUMLET,
    }
)


class RunMatcherMixin:
    """Mixin providing character access and rule selection.

    Rule methods (_match_numeric, _match_word, ...) are provided by the
    rule mixins in palabras.scanner.rules.
    """

    # These will be set by the Tokenizer class
    _source: CharSource | None
    _classifier: CharClassifier

    # Rule methods (provided by rule mixins)
    _match_numeric: Callable[[int], int]
    _match_word: Callable[[int], int]
    _match_complex_context: Callable[[int], int]
    _match_ideographic: Callable[[int], int]
    _match_hiragana: Callable[[int], int]

    # =========================================================================
    # Character access
    # =========================================================================

    def _class_at(self, pos: int) -> CharClass | None:
        """Class of the character at pos, or None at end of input."""
        char = self._source.at(pos)  # type: ignore[union-attr]
        if not char:
            return None
        return self._classifier.classify(ord(char))

    def _skip_ignorable(self, pos: int) -> int:
        """Skip Format/Extend characters starting at pos (WB4)."""
        while True:
            cls = self._class_at(pos)
            if cls is None or cls.word_break not in IGNORABLE:
                return pos
            pos += 1

    def _unit(self, pos: int) -> tuple[WordBreak | None, int]:
        """Word-break class of the character at pos and the end of its extended unit.

        The extended unit is the character plus any Format/Extend characters
        that follow it. Returns (None, pos) at end of input.
        """
        cls = self._class_at(pos)
        if cls is None:
            return None, pos
        return cls.word_break, self._skip_ignorable(pos + 1)

    def _skip_extend_num_let(self, pos: int) -> int:
        """Skip a run of extended ExtendNumLet units starting at pos."""
        while True:
            cls, end = self._unit(pos)
            if cls is not WordBreak.EXTENDNUMLET:
                return pos
            pos = end

    # =========================================================================
    # Rule selection
    # =========================================================================

    def _rules(self) -> tuple[tuple[TokenType, Callable[[int], int]], ...]:
        return (
            (TokenType.NUMERIC, self._match_numeric),
            (TokenType.WORD, self._match_word),
            (TokenType.SOUTHEAST_ASIAN, self._match_complex_context),
            (TokenType.IDEOGRAPHIC, self._match_ideographic),
            (TokenType.HIRAGANA, self._match_hiragana),
        )

    def _match_at(self, start: int) -> MatchSpan | None:
        """Find the longest span at start.

        Args:
            start: Cursor position

        Returns:
            The winning span (type None for the fallback rule), or None at
            end of input.
        """
        first = self._class_at(start)
        if first is None:
            return None

        if (
            first.word_break not in _RUN_STARTERS
            and not first.complex_context
            and first.script is Script.OTHER
        ):
            return MatchSpan(start, start + 1, None)

        best_end = start
        best_type: TokenType | None = None
        for token_type, rule in self._rules():
            end = rule(start)
            # Strictly longer only: earlier rules win ties
            if end > best_end:
                best_end = end
                best_type = token_type

        if best_type is None:
            return MatchSpan(start, start + 1, None)
        return MatchSpan(start, best_end, best_type)
