"""Word run rule mixin."""

from __future__ import annotations

from collections.abc import Callable

from palabras.scanner.classes import MID_LETTER, MID_NUMERIC, WordBreak

_ALNUM = frozenset({WordBreak.ALETTER, WordBreak.NUMERIC})


class WordRuleMixin:
    """Mixin matching word runs.

    Grammar (each unit absorbs trailing Format/Extend, WB4)::

        ExtendNumLet* Group ( ExtendNumLet+ Group )* ExtendNumLet*

        Group   = Katakana ( ExtendNumLet* Katakana )*
                | ( Numbers | Letters )+
        Numbers = Numeric ( ExtendNumLet+ Numeric | MidNumeric Numeric | Numeric )*
        Letters = ALetter ( ExtendNumLet+ ALetter | MidLetter ALetter | ALetter )*

    Letters join across MidLetter/MidNumLet (WB6, WB7), numbers across
    MidNum/MidNumLet (WB11, WB12), letters and numbers touch directly
    (WB9, WB10), Katakana joins Katakana (WB13), and ExtendNumLet joins
    any of them (WB13a, WB13b). Katakana never touches letters or numbers
    without an ExtendNumLet in between.

    The scan below is the deterministic form of that grammar: each step
    looks at most one unit past a connector, so the last accepted position
    is the longest match.
    """

    # Provided by RunMatcherMixin
    _unit: Callable[[int], tuple[WordBreak | None, int]]
    _skip_extend_num_let: Callable[[int], int]

    def _match_word(self, start: int) -> int:
        """Find the longest word run at start.

        Args:
            start: Cursor position

        Returns:
            End of the match, or start if no word run begins here.
        """
        pos = self._skip_extend_num_let(start)
        accept = start
        # Class of the last unit consumed; None before the first core unit
        prev: WordBreak | None = None

        while True:
            cls, end = self._unit(pos)

            if cls is WordBreak.KATAKANA:
                if prev in _ALNUM:
                    break
            elif cls in _ALNUM:
                if prev is WordBreak.KATAKANA:
                    break
            elif cls is WordBreak.EXTENDNUMLET:
                # Only reachable after a core unit: the leading run was skipped
                pos = accept = self._skip_extend_num_let(pos)
                prev = WordBreak.EXTENDNUMLET
                continue
            elif (prev is WordBreak.ALETTER and cls in MID_LETTER) or (
                prev is WordBreak.NUMERIC and cls in MID_NUMERIC
            ):
                after, after_end = self._unit(end)
                if after is not prev:
                    break
                pos = accept = after_end
                continue
            else:
                break

            pos = accept = end
            prev = cls

        return accept
