"""Numeric run rule mixin."""

from __future__ import annotations

from collections.abc import Callable

from palabras.scanner.classes import MID_NUMERIC, WordBreak


class NumericRuleMixin:
    """Mixin matching numeric runs.

    Grammar (each unit absorbs trailing Format/Extend, WB4)::

        ExtendNumLet* Numeric ( ExtendNumLet+ Numeric
                              | (MidNum | MidNumLet) Numeric
                              | Numeric )* ExtendNumLet*

    Covers WB8, WB11, WB12, WB13a and WB13b restricted to numbers.
    """

    # Provided by RunMatcherMixin
    _unit: Callable[[int], tuple[WordBreak | None, int]]
    _skip_extend_num_let: Callable[[int], int]

    def _match_numeric(self, start: int) -> int:
        """Find the longest numeric run at start.

        Args:
            start: Cursor position

        Returns:
            End of the match, or start if no numeric run begins here.
        """
        cls, end = self._unit(self._skip_extend_num_let(start))
        if cls is not WordBreak.NUMERIC:
            return start

        pos = end
        while True:
            cls, end = self._unit(pos)
            if cls is WordBreak.NUMERIC:
                pos = end
            elif cls is WordBreak.EXTENDNUMLET:
                connector_end = self._skip_extend_num_let(pos)
                cls, end = self._unit(connector_end)
                if cls is not WordBreak.NUMERIC:
                    # Trailing ExtendNumLet run
                    return connector_end
                pos = end
            elif cls in MID_NUMERIC:
                cls, end = self._unit(end)
                if cls is not WordBreak.NUMERIC:
                    return pos
                pos = end
            else:
                return pos
