"""South-East-Asian (Complex_Context) run rule mixin."""

from __future__ import annotations

from collections.abc import Callable

from palabras.scanner.classes import CharClass


class ComplexContextRuleMixin:
    """Mixin matching runs of Line_Break=Complex_Context characters.

    Thai, Lao, Myanmar, Khmer and similar scripts need dictionary-based
    segmentation that UAX#29 leaves out of scope. A whole run is kept as
    one span so a downstream segmenter can split it.
    """

    # Provided by RunMatcherMixin
    _class_at: Callable[[int], CharClass | None]
    _skip_ignorable: Callable[[int], int]

    def _match_complex_context(self, start: int) -> int:
        """Find the Complex_Context run at start.

        Returns:
            End of the run, or start if the character at start is not SA.
            Each SA character absorbs the Format/Extend characters after
            it (WB4), so an attached mark never splits the run.
        """
        pos = start
        while True:
            cls = self._class_at(pos)
            if cls is None or not cls.complex_context:
                return pos
            pos = self._skip_ignorable(pos + 1)
