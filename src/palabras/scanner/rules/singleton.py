"""Ideographic and Hiragana singleton rule mixin."""

from __future__ import annotations

from collections.abc import Callable

from palabras.scanner.classes import CharClass, Script


class SingletonRuleMixin:
    """Mixin matching one Han or one Hiragana character.

    Each such character is its own token (WB14), plus any Format/Extend
    characters attached to it (WB4).
    """

    # Provided by RunMatcherMixin
    _class_at: Callable[[int], CharClass | None]
    _skip_ignorable: Callable[[int], int]

    def _match_script(self, start: int, script: Script) -> int:
        cls = self._class_at(start)
        if cls is None or cls.script is not script:
            return start
        return self._skip_ignorable(start + 1)

    def _match_ideographic(self, start: int) -> int:
        """Match one Han character at start; returns start if there is none."""
        return self._match_script(start, Script.HAN)

    def _match_hiragana(self, start: int) -> int:
        """Match one Hiragana character at start; returns start if there is none."""
        return self._match_script(start, Script.HIRAGANA)
