"""Boundary rule families for the Palabras scanner.

Each rule family is a mixin that finds its longest match at a cursor
position and returns the end offset (or the cursor when it cannot match).
Rules are pure: they read characters but never move the cursor.
"""

from __future__ import annotations

from palabras.scanner.rules.complex import ComplexContextRuleMixin
from palabras.scanner.rules.numeric import NumericRuleMixin
from palabras.scanner.rules.singleton import SingletonRuleMixin
from palabras.scanner.rules.word import WordRuleMixin

__all__ = [
    "ComplexContextRuleMixin",
    "NumericRuleMixin",
    "SingletonRuleMixin",
    "WordRuleMixin",
]
