"""Overlong span filter mixin."""

from __future__ import annotations

from collections.abc import Callable

from palabras.tokens import MatchSpan, Token
from palabras.utils.logger import get_logger

logger = get_logger(__name__)


class OverlongFilterMixin:
    """Mixin turning emittable spans into tokens, dropping overlong ones.

    A dropped span leaves a gap: the next emitted token carries a position
    increment of 1 plus the number of spans dropped since the previous token.
    Fallback spans (no type) must not be passed here; they neither emit nor
    count as gaps.
    """

    # These will be set by the Tokenizer class
    _max_token_length: int
    _skip_count: int

    # Provided by Tokenizer
    _make_token: Callable[[MatchSpan, int], Token]

    def _filter_span(self, span: MatchSpan) -> Token | None:
        """Emit span as a token unless it is longer than max_token_length.

        Args:
            span: An emittable span

        Returns:
            The token, or None if the span was dropped.
        """
        if span.length > self._max_token_length:
            self._skip_count += 1
            logger.debug(
                "Dropped %s span of %d chars at offset %d (max_token_length=%d)",
                span.type.name if span.type else None,
                span.length,
                span.start,
                self._max_token_length,
            )
            return None

        token = self._make_token(span, 1 + self._skip_count)
        self._skip_count = 0
        return token
