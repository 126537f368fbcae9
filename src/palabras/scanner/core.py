"""Pull-based UAX#29 word tokenizer.

Scans the input one span at a time: match the longest span at the cursor,
commit the cursor past it, then either emit a token or keep scanning.
Every span covers at least one character, so scanning always terminates.

Thread Safety:
Tokenizer instances are not reentrant. One thread owns an instance at a
time; reuse across inputs goes through reset(). Property tables and the
classifier are shared read-only between instances.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from palabras.config import TokenizerConfig
from palabras.errors import TokenizerStateError
from palabras.scanner.classifier import CharClassifier, default_classifier
from palabras.scanner.matcher import RunMatcherMixin
from palabras.scanner.overlong import OverlongFilterMixin
from palabras.scanner.rules import (
    ComplexContextRuleMixin,
    NumericRuleMixin,
    SingletonRuleMixin,
    WordRuleMixin,
)
from palabras.scanner.source import CharSource, TextSource
from palabras.scanner.states import TokenizerState
from palabras.tokens import MatchSpan, Token


class Tokenizer(
    # Rule families (pure logic, no cursor mutation)
    NumericRuleMixin,
    WordRuleMixin,
    ComplexContextRuleMixin,
    SingletonRuleMixin,
    # Longest-match selection and character access
    RunMatcherMixin,
    # Token construction
    OverlongFilterMixin,
):
    """Split text into word, number, South-East-Asian, ideographic and
    hiragana tokens following the Unicode word-boundary rules.

    Usage:
        >>> tokenizer = Tokenizer("I've got 3.14 apples")
        >>> for token in tokenizer:
        ...     print(token)
        Token(WORD, "I've", 0:4)
        Token(WORD, 'got', 5:8)
        Token(NUMERIC, '3.14', 9:13)
        Token(WORD, 'apples', 14:20)
        >>> tokenizer.end()
        20
        >>> tokenizer.final_position_increment
        0

    Lifecycle:
        CLOSED --reset()--> READY --advance() at end--> EXHAUSTED
        reset() is valid in every state; close() returns to CLOSED.

    """

    __slots__ = (
        "_source",
        "_pos",  # Raw offset of the next unscanned character
        "_skip_count",  # Overlong spans dropped since the last token
        "_state",
        "_max_token_length",
        "_offset_correction",
        "_read_size",
        "_classifier",
    )

    def __init__(
        self,
        source: str | TextSource | None = None,
        *,
        config: TokenizerConfig | None = None,
        max_token_length: int | None = None,
        offset_correction: Callable[[int], int] | None = None,
        classifier: CharClassifier | None = None,
    ) -> None:
        """Initialize tokenizer, optionally bound to an input.

        Args:
            source: Input text or text stream; the tokenizer starts CLOSED
                when omitted
            config: Tokenizer configuration (defaults to TokenizerConfig())
            max_token_length: Overrides config.max_token_length
            offset_correction: Overrides config.offset_correction
            classifier: Classifier to use (defaults to the pinned snapshot)
        """
        if config is None:
            config = TokenizerConfig()
        self._max_token_length = config.max_token_length
        self._offset_correction = offset_correction or config.offset_correction
        self._read_size = config.read_size
        self._classifier = classifier or default_classifier()

        self._source: CharSource | None = None
        self._pos = 0
        self._skip_count = 0
        self._state = TokenizerState.CLOSED

        if max_token_length is not None:
            self.max_token_length = max_token_length
        if source is not None:
            self.reset(source)

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def max_token_length(self) -> int:
        """Longest span, in characters, that is emitted as a token."""
        return self._max_token_length

    @max_token_length.setter
    def max_token_length(self, value: int) -> None:
        if value < 1:
            raise ValueError(f"max_token_length must be >= 1, got {value}")
        self._max_token_length = value

    @property
    def state(self) -> TokenizerState:
        """Current lifecycle state."""
        return self._state

    @property
    def classifier(self) -> CharClassifier:
        """Classifier used to resolve character classes."""
        return self._classifier

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def reset(self, source: str | TextSource) -> None:
        """Bind to a new input and rewind.

        Valid in any state. max_token_length and offset_correction are kept.

        Args:
            source: Input text or text stream
        """
        self._source = CharSource(source, self._read_size)
        self._pos = 0
        self._skip_count = 0
        self._state = TokenizerState.READY

    def close(self) -> None:
        """Release the bound input. Only reset() is valid afterwards."""
        self._source = None
        self._pos = 0
        self._skip_count = 0
        self._state = TokenizerState.CLOSED

    def advance(self) -> Token | None:
        """Scan to the next token.

        Returns:
            The next token, or None once the input is exhausted.

        Raises:
            TokenizerStateError: If the tokenizer is CLOSED.
        """
        if self._state is TokenizerState.CLOSED:
            raise TokenizerStateError("advance", self._state)
        if self._state is TokenizerState.EXHAUSTED:
            return None

        source = self._source
        assert source is not None
        while True:
            span = self._match_at(self._pos)
            if span is None:
                self._state = TokenizerState.EXHAUSTED
                return None

            self._pos = span.end
            token = self._filter_span(span) if span.type is not None else None
            source.release(self._pos)
            if token is not None:
                return token

    def end(self) -> int:
        """Final offset of the input, after offset correction.

        The zero-width position just past the last character. Calling it
        again returns the same value.

        Raises:
            TokenizerStateError: If the input is not exhausted yet.
        """
        if self._state is not TokenizerState.EXHAUSTED:
            raise TokenizerStateError("end", self._state)
        return self.correct_offset(self._pos)

    @property
    def final_position_increment(self) -> int:
        """Overlong spans dropped after the last emitted token.

        Together with the emitted tokens, every dropped span is counted
        exactly once: sum(position_increment - 1) over the tokens plus this
        value equals the number of dropped spans.

        Raises:
            TokenizerStateError: If the input is not exhausted yet.
        """
        if self._state is not TokenizerState.EXHAUSTED:
            raise TokenizerStateError("final_position_increment", self._state)
        return self._skip_count

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until the input is exhausted."""
        while True:
            token = self.advance()
            if token is None:
                return
            yield token

    # =========================================================================
    # Token construction
    # =========================================================================

    def correct_offset(self, offset: int) -> int:
        """Map a raw offset in the scanned text to the original text."""
        if self._offset_correction is None:
            return offset
        return self._offset_correction(offset)

    def _make_token(self, span: MatchSpan, position_increment: int) -> Token:
        assert span.type is not None
        return Token(
            text=self._source.text(span.start, span.end),  # type: ignore[union-attr]
            type=span.type,
            start_offset=self.correct_offset(span.start),
            end_offset=self.correct_offset(span.end),
            position_increment=position_increment,
        )
