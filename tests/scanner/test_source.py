"""Tests for streamed input."""

from __future__ import annotations

import io

import pytest

from palabras import Tokenizer, TokenizerConfig, TokenizerState, tokenize
from palabras.scanner.source import CharSource


class FailingReader:
    """Stream that fails after returning its first chunk."""

    def __init__(self, first: str) -> None:
        self._chunks = [first]

    def read(self, size: int = -1) -> str:
        if self._chunks:
            return self._chunks.pop()
        raise OSError("device went away")


class BytesReader:
    def read(self, size: int = -1) -> bytes:
        return b"abc"


class TestCharSource:
    def test_string_access(self) -> None:
        src = CharSource("abc")

        assert src.at(0) == "a"
        assert src.at(2) == "c"
        assert src.at(3) == ""
        assert src.text(1, 3) == "bc"

    def test_stream_is_read_lazily(self) -> None:
        stream = io.StringIO("abcdefgh")
        src = CharSource(stream, read_size=2)

        assert src.at(0) == "a"
        assert src.buffered == 2
        assert src.at(5) == "f"
        assert src.buffered == 6

    def test_stream_end(self) -> None:
        src = CharSource(io.StringIO("ab"), read_size=4)
        assert src.at(2) == ""
        assert src.at(10) == ""

    def test_release_compacts_stream_buffer(self) -> None:
        src = CharSource(io.StringIO("abcdefgh"), read_size=4)
        src.at(3)
        src.release(3)

        assert src.buffered == 1
        assert src.at(3) == "d"
        assert src.text(3, 4) == "d"

    def test_release_keeps_string_input(self) -> None:
        src = CharSource("abcdef")
        src.release(5)

        assert src.buffered == 6
        assert src.text(0, 2) == "ab"


class TestStreamedTokenizer:
    def test_tokens_across_chunk_boundaries(self) -> None:
        config = TokenizerConfig(read_size=3)
        tokenizer = Tokenizer(io.StringIO("hello world 3.14"), config=config)

        assert [t.text for t in tokenizer] == ["hello", "world", "3.14"]
        assert tokenizer.end() == 16

    def test_buffer_stays_bounded(self) -> None:
        source = "word " * 2000
        config = TokenizerConfig(read_size=16)
        tokenizer = Tokenizer(io.StringIO(source), config=config)

        peak = 0
        for _ in tokenizer:
            peak = max(peak, tokenizer._source.buffered)

        assert peak < 64

    def test_tokenize_accepts_stream(self) -> None:
        assert [t.text for t in tokenize(io.StringIO("a b"))] == ["a", "b"]

    def test_read_failure_propagates(self) -> None:
        tokenizer = Tokenizer(FailingReader("abc"), config=TokenizerConfig(read_size=3))

        with pytest.raises(OSError, match="device went away"):
            tokenizer.advance()
        assert tokenizer.state is TokenizerState.READY

    def test_non_text_stream_rejected(self) -> None:
        tokenizer = Tokenizer(BytesReader())

        with pytest.raises(TypeError, match="expected str"):
            tokenizer.advance()
