"""Tokenizer configuration for Palabras.

Configuration is an immutable value passed to each Tokenizer. There is no
process-wide default that callers can mutate; a Tokenizer built without a
config uses a fresh TokenizerConfig().

Usage:
    from palabras import Tokenizer, TokenizerConfig

    config = TokenizerConfig(max_token_length=64)
    tokenizer = Tokenizer("some text", config=config)

    # From an external mapping (unknown keys are ignored)
    config = TokenizerConfig.from_dict({"max_token_length": 64})

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

# Spans longer than this many code points are dropped by default
DEFAULT_MAX_TOKEN_LENGTH = 255

# Characters pulled from a stream per read() call
DEFAULT_READ_SIZE = 4096


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Attributes:
        max_token_length: Spans strictly longer than this are dropped and
            counted in the next token's position increment
        offset_correction: Maps a raw offset in the scanned text back to the
            original text; identity when None
        read_size: Characters requested per read() when the source is a stream

    """

    max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH
    offset_correction: Callable[[int], int] | None = None
    read_size: int = DEFAULT_READ_SIZE

    def __post_init__(self) -> None:
        if self.max_token_length < 1:
            raise ValueError(f"max_token_length must be >= 1, got {self.max_token_length}")
        if self.read_size < 1:
            raise ValueError(f"read_size must be >= 1, got {self.read_size}")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> TokenizerConfig:
        """Create TokenizerConfig from a mapping.

        Only includes keys that are valid TokenizerConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Mapping with config values. Keys should match
                TokenizerConfig attribute names.

        Returns:
            New TokenizerConfig instance with values from the mapping.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "max_token_length": 10,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_token_length
            10

        """
        valid_fields = set(cls.__dataclass_fields__)
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


__all__ = [
    "DEFAULT_MAX_TOKEN_LENGTH",
    "DEFAULT_READ_SIZE",
    "TokenizerConfig",
]
