"""SearchServer Analyzer Base - Core Text Analysis Components.

Provides base classes for the text analysis pipeline: tokens, token
streams, tokenizers, token filters and the analyzer that chains them.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional


@dataclass
class Token:
    """A token in the analysis stream.

    Attributes:
        text: Token text (may be empty for consecutive separators)
        position: Position in the token sequence
    """

    text: str
    position: int = 0

    def __repr__(self) -> str:
        return f"Token({self.text!r}, pos={self.position})"


class TokenStream:
    """A stream of tokens."""

    def __init__(self, tokens: Optional[List[Token]] = None):
        """Initialize token stream.

        Args:
            tokens: Initial tokens
        """
        self._tokens: List[Token] = tokens or []

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def get_texts(self) -> List[str]:
        """Get list of token texts."""
        return [t.text for t in self._tokens]

    def filter(self, predicate: Callable[[Token], bool]) -> "TokenStream":
        """Filter tokens by predicate.

        Args:
            predicate: Function that returns True to keep token

        Returns:
            New filtered TokenStream
        """
        return TokenStream([t for t in self._tokens if predicate(t)])


class Tokenizer(ABC):
    """Base class for tokenizers."""

    @abstractmethod
    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text.

        Args:
            text: Input text

        Returns:
            Token stream
        """


class TokenFilter(ABC):
    """Base class for token filters.

    Token filters transform or remove tokens in the stream.
    """

    @abstractmethod
    def filter(self, stream: TokenStream) -> TokenStream:
        """Filter token stream.

        Args:
            stream: Input token stream

        Returns:
            Filtered token stream
        """


class Analyzer:
    """Combines a tokenizer and token filters into an analysis pipeline."""

    def __init__(
        self,
        tokenizer: Tokenizer,
        token_filters: Optional[List[TokenFilter]] = None,
    ):
        """Initialize analyzer.

        Args:
            tokenizer: Tokenizer to use
            token_filters: Token filters to apply, in order
        """
        self._tokenizer = tokenizer
        self._token_filters = token_filters or []

    def analyze(self, text: str) -> TokenStream:
        """Analyze text into tokens."""
        stream = self._tokenizer.tokenize(text)
        for token_filter in self._token_filters:
            stream = token_filter.filter(stream)
        return stream

    def get_terms(self, text: str) -> List[str]:
        """Get analyzed terms from text.

        Args:
            text: Input text

        Returns:
            List of term strings, repeats preserved
        """
        return self.analyze(text).get_texts()


__all__ = [
    "Analyzer",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
]
