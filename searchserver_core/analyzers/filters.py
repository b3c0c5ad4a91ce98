"""SearchServer Token Filters - Stop-word Handling.

Stop words are configured once, either from a collection of words or
from a space-delimited text blob, and are dropped from both indexed
documents and parsed queries.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, Optional, Union

from searchserver_core.analyzers.base import TokenFilter, TokenStream
from searchserver_core.analyzers.tokenizers import split_into_words
from searchserver_core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

StopWordsSource = Union[str, Iterable[str]]


def is_valid_word(word: str) -> bool:
    """Check that a word holds no control characters (code point < 0x20)."""
    return not any(ord(c) < 0x20 for c in word)


def make_stop_words(stop_words: Optional[StopWordsSource] = None) -> FrozenSet[str]:
    """Build a validated stop-word set.

    Args:
        stop_words: Iterable of words, or a single space-delimited string

    Returns:
        Deduplicated stop words

    Raises:
        InvalidArgumentError: If any candidate contains a control character
    """
    if stop_words is None:
        return frozenset()

    if isinstance(stop_words, str):
        candidates = split_into_words(stop_words)
    else:
        candidates = list(stop_words)

    for word in candidates:
        if not is_valid_word(word):
            raise InvalidArgumentError(
                f"Stop words must not contain control characters: {word!r}",
                details={"word": word},
            )

    return frozenset(candidates)


class StopwordFilter(TokenFilter):
    """Removes stop words from a token stream.

    Matching is exact and case-sensitive.
    """

    def __init__(self, stopwords: Optional[StopWordsSource] = None):
        """Initialize filter.

        Args:
            stopwords: Stop-word collection or space-delimited text

        Raises:
            InvalidArgumentError: If a stop word is not a valid word
        """
        self.stopwords = make_stop_words(stopwords)
        logger.debug(f"Configured {len(self.stopwords)} stop words")

    def is_stop_word(self, word: str) -> bool:
        """Check stop-word membership."""
        return word in self.stopwords

    def filter(self, stream: TokenStream) -> TokenStream:
        """Remove stopwords from stream."""
        return stream.filter(lambda token: token.text not in self.stopwords)


__all__ = [
    "StopwordFilter",
    "StopWordsSource",
    "is_valid_word",
    "make_stop_words",
]
