"""SearchServer Tokenizers - Text Tokenization.

Documents, queries and stop-word blobs are all split on the ASCII space
character only. Consecutive spaces produce empty tokens, which are kept.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import List

from searchserver_core.analyzers.base import (
    Tokenizer,
    Token,
    TokenStream,
)

SEPARATOR = " "


def split_into_words(text: str) -> List[str]:
    """Split text on single spaces.

    >>> split_into_words("cat  dog")
    ['cat', '', 'dog']
    >>> split_into_words("")
    ['']
    """
    return text.split(SEPARATOR)


class SpaceTokenizer(Tokenizer):
    """Splits text on the space character, preserving empty tokens.

    Tabs, newlines and other whitespace are ordinary characters here.
    """

    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text on spaces."""
        return TokenStream([
            Token(text=word, position=position)
            for position, word in enumerate(split_into_words(text))
        ])


__all__ = [
    "SpaceTokenizer",
    "split_into_words",
]
