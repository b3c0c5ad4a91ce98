"""SearchServer Standard Analyzer - Pre-configured Analysis Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import FrozenSet, Optional

from searchserver_core.analyzers.base import Analyzer
from searchserver_core.analyzers.filters import StopwordFilter, StopWordsSource
from searchserver_core.analyzers.tokenizers import SpaceTokenizer


class DocumentAnalyzer(Analyzer):
    """Space tokenization followed by stop-word removal.

    No lowercasing, stemming or punctuation stripping is applied.
    """

    def __init__(self, stopwords: Optional[StopWordsSource] = None):
        """Initialize document analyzer.

        Args:
            stopwords: Stop-word collection or space-delimited text

        Raises:
            InvalidArgumentError: If a stop word is not a valid word
        """
        self.stopword_filter = StopwordFilter(stopwords)
        super().__init__(
            tokenizer=SpaceTokenizer(),
            token_filters=[self.stopword_filter],
        )

    @property
    def stopwords(self) -> FrozenSet[str]:
        """Configured stop words."""
        return self.stopword_filter.stopwords

    def is_stop_word(self, word: str) -> bool:
        """Check stop-word membership."""
        return self.stopword_filter.is_stop_word(word)


__all__ = ["DocumentAnalyzer"]
