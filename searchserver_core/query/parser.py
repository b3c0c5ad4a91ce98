"""SearchServer Query Parser - Plus/Minus Query Parsing.

Turns a raw query string into a set of plus-terms, which must appear
and add to relevance, and minus-terms, which exclude any document that
contains them.

Query syntax:
- term: plus-term
- -term: minus-term
- words separated by single spaces; stop words are ignored

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Set

from searchserver_core.analyzers.standard import DocumentAnalyzer
from searchserver_core.analyzers.tokenizers import split_into_words
from searchserver_core.query.validator import MINUS, validate_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryWord:
    """A single classified query token.

    Attributes:
        data: Term text with any leading minus stripped
        is_minus: Token started with a minus
        is_stop: Term is a stop word
    """

    data: str
    is_minus: bool = False
    is_stop: bool = False


@dataclass
class ParsedQuery:
    """Result of query parsing.

    Attributes:
        plus_terms: Terms that contribute to relevance
        minus_terms: Terms that exclude documents
        original: Original query string
    """

    plus_terms: Set[str] = field(default_factory=set)
    minus_terms: Set[str] = field(default_factory=set)
    original: str = ""

    def is_empty(self) -> bool:
        """Check whether the query has no effective terms."""
        return not self.plus_terms and not self.minus_terms

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "original": self.original,
            "plus_terms": sorted(self.plus_terms),
            "minus_terms": sorted(self.minus_terms),
        }


class QueryParser:
    """Parser for plus/minus query strings."""

    def __init__(self, analyzer: Optional[DocumentAnalyzer] = None):
        """Initialize parser.

        Args:
            analyzer: Analyzer whose stop words are dropped from queries
        """
        self.analyzer = analyzer or DocumentAnalyzer()

    def parse_query_word(self, text: str) -> QueryWord:
        """Classify one query token."""
        is_minus = False
        if text.startswith(MINUS):
            is_minus = True
            text = text[1:]
        return QueryWord(
            data=text,
            is_minus=is_minus,
            is_stop=self.analyzer.is_stop_word(text),
        )

    def parse(self, raw_query: str) -> ParsedQuery:
        """Parse query string.

        Args:
            raw_query: Query string

        Returns:
            Parsed query

        Raises:
            InvalidArgumentError: If the query fails validation
        """
        validate_text(raw_query, "query")

        query = ParsedQuery(original=raw_query)
        for word in split_into_words(raw_query):
            query_word = self.parse_query_word(word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                query.minus_terms.add(query_word.data)
            else:
                query.plus_terms.add(query_word.data)

        logger.debug(
            f"Parsed query {raw_query!r}: "
            f"{len(query.plus_terms)} plus, {len(query.minus_terms)} minus"
        )
        return query


__all__ = [
    "QueryParser",
    "ParsedQuery",
    "QueryWord",
]
