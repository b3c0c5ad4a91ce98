"""SearchServer Core Engine - Main Search Server Implementation.

The SearchServer class is the primary interface for all search
operations, coordinating analysis, indexing, querying and ranking.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple, Union

from searchserver_core.analyzers.filters import StopWordsSource
from searchserver_core.analyzers.standard import DocumentAnalyzer
from searchserver_core.exceptions import InvalidArgumentError
from searchserver_core.index.document import (
    DocumentData,
    DocumentStatus,
    DocumentStore,
    compute_average_rating,
)
from searchserver_core.index.inverted import InvertedIndex
from searchserver_core.query.executor import DocumentPredicate, QueryExecutor
from searchserver_core.query.parser import QueryParser
from searchserver_core.query.validator import validate_text
from searchserver_core.ranking.scorer import Document
from searchserver_core.ranking.topk import (
    MAX_RESULT_DOCUMENT_COUNT,
    RELEVANCE_EPSILON,
    rank_documents,
)

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Search server configuration.

    Attributes:
        max_results: Maximum results per query
        relevance_epsilon: Relevances closer than this are ranked by rating
        default_status: Status matched when no filter is given
    """

    max_results: int = MAX_RESULT_DOCUMENT_COUNT
    relevance_epsilon: float = RELEVANCE_EPSILON
    default_status: DocumentStatus = DocumentStatus.ACTUAL


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching a query against one document.

    Unpacks as ``(matched_words, status)``.

    Attributes:
        matched_words: Plus-terms found in the document, sorted; empty
            when the document contains a minus-term
        status: Document status
        excluded: A minus-term was found in the document
    """

    matched_words: Tuple[str, ...] = ()
    status: DocumentStatus = DocumentStatus.ACTUAL
    excluded: bool = False

    def __iter__(self):
        return iter((self.matched_words, self.status))


class SearchServer:
    """In-memory TF-IDF search server.

    Owns its stop words, inverted index and document store. Not
    thread-safe: callers sharing an instance across threads must
    synchronize access themselves.
    """

    def __init__(
        self,
        stop_words: Optional[StopWordsSource] = None,
        config: Optional[SearchConfig] = None,
    ):
        """Initialize search server.

        Args:
            stop_words: Stop-word collection or space-delimited text
            config: Server configuration

        Raises:
            InvalidArgumentError: If a stop word contains control characters
        """
        self.config = config or SearchConfig()

        self._analyzer = DocumentAnalyzer(stop_words)
        self._parser = QueryParser(self._analyzer)
        self._index = InvertedIndex()
        self._documents = DocumentStore()
        self._executor = QueryExecutor(self._index, self._documents)

        logger.info(
            f"Search server initialized with {len(self._analyzer.stopwords)} stop words"
        )

    @property
    def stop_words(self) -> FrozenSet[str]:
        """Configured stop words."""
        return self._analyzer.stopwords

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        """Index a document.

        Args:
            document_id: Unique, non-negative document ID
            document: Document text
            status: Document status
            ratings: Rating samples, averaged into one rating

        Raises:
            InvalidArgumentError: If the ID is negative or taken, or the
                text contains invalid words
        """
        if document_id < 0:
            raise InvalidArgumentError(
                f"Document ID must be non-negative, got {document_id}",
                details={"doc_id": document_id},
            )
        if document_id in self._documents:
            raise InvalidArgumentError(
                f"Document ID {document_id} already exists",
                details={"doc_id": document_id},
            )
        validate_text(document, "document")

        terms = self._analyzer.get_terms(document)
        self._index.add_document(document_id, terms)
        self._documents.store(
            document_id,
            DocumentData(rating=compute_average_rating(ratings), status=status),
        )
        logger.debug(f"Added document {document_id}")

    def find_top_documents(
        self,
        raw_query: str,
        status_or_predicate: Union[DocumentStatus, DocumentPredicate, None] = None,
    ) -> List[Document]:
        """Find the best matching documents.

        Args:
            raw_query: Query string
            status_or_predicate: Status to match, or a predicate over
                ``(doc_id, status, rating)``; defaults to the configured
                default status

        Returns:
            At most ``config.max_results`` documents, best first

        Raises:
            InvalidArgumentError: If the query is invalid
        """
        if status_or_predicate is None:
            status_or_predicate = self.config.default_status

        if isinstance(status_or_predicate, DocumentStatus):
            status = status_or_predicate

            def predicate(doc_id: int, doc_status: DocumentStatus, rating: int) -> bool:
                return doc_status == status
        else:
            predicate = status_or_predicate

        query = self._parser.parse(raw_query)
        matched = self._executor.find_all_documents(query, predicate)
        return rank_documents(
            matched,
            limit=self.config.max_results,
            epsilon=self.config.relevance_epsilon,
        )

    def get_document_count(self) -> int:
        """Get number of stored documents."""
        return self._documents.count()

    def match_document(self, raw_query: str, document_id: int) -> MatchResult:
        """Match a query against a single document.

        Args:
            raw_query: Query string
            document_id: Document ID

        Returns:
            Matched plus-terms and the document status

        Raises:
            InvalidArgumentError: If the query is invalid
            DocumentNotFoundError: If the document does not exist
        """
        query = self._parser.parse(raw_query)
        data = self._documents.get(document_id)

        for term in query.minus_terms:
            if self._index.document_contains(term, document_id):
                return MatchResult(matched_words=(), status=data.status, excluded=True)

        matched_words = tuple(
            term
            for term in sorted(query.plus_terms)
            if self._index.document_contains(term, document_id)
        )
        return MatchResult(matched_words=matched_words, status=data.status)

    def get_document_id(self, index: int) -> int:
        """Get the ID of the document added at position ``index``.

        Raises:
            OutOfRangeError: If index is outside ``[0, count)``
        """
        return self._documents.id_at(index)

    def __len__(self) -> int:
        return self._documents.count()

    def __iter__(self) -> Iterator[int]:
        """Iterate over document IDs in insertion order."""
        return iter(self._documents)


__all__ = [
    "SearchServer",
    "SearchConfig",
    "MatchResult",
    "Document",
]
