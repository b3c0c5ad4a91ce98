"""SearchServer Query Executor - Relevance Computation.

Executes parsed queries against the inverted index and document
store, producing unordered scored results for ranking.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from searchserver_core.index.document import DocumentStatus, DocumentStore
from searchserver_core.index.inverted import InvertedIndex
from searchserver_core.query.parser import ParsedQuery
from searchserver_core.ranking.scorer import Document, Scorer, ScoringContext
from searchserver_core.ranking.tfidf import TFIDFScorer

logger = logging.getLogger(__name__)

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


class QueryExecutor:
    """Scores documents for a parsed query.

    Plus-terms accumulate ``tf * idf`` for documents accepted by the
    predicate; minus-terms then drop every document containing them.
    """

    def __init__(
        self,
        index: InvertedIndex,
        documents: DocumentStore,
        scorer: Optional[Scorer] = None,
    ):
        """Initialize executor.

        Args:
            index: Inverted index to read postings from
            documents: Store holding ratings and statuses
            scorer: Relevance scorer, TF-IDF by default
        """
        self._index = index
        self._documents = documents
        self._scorer = scorer or TFIDFScorer()

    def find_all_documents(
        self,
        query: ParsedQuery,
        predicate: DocumentPredicate,
    ) -> List[Document]:
        """Find every document matching the query.

        Args:
            query: Parsed query
            predicate: Filter over (doc_id, status, rating)

        Returns:
            Scored documents in ascending ID order
        """
        context = ScoringContext(total_docs=self._documents.count())
        document_to_relevance: Dict[int, float] = {}

        for term in query.plus_terms:
            posting_list = self._index.get_postings(term)
            if posting_list is None:
                continue

            doc_freq = posting_list.doc_freq
            for doc_id, term_freq in posting_list:
                data = self._documents.get(doc_id)
                if predicate(doc_id, data.status, data.rating):
                    document_to_relevance[doc_id] = (
                        document_to_relevance.get(doc_id, 0.0)
                        + self._scorer.score(term_freq, doc_freq, context)
                    )

        for term in query.minus_terms:
            posting_list = self._index.get_postings(term)
            if posting_list is None:
                continue

            for doc_id in posting_list.doc_ids():
                document_to_relevance.pop(doc_id, None)

        matched = [
            Document(
                id=doc_id,
                relevance=relevance,
                rating=self._documents.get(doc_id).rating,
            )
            for doc_id, relevance in sorted(document_to_relevance.items())
        ]
        logger.debug(f"Query {query.original!r} matched {len(matched)} documents")
        return matched


__all__ = [
    "QueryExecutor",
    "DocumentPredicate",
]
