"""SearchServer Inverted Index - Term to Document Frequency Map.

The inverted index maps each term to the documents containing it and
the term's frequency within each of those documents.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class PostingList:
    """Postings for a single term: document ID -> term frequency."""

    def __init__(self, term: str):
        """Initialize posting list.

        Args:
            term: The term
        """
        self.term = term
        self._freqs: Dict[int, float] = {}

    def add(self, doc_id: int, term_freq: float) -> None:
        """Accumulate term frequency for a document."""
        self._freqs[doc_id] = self._freqs.get(doc_id, 0.0) + term_freq

    def get(self, doc_id: int) -> Optional[float]:
        """Get term frequency for document, or None if absent."""
        return self._freqs.get(doc_id)

    def contains(self, doc_id: int) -> bool:
        """Check if document is in posting list."""
        return doc_id in self._freqs

    @property
    def doc_freq(self) -> int:
        """Number of documents containing the term."""
        return len(self._freqs)

    def doc_ids(self) -> List[int]:
        """Get all document IDs."""
        return list(self._freqs)

    def __len__(self) -> int:
        return len(self._freqs)

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        """Iterate over (doc_id, term_freq) pairs in ascending ID order."""
        return iter(sorted(self._freqs.items()))


class InvertedIndex:
    """In-memory inverted index.

    Grows monotonically: documents are added, never updated or removed.
    A term only becomes a key once some document contains it.
    """

    def __init__(self):
        """Initialize inverted index."""
        self._postings: Dict[str, PostingList] = {}

    def add_document(self, doc_id: int, terms: Sequence[str]) -> None:
        """Index the analyzed terms of a document.

        Each occurrence adds ``1 / len(terms)``, so a document's term
        frequencies sum to 1.

        Args:
            doc_id: Document ID
            terms: Terms after stop-word removal, repeats preserved
        """
        if not terms:
            logger.debug(f"Document {doc_id} has no indexable terms")
            return

        inv_word_count = 1.0 / len(terms)
        for term in terms:
            posting_list = self._postings.get(term)
            if posting_list is None:
                posting_list = PostingList(term)
                self._postings[term] = posting_list
            posting_list.add(doc_id, inv_word_count)

        logger.debug(f"Indexed document {doc_id}: {len(terms)} terms")

    def get_postings(self, term: str) -> Optional[PostingList]:
        """Get posting list for term, or None if the term is unknown."""
        return self._postings.get(term)

    def doc_freq(self, term: str) -> int:
        """Number of documents containing term."""
        posting_list = self._postings.get(term)
        return len(posting_list) if posting_list is not None else 0

    def document_contains(self, term: str, doc_id: int) -> bool:
        """Check whether a document contains term."""
        posting_list = self._postings.get(term)
        return posting_list is not None and posting_list.contains(doc_id)

    def terms(self) -> List[str]:
        """Get all indexed terms, sorted."""
        return sorted(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        """Return number of distinct terms."""
        return len(self._postings)


__all__ = [
    "InvertedIndex",
    "PostingList",
]
