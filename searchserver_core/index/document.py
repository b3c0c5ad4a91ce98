"""SearchServer Document Store - Per-document Metadata.

Holds the rating and status of every indexed document together with
the order in which documents were added.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Sequence

from searchserver_core.exceptions import DocumentNotFoundError, OutOfRangeError

logger = logging.getLogger(__name__)


class DocumentStatus(Enum):
    """Document status."""

    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3


@dataclass(frozen=True)
class DocumentData:
    """Metadata for a stored document.

    Attributes:
        rating: Average rating, truncated toward zero
        status: Document status
    """

    rating: int
    status: DocumentStatus


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Average ratings with integer division truncating toward zero.

    An empty sequence rates 0.

    >>> compute_average_rating([2, 61, 42])
    35
    >>> compute_average_rating([-7, 2])
    -2
    """
    if not ratings:
        return 0
    total = sum(ratings)
    average = abs(total) // len(ratings)
    return average if total >= 0 else -average


class DocumentStore:
    """In-memory document metadata store.

    Documents are only ever added; the insertion order is kept for
    positional lookup.
    """

    def __init__(self):
        """Initialize document store."""
        self._documents: Dict[int, DocumentData] = {}
        self._order: List[int] = []

    def store(self, doc_id: int, data: DocumentData) -> None:
        """Store metadata for a new document.

        Args:
            doc_id: Document ID, not yet present
            data: Document metadata
        """
        self._documents[doc_id] = data
        self._order.append(doc_id)
        logger.debug(f"Stored document {doc_id}: {data}")

    def get(self, doc_id: int) -> DocumentData:
        """Get metadata by document ID.

        Raises:
            DocumentNotFoundError: If the document was never added
        """
        try:
            return self._documents[doc_id]
        except KeyError:
            raise DocumentNotFoundError(
                f"Document {doc_id} not found",
                details={"doc_id": doc_id},
            ) from None

    def exists(self, doc_id: int) -> bool:
        """Check if document exists."""
        return doc_id in self._documents

    def count(self) -> int:
        """Get document count."""
        return len(self._documents)

    def id_at(self, index: int) -> int:
        """Get the ID of the document added at position ``index``.

        Raises:
            OutOfRangeError: If index is outside ``[0, count)``
        """
        if not 0 <= index < len(self._order):
            raise OutOfRangeError(
                f"Document index {index} out of range [0, {len(self._order)})",
                details={"index": index, "count": len(self._order)},
            )
        return self._order[index]

    def __iter__(self) -> Iterator[int]:
        """Iterate over document IDs in insertion order."""
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents


__all__ = [
    "DocumentStatus",
    "DocumentData",
    "DocumentStore",
    "compute_average_rating",
]
