"""SearchServer Top-K Selection - Result Ordering and Truncation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List

from searchserver_core.ranking.scorer import Document

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6


def compare_documents(lhs: Document, rhs: Document, epsilon: float = RELEVANCE_EPSILON) -> int:
    """Order by descending relevance, then by descending rating.

    Relevances closer than ``epsilon`` count as equal.
    """
    if abs(lhs.relevance - rhs.relevance) < epsilon:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def rank_documents(
    documents: Iterable[Document],
    limit: int = MAX_RESULT_DOCUMENT_COUNT,
    epsilon: float = RELEVANCE_EPSILON,
) -> List[Document]:
    """Sort documents by the ranking rule and keep the first ``limit``.

    Args:
        documents: Scored documents, any order
        limit: Maximum number of results
        epsilon: Relevance tie threshold

    Returns:
        Ranked documents
    """
    ranked = sorted(
        documents,
        key=cmp_to_key(lambda lhs, rhs: compare_documents(lhs, rhs, epsilon)),
    )
    return ranked[:limit]


__all__ = [
    "MAX_RESULT_DOCUMENT_COUNT",
    "RELEVANCE_EPSILON",
    "compare_documents",
    "rank_documents",
]
