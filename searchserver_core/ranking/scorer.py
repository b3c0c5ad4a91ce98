"""SearchServer Scorer - Base Scoring Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    """A ranked search result.

    Attributes:
        id: Document ID
        relevance: Relevance score
        rating: Average document rating
    """

    id: int
    relevance: float
    rating: int

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, "
            f"relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


@dataclass
class ScoringContext:
    """Context for scoring operations."""

    total_docs: int = 0


class Scorer(ABC):
    """Base scorer class."""

    @abstractmethod
    def idf(self, doc_freq: int, context: ScoringContext) -> float:
        """Inverse document frequency of a term."""

    def score(self, term_freq: float, doc_freq: int, context: ScoringContext) -> float:
        """Relevance a term contributes to one document."""
        return term_freq * self.idf(doc_freq, context)


__all__ = ["Document", "Scorer", "ScoringContext"]
