"""SearchServer Ranking Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from searchserver_core.ranking.scorer import Document, Scorer, ScoringContext
from searchserver_core.ranking.tfidf import TFIDFScorer
from searchserver_core.ranking.topk import (
    MAX_RESULT_DOCUMENT_COUNT,
    RELEVANCE_EPSILON,
    rank_documents,
)

__all__ = ["Document", "Scorer", "ScoringContext", "TFIDFScorer", "MAX_RESULT_DOCUMENT_COUNT", "RELEVANCE_EPSILON", "rank_documents"]
