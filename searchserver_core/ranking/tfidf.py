"""SearchServer TF-IDF Scorer.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import math

from searchserver_core.ranking.scorer import Scorer, ScoringContext


class TFIDFScorer(Scorer):
    """Linear TF-IDF: ``tf * ln(total_docs / doc_freq)``.

    A term found in every document has idf 0.
    """

    def idf(self, doc_freq: int, context: ScoringContext) -> float:
        if context.total_docs == 0 or doc_freq == 0:
            return 0.0
        return math.log(context.total_docs / doc_freq)


__all__ = ["TFIDFScorer"]
