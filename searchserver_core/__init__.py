"""SearchServer - In-memory TF-IDF Document Search.

Ingests short text documents into an inverted index and answers
plus/minus free-text queries with a ranked, filterable result list.

Architecture:
┌─────────────────────────────────────────────────────────────────────┐
│                           SearchServer                              │
├─────────────────────────────────────────────────────────────────────┤
│                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐   │
│   │                      Query Pipeline                         │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌───────┐  │   │
│   │  │  Validate  │→ │   Parse    │→ │   Score    │→ │ Top-K │  │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └───────┘  │   │
│   └─────────────────────────────────────────────────────────────┘   │
│                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐   │
│   │                       Index Layer                           │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────────────────┐ │   │
│   │  │  Analyzer  │→ │  Inverted  │  │    Document Store      │ │   │
│   │  │ (stop wds) │  │   Index    │  │ (rating, status, order)│ │   │
│   │  └────────────┘  └────────────┘  └────────────────────────┘ │   │
│   └─────────────────────────────────────────────────────────────┘   │
│                                                                     │
└─────────────────────────────────────────────────────────────────────┘

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from searchserver_core.engine import (
    SearchServer,
    SearchConfig,
    MatchResult,
    Document,
)

# Errors
from searchserver_core.exceptions import (
    SearchServerError,
    InvalidArgumentError,
    DocumentNotFoundError,
    OutOfRangeError,
)

# Index components
from searchserver_core.index.inverted import (
    InvertedIndex,
    PostingList,
)
from searchserver_core.index.document import (
    DocumentData,
    DocumentStatus,
    DocumentStore,
    compute_average_rating,
)

# Query components
from searchserver_core.query.parser import (
    QueryParser,
    ParsedQuery,
    QueryWord,
)
from searchserver_core.query.executor import (
    QueryExecutor,
    DocumentPredicate,
)
from searchserver_core.query.validator import (
    check_text_validity,
    validate_text,
)

# Analyzers
from searchserver_core.analyzers.standard import DocumentAnalyzer
from searchserver_core.analyzers.filters import (
    StopwordFilter,
    is_valid_word,
    make_stop_words,
)
from searchserver_core.analyzers.tokenizers import (
    SpaceTokenizer,
    split_into_words,
)

# Ranking
from searchserver_core.ranking.tfidf import TFIDFScorer
from searchserver_core.ranking.topk import (
    MAX_RESULT_DOCUMENT_COUNT,
    RELEVANCE_EPSILON,
    rank_documents,
)

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "SearchServer",
    "SearchConfig",
    "MatchResult",
    "Document",
    # Errors
    "SearchServerError",
    "InvalidArgumentError",
    "DocumentNotFoundError",
    "OutOfRangeError",
    # Index
    "InvertedIndex",
    "PostingList",
    "DocumentData",
    "DocumentStatus",
    "DocumentStore",
    "compute_average_rating",
    # Query
    "QueryParser",
    "ParsedQuery",
    "QueryWord",
    "QueryExecutor",
    "DocumentPredicate",
    "check_text_validity",
    "validate_text",
    # Analyzers
    "DocumentAnalyzer",
    "StopwordFilter",
    "is_valid_word",
    "make_stop_words",
    "SpaceTokenizer",
    "split_into_words",
    # Ranking
    "TFIDFScorer",
    "MAX_RESULT_DOCUMENT_COUNT",
    "RELEVANCE_EPSILON",
    "rank_documents",
]
