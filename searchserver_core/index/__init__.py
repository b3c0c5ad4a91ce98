"""SearchServer Index Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

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

__all__ = [
    "InvertedIndex",
    "PostingList",
    "DocumentData",
    "DocumentStatus",
    "DocumentStore",
    "compute_average_rating",
]
