"""SearchServer Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

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

__all__ = [
    "QueryParser",
    "ParsedQuery",
    "QueryWord",
    "QueryExecutor",
    "DocumentPredicate",
    "check_text_validity",
    "validate_text",
]
