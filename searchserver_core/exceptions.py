"""SearchServer Exceptions - Error Taxonomy.

Every error raised by the core derives from SearchServerError and from
the builtin exception a caller would naturally expect, so both
``except InvalidArgumentError`` and ``except ValueError`` work.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class SearchServerError(Exception):
    """Base exception for all search server errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(SearchServerError, ValueError):
    """Malformed stop words, query or document text, or a bad document id."""


class DocumentNotFoundError(SearchServerError, KeyError):
    """Lookup of a document id that was never added."""


class OutOfRangeError(SearchServerError, IndexError):
    """Positional lookup outside the insertion-order range."""


__all__ = [
    "SearchServerError",
    "InvalidArgumentError",
    "DocumentNotFoundError",
    "OutOfRangeError",
]
