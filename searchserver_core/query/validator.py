"""SearchServer Query Validator - Query and Document Text Checks.

The same rules gate document bodies and raw queries: no control
characters, no dangling minus, no doubled leading minus.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Optional

from searchserver_core.analyzers.filters import is_valid_word
from searchserver_core.analyzers.tokenizers import split_into_words
from searchserver_core.exceptions import InvalidArgumentError

MINUS = "-"


def find_invalid_word(text: str) -> Optional[str]:
    """Return the first token that breaks the validity rules, if any."""
    for word in split_into_words(text):
        if word == MINUS:
            return word
        if word.startswith(MINUS * 2):
            return word
        if not is_valid_word(word):
            return word
    return None


def check_text_validity(text: str) -> bool:
    """Check whether text is a valid query or document body."""
    return find_invalid_word(text) is None


def validate_text(text: str, what: str = "query") -> None:
    """Raise if text is not a valid query or document body.

    Args:
        text: Raw text
        what: Noun used in the error message

    Raises:
        InvalidArgumentError: On control characters, a lone ``-``,
            or a word starting with ``--``
    """
    word = find_invalid_word(text)
    if word is None:
        return

    if word == MINUS:
        reason = "dangling minus"
    elif word.startswith(MINUS * 2):
        reason = "double minus"
    else:
        reason = "control characters"

    raise InvalidArgumentError(
        f"Invalid {what}: {reason} in word {word!r}",
        details={"word": word, "reason": reason},
    )


__all__ = [
    "check_text_validity",
    "find_invalid_word",
    "validate_text",
]
