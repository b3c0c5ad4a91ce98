"""SearchServer Analyzers - Text Analysis Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from searchserver_core.analyzers.base import (
    Analyzer,
    Token,
    TokenStream,
    Tokenizer,
    TokenFilter,
)
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

__all__ = [
    "Analyzer",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "DocumentAnalyzer",
    "StopwordFilter",
    "is_valid_word",
    "make_stop_words",
    "SpaceTokenizer",
    "split_into_words",
]
