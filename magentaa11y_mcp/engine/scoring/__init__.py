"""Scoring engine for component search.

This package provides:
- Multi-field fuzzy matching (rapidfuzz) with Fuse-style distances
- Match snippet extraction with section tracking

Usage:
    from magentaa11y_mcp.engine.scoring import FuzzyIndex, extract_match_snippets
"""

from .constants import (
    DEFAULT_SECTION,
    ELLIPSIS,
    MAX_SNIPPETS,
    SEARCH_THRESHOLD,
    SNIPPET_MAX_CHARS,
    SUGGEST_THRESHOLD,
)
from .fuzzy import FuzzyIndex, FuzzyMatch
from .snippets import extract_match_snippets

__all__ = [
    # Constants
    "DEFAULT_SECTION",
    "ELLIPSIS",
    "MAX_SNIPPETS",
    "SEARCH_THRESHOLD",
    "SNIPPET_MAX_CHARS",
    "SUGGEST_THRESHOLD",
    # Fuzzy matching
    "FuzzyIndex",
    "FuzzyMatch",
    # Snippets
    "extract_match_snippets",
]
