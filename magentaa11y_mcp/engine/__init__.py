"""Content engine: indexing, fact extraction, search, and tool handlers."""

from .loader import ContentLoader
from .search import SearchEngine

__all__ = ["ContentLoader", "SearchEngine"]
