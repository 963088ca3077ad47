"""Fuzzy component search and name suggestions.

The body index is rebuilt on every search call from freshly read documents;
nothing is shared between calls.
"""

import logging
from dataclasses import dataclass

from rapidfuzz import fuzz

from ..models import ComponentMetadata, Platform, SearchResponse, SearchResult
from .core.document import DocumentStore
from .core.errors import NotFoundError
from .core.index import MetadataIndex
from .scoring import (
    MAX_SNIPPETS,
    SEARCH_THRESHOLD,
    SNIPPET_MAX_CHARS,
    SUGGEST_THRESHOLD,
    FuzzyIndex,
    extract_match_snippets,
)

logger = logging.getLogger(__name__)


@dataclass
class SearchDocument:
    """A component paired with its body for one search call."""

    component: ComponentMetadata
    content: str


class SearchEngine:
    """Ranked free-text search and near-miss name suggestions for one corpus."""

    def __init__(
        self,
        index: MetadataIndex,
        store: DocumentStore,
        search_threshold: float = SEARCH_THRESHOLD,
        suggest_threshold: float = SUGGEST_THRESHOLD,
        max_snippets: int = MAX_SNIPPETS,
        snippet_max_chars: int = SNIPPET_MAX_CHARS,
    ):
        self.index = index
        self.store = store
        self.search_threshold = search_threshold
        self.suggest_threshold = suggest_threshold
        self.max_snippets = max_snippets
        self.snippet_max_chars = snippet_max_chars

    async def _load_documents(self, platform: Platform) -> list[SearchDocument]:
        documents = []
        for component in self.index.list_components(platform):
            try:
                parsed = await self.store.read(platform.value, component.path)
            except (NotFoundError, OSError) as e:
                logger.warning(f"Error loading component {component.name}: {e}")
                continue
            documents.append(SearchDocument(component=component, content=parsed.body))
        return documents

    async def search(self, platform: Platform, query: str, max_results: int = 10) -> SearchResponse:
        """Search component bodies, names, and display names.

        Args:
            platform: Platform to search
            query: Free-text query
            max_results: Maximum results returned (applied after ranking)

        Returns:
            SearchResponse with ranked results and the pre-truncation total
        """
        documents = await self._load_documents(platform)
        fuzzy_index = FuzzyIndex(
            documents,
            keys={
                "content": lambda d: d.content,
                "name": lambda d: d.component.name,
                "displayName": lambda d: d.component.display_name,
            },
            threshold=self.search_threshold,
            scorer=fuzz.partial_ratio,
            scorers={"name": fuzz.WRatio, "displayName": fuzz.WRatio},
        )
        matches = fuzzy_index.search(query)

        results = [
            SearchResult(
                component=match.item.component.name,
                category=match.item.component.category,
                matches=extract_match_snippets(
                    match.item.content,
                    query,
                    max_snippets=self.max_snippets,
                    max_chars=self.snippet_max_chars,
                ),
                relevance=match.relevance,
            )
            for match in matches[:max_results]
        ]

        logger.info(
            f"Search {platform.value} '{query}': {len(matches)} matches, returning {len(results)}"
        )
        return SearchResponse(query=query, results=results, total_results=len(matches))

    def suggest_similar(self, platform: Platform, name: str, limit: int = 5) -> list[str]:
        """Component names close to ``name`` (typos, near-misses), best first."""
        fuzzy_index = FuzzyIndex(
            self.index.list_components(platform),
            keys={
                "name": lambda c: c.name,
                "displayName": lambda c: c.display_name,
            },
            threshold=self.suggest_threshold,
            scorer=fuzz.WRatio,
        )
        return [match.item.name for match in fuzzy_index.search(name)[:limit]]
