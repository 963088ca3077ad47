"""Content loader: the retrieval facade over the MagentaA11y corpus.

A ``ContentLoader`` owns the metadata index for both platforms. It is
constructed once, initialized once at startup, and handed to every tool
handler. Component bodies are re-read on every content request.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from ..models import (
    ComponentContent,
    ComponentMetadata,
    ContentFormat,
    NativePlatform,
    Platform,
    SearchResponse,
)
from .core.document import DocumentStore, ParsedDocument
from .core.errors import ComponentNotFoundError, FormatUnavailableError, InitializationError
from .core.extract import (
    extract_platform_tokens,
    extract_sections,
    extract_wcag_criteria,
    strip_code_blocks,
)
from .core.index import MetadataIndex
from .scoring import MAX_SNIPPETS, SEARCH_THRESHOLD, SNIPPET_MAX_CHARS, SUGGEST_THRESHOLD
from .search import SearchEngine

logger = logging.getLogger(__name__)


def format_value(value: Any) -> str:
    """Front-matter format values are returned as text.

    Lists and mappings are rendered back to YAML; other scalars use ``str``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (list, dict)):
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True)
    return str(value)


class ContentLoader:
    """Indexes the content corpus and answers component queries.

    Args:
        content_root: Directory containing the ``web`` and ``native`` trees
        search_threshold: Distance threshold for body search
        suggest_threshold: Distance threshold for name suggestions
        max_snippets: Snippets per search result
        snippet_max_chars: Snippet length before the ellipsis
    """

    def __init__(
        self,
        content_root: Path | str,
        search_threshold: float = SEARCH_THRESHOLD,
        suggest_threshold: float = SUGGEST_THRESHOLD,
        max_snippets: int = MAX_SNIPPETS,
        snippet_max_chars: int = SNIPPET_MAX_CHARS,
    ):
        self.content_root = Path(content_root)
        self.store = DocumentStore(self.content_root)
        self.search_threshold = search_threshold
        self.suggest_threshold = suggest_threshold
        self.max_snippets = max_snippets
        self.snippet_max_chars = snippet_max_chars
        self._index: MetadataIndex | None = None
        self._search: SearchEngine | None = None

    @property
    def indexed(self) -> bool:
        return self._index is not None

    async def initialize(self) -> None:
        """Index all content. Safe to call more than once.

        Raises:
            InitializationError: If the corpus cannot be indexed
        """
        if self._index is not None:
            return

        try:
            index = await MetadataIndex.build(self.content_root)
        except InitializationError as e:
            logger.error(f"Error indexing content: {e}")
            raise

        self._index = index
        self._search = SearchEngine(
            index,
            self.store,
            search_threshold=self.search_threshold,
            suggest_threshold=self.suggest_threshold,
            max_snippets=self.max_snippets,
            snippet_max_chars=self.snippet_max_chars,
        )
        logger.info(
            f"Indexed {index.count(Platform.WEB)} web and "
            f"{index.count(Platform.NATIVE)} native components"
        )

    @property
    def index(self) -> MetadataIndex:
        if self._index is None:
            raise InitializationError("Content has not been indexed; call initialize() first")
        return self._index

    @property
    def search_engine(self) -> SearchEngine:
        if self._search is None:
            raise InitializationError("Content has not been indexed; call initialize() first")
        return self._search

    # ============ METADATA QUERIES ============

    def list_components(self, platform: Platform, category: str | None = None) -> list[ComponentMetadata]:
        return self.index.list_components(platform, category)

    def get_categories(self, platform: Platform) -> list[str]:
        return self.index.get_categories(platform)

    def get_metadata(self, platform: Platform, name: str) -> ComponentMetadata:
        """Exact lookup by name.

        Raises:
            ComponentNotFoundError: If ``name`` is not indexed for ``platform``
        """
        metadata = self.index.get(platform, name)
        if metadata is None:
            raise ComponentNotFoundError(platform.value, name)
        return metadata

    async def _read(self, platform: Platform, name: str) -> tuple[ComponentMetadata, ParsedDocument]:
        metadata = self.get_metadata(platform, name)
        return metadata, await self.store.read(platform.value, metadata.path)

    # ============ CONTENT QUERIES ============

    async def get_component(
        self,
        platform: Platform,
        name: str,
        include_code_examples: bool = True,
    ) -> ComponentContent:
        """Full component detail with extracted facts.

        Facts are always extracted from the full body; ``include_code_examples``
        only affects the returned ``content``.

        Raises:
            ComponentNotFoundError: If the component is not indexed
        """
        metadata, parsed = await self._read(platform, name)
        body = parsed.body
        label = parsed.front_matter.get("label")

        return ComponentContent(
            component=metadata.name,
            display_name=metadata.display_name,
            category=metadata.category,
            label=format_value(label) if label is not None else None,
            content=body if include_code_examples else strip_code_blocks(body),
            sections=extract_sections(body),
            wcag_criteria=extract_wcag_criteria(body),
            last_modified=metadata.last_modified,
            platforms=extract_platform_tokens(body) if platform is Platform.NATIVE else None,
        )

    async def get_available_formats(self, platform: Platform, name: str) -> list[ContentFormat]:
        """Formats present in the component's front-matter, in declaration order.

        Raises:
            ComponentNotFoundError: If the component is not indexed
        """
        _, parsed = await self._read(platform, name)
        return [fmt for fmt in ContentFormat if parsed.front_matter.get(fmt.value) is not None]

    async def get_component_content(self, platform: Platform, name: str, format: ContentFormat) -> str:
        """Raw text of one front-matter format.

        Raises:
            ComponentNotFoundError: If the component is not indexed
            FormatUnavailableError: If the component has no such format
        """
        _, parsed = await self._read(platform, name)
        value = parsed.front_matter.get(format.value)
        if value is None:
            available = [
                fmt.value for fmt in ContentFormat if parsed.front_matter.get(fmt.value) is not None
            ]
            raise FormatUnavailableError(platform.value, name, format.value, available)
        return format_value(value)

    async def get_native_notes(self, native_platform: NativePlatform, name: str) -> str:
        """iOS or Android developer notes for a native component."""
        return await self.get_component_content(Platform.NATIVE, name, native_platform.notes_format)

    # ============ SEARCH ============

    async def search(self, platform: Platform, query: str, max_results: int = 10) -> SearchResponse:
        return await self.search_engine.search(platform, query, max_results)

    def get_similar_components(self, platform: Platform, name: str, limit: int = 5) -> list[str]:
        return self.search_engine.suggest_similar(platform, name, limit)
