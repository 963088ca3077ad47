"""Metadata index over the content corpus.

Walks ``<content_root>/<platform>/<category>/<component>.md`` once and keeps
one ``ComponentMetadata`` per component, keyed by name, per platform.
"""

import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path

from ...models import NATIVE_PLATFORMS, ComponentMetadata, Platform
from .errors import InitializationError, PartialIndexWarning

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def format_display_name(name: str) -> str:
    """Turn a hyphenated component name into a display name.

    ``"text-input"`` becomes ``"Text Input"``. Only the first character of
    each word is upper-cased.
    """
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


class MetadataIndex:
    """In-memory component metadata for every platform.

    Attributes:
        content_root: Root directory holding the platform directories
        components: Platform -> component name -> metadata
        warnings: Directories that could not be indexed
    """

    def __init__(self, content_root: Path | str):
        self.content_root = Path(content_root)
        self.components: dict[Platform, dict[str, ComponentMetadata]] = {
            platform: {} for platform in Platform
        }
        self.warnings: list[PartialIndexWarning] = []

    @classmethod
    async def build(cls, content_root: Path | str) -> "MetadataIndex":
        """Walk the content root and index every platform.

        Raises:
            InitializationError: If the content root is missing or the walk
                fails unexpectedly
        """
        index = cls(content_root)
        if not index.content_root.is_dir():
            raise InitializationError(f"Content root not found: {index.content_root}")

        try:
            for platform in Platform:
                await asyncio.to_thread(index._index_platform, platform)
        except InitializationError:
            raise
        except Exception as e:
            raise InitializationError(f"Failed to index content: {e}") from e

        return index

    def _warn(self, path: Path, reason: str) -> None:
        warning = PartialIndexWarning(str(path), reason)
        self.warnings.append(warning)
        logger.warning(f"Partial index: {warning}")

    def _index_platform(self, platform: Platform) -> None:
        platform_path = self.content_root / platform.value
        if not platform_path.is_dir():
            self._warn(platform_path, f"{platform.value} platform directory not found")
            return

        try:
            categories = sorted(entry for entry in platform_path.iterdir() if entry.is_dir())
        except OSError as e:
            self._warn(platform_path, f"cannot read platform directory: {e}")
            return

        target = self.components[platform]
        for category_path in categories:
            try:
                files = sorted(
                    entry
                    for entry in category_path.iterdir()
                    if entry.name.endswith(MARKDOWN_SUFFIX) and entry.is_file()
                )
                for file_path in files:
                    metadata = self._build_metadata(platform, category_path.name, file_path)
                    existing = target.get(metadata.name)
                    if existing is not None:
                        logger.warning(
                            f"Duplicate {platform.value} component '{metadata.name}': "
                            f"{metadata.path} replaces {existing.path}"
                        )
                    target[metadata.name] = metadata
            except OSError as e:
                self._warn(category_path, f"cannot read category {category_path.name}: {e}")

    def _build_metadata(self, platform: Platform, category: str, file_path: Path) -> ComponentMetadata:
        name = file_path.name[: -len(MARKDOWN_SUFFIX)]
        stats = file_path.stat()
        return ComponentMetadata(
            name=name,
            display_name=format_display_name(name),
            category=category,
            path=file_path.relative_to(self.content_root).as_posix(),
            platform=platform,
            last_modified=datetime.fromtimestamp(stats.st_mtime, tz=UTC),
            platforms=list(NATIVE_PLATFORMS) if platform is Platform.NATIVE else None,
        )

    # ============ QUERIES ============

    def get(self, platform: Platform, name: str) -> ComponentMetadata | None:
        """Look up one component by exact name."""
        return self.components[platform].get(name)

    def count(self, platform: Platform) -> int:
        return len(self.components[platform])

    def list_components(self, platform: Platform, category: str | None = None) -> list[ComponentMetadata]:
        """List components sorted by name, optionally filtered by exact category."""
        components = self.components[platform].values()
        if category:
            components = [c for c in components if c.category == category]
        return sorted(components, key=lambda c: c.name)

    def get_categories(self, platform: Platform) -> list[str]:
        """Distinct categories for a platform, sorted."""
        return sorted({c.category for c in self.components[platform].values()})
