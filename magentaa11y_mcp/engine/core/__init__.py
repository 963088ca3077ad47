"""Engine core module.

This module contains the core data structures and utilities for the
content engine:
- Document storage and front-matter parsing
- Metadata index over the content corpus
- Fact extraction (headings, WCAG criteria, platform tokens)
- Error taxonomy
"""

from .document import DocumentStore, ParsedDocument, parse_front_matter
from .errors import (
    ComponentNotFoundError,
    ContentError,
    DocumentNotFoundError,
    FormatUnavailableError,
    InitializationError,
    NotFoundError,
    PartialIndexWarning,
)
from .extract import (
    PLATFORM_TOKEN_RULES,
    ExtractionRule,
    extract_platform_tokens,
    extract_sections,
    extract_wcag_criteria,
    match_heading,
    strip_code_blocks,
)
from .index import MetadataIndex, format_display_name

__all__ = [
    # Document storage
    "DocumentStore",
    "ParsedDocument",
    "parse_front_matter",
    # Metadata index
    "MetadataIndex",
    "format_display_name",
    # Fact extraction
    "ExtractionRule",
    "PLATFORM_TOKEN_RULES",
    "extract_platform_tokens",
    "extract_sections",
    "extract_wcag_criteria",
    "match_heading",
    "strip_code_blocks",
    # Errors
    "ContentError",
    "InitializationError",
    "NotFoundError",
    "ComponentNotFoundError",
    "DocumentNotFoundError",
    "FormatUnavailableError",
    "PartialIndexWarning",
]
