"""Pydantic models for MagentaA11y MCP Server request/response schemas.

This module re-exports all models. Import from submodules directly for
cleaner imports:

    from magentaa11y_mcp.models.enums import Platform, ContentFormat
    from magentaa11y_mcp.models.search import SearchResponse
"""

# ============ COMPONENT MODELS ============
from .components import (
    AndroidTokens,
    ComponentContent,
    ComponentMetadata,
    IOSTokens,
    PlatformTokens,
)

# ============ ENUMS ============
from .enums import (
    FORMAT_DESCRIPTIONS,
    NATIVE_PLATFORMS,
    ContentFormat,
    NativePlatform,
    Platform,
    ToolName,
)

# ============ REQUEST MODELS ============
from .requests import (
    ComponentFormatParams,
    GetComponentParams,
    ListComponentsParams,
    MCPRequest,
    NativeNotesParams,
    SearchCriteriaParams,
    SuggestParams,
)

# ============ RESULT MODELS ============
from .results import (
    ComponentFormatsResult,
    ComponentListResult,
    ErrorResult,
    HealthResponse,
    ReadyResponse,
    ToolResult,
)

# ============ SEARCH MODELS ============
from .search import MatchSnippet, SearchResponse, SearchResult

__all__ = [
    # Enums
    "ContentFormat",
    "FORMAT_DESCRIPTIONS",
    "NATIVE_PLATFORMS",
    "NativePlatform",
    "Platform",
    "ToolName",
    # Component models
    "AndroidTokens",
    "ComponentContent",
    "ComponentMetadata",
    "IOSTokens",
    "PlatformTokens",
    # Request models
    "ComponentFormatParams",
    "GetComponentParams",
    "ListComponentsParams",
    "MCPRequest",
    "NativeNotesParams",
    "SearchCriteriaParams",
    "SuggestParams",
    # Result models
    "ComponentFormatsResult",
    "ComponentListResult",
    "ErrorResult",
    "HealthResponse",
    "ReadyResponse",
    "ToolResult",
    # Search models
    "MatchSnippet",
    "SearchResponse",
    "SearchResult",
]
