"""Request models (Pydantic *Params classes) for the MagentaA11y MCP Server."""

from typing import Any

from pydantic import BaseModel, Field

from .enums import NativePlatform, Platform, ToolName

# ============ CORE REQUEST MODELS ============


class MCPRequest(BaseModel):
    """Direct tool execution request."""

    tool: ToolName = Field(..., description="The tool to execute")
    params: dict[str, Any] = Field(default_factory=dict, description="Tool parameters")


# ============ TOOL PARAMETER MODELS ============


class ListComponentsParams(BaseModel):
    """Parameters for list_web_components / list_native_components."""

    category: str | None = Field(default=None, description="Optional category filter")


class GetComponentParams(BaseModel):
    """Parameters for get_web_component / get_native_component."""

    component: str = Field(..., min_length=1, description="Component name (e.g. 'button')")
    include_code_examples: bool = Field(
        default=True, description="Keep fenced code blocks in the returned content"
    )


class SearchCriteriaParams(BaseModel):
    """Parameters for search_web_criteria / search_native_criteria."""

    query: str = Field(..., min_length=1, description="Search term or phrase")
    max_results: int | None = Field(
        default=None, ge=0, description="Maximum number of results to return (0 uses the default)"
    )


class ComponentFormatParams(BaseModel):
    """Parameters for the per-format content tools and list_component_formats."""

    platform: Platform = Field(..., description="Platform (web or native)")
    component: str = Field(..., min_length=1, description="Component name")


class NativeNotesParams(BaseModel):
    """Parameters for get_component_native_notes."""

    platform: NativePlatform = Field(..., description="Native platform (ios or android)")
    component: str = Field(..., min_length=1, description="Component name")


class SuggestParams(BaseModel):
    """Parameters for suggest_similar_components."""

    platform: Platform = Field(..., description="Platform (web or native)")
    component: str = Field(..., min_length=1, description="Component name or near-miss")
    limit: int | None = Field(default=None, ge=1, le=50, description="Maximum suggestions")
