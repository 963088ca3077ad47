"""Tool result and error payload models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .components import ComponentMetadata


class ToolResult(BaseModel):
    """Outcome of a tool handler.

    ``data`` is either a JSON-serializable payload or raw text (format
    content). ``is_error`` marks structured failure payloads.
    """

    data: Any = Field(..., description="Tool output")
    is_error: bool = Field(default=False, description="Whether data is an error payload")


class ComponentListResult(BaseModel):
    """Result of list_web_components / list_native_components."""

    components: list[ComponentMetadata] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)


class ComponentFormatsResult(BaseModel):
    """Result of list_component_formats."""

    model_config = ConfigDict(populate_by_name=True)

    component: str = Field(..., description="Component identifier as requested")
    display_name: str = Field(..., alias="displayName")
    platform: str = Field(..., description="Content platform")
    available_formats: list[str] = Field(default_factory=list, alias="availableFormats")
    format_descriptions: dict[str, str] = Field(default_factory=dict, alias="formatDescriptions")


class ErrorResult(BaseModel):
    """Structured lookup failure returned to the caller."""

    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(..., description="Human-readable error")
    component: str | None = Field(default=None, description="Identifier as requested")
    platform: str | None = Field(default=None, description="Requested sub-platform")
    suggestions: list[str] | None = Field(default=None, description="Similar component names")
    available_formats: list[str] | None = Field(
        default=None, alias="availableFormats", description="Formats present for the component"
    )


# ============ HEALTH MODELS ============


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Server version")
    timestamp: datetime = Field(..., description="Server time")


class ReadyResponse(BaseModel):
    """Readiness check response."""

    ready: bool = Field(..., description="Whether the content index is built")
    components: dict[str, int] = Field(default_factory=dict, description="Components per platform")
    warnings: list[str] = Field(default_factory=list, description="Partial index warnings")
