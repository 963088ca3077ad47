"""Tool handlers for the content engine.

This package contains the tool handlers organized by domain:
- components: list, get, search, and suggest components per platform
- formats: per-format front-matter content and format listing

Each handler is a standalone async function that takes:
- params: dict[str, Any] - Tool parameters from MCP call
- ctx: HandlerContext - Shared engine context (content loader, defaults)

And returns:
- ToolResult with data and an is_error flag
"""

import logging
from functools import partial
from typing import Any

from pydantic import ValidationError

from ...models import ContentFormat, Platform, ToolName, ToolResult
from .base import HandlerContext, HandlerFunc, dump, error_result, json_result
from .components import (
    handle_get_component,
    handle_list_components,
    handle_search_criteria,
    handle_suggest_similar,
)
from .formats import (
    handle_get_format,
    handle_get_native_notes,
    handle_list_formats,
)

logger = logging.getLogger(__name__)

TOOL_HANDLERS: dict[ToolName, HandlerFunc] = {
    # Web platform
    ToolName.LIST_WEB_COMPONENTS: partial(handle_list_components, platform=Platform.WEB),
    ToolName.GET_WEB_COMPONENT: partial(handle_get_component, platform=Platform.WEB),
    ToolName.SEARCH_WEB_CRITERIA: partial(handle_search_criteria, platform=Platform.WEB),
    # Native platform
    ToolName.LIST_NATIVE_COMPONENTS: partial(handle_list_components, platform=Platform.NATIVE),
    ToolName.GET_NATIVE_COMPONENT: partial(handle_get_component, platform=Platform.NATIVE),
    ToolName.SEARCH_NATIVE_CRITERIA: partial(handle_search_criteria, platform=Platform.NATIVE),
    # Content formats
    ToolName.GET_COMPONENT_GHERKIN: partial(handle_get_format, format=ContentFormat.GHERKIN),
    ToolName.GET_COMPONENT_CONDENSED: partial(handle_get_format, format=ContentFormat.CONDENSED),
    ToolName.GET_COMPONENT_DEVELOPER_NOTES: partial(
        handle_get_format, format=ContentFormat.DEVELOPER_NOTES
    ),
    ToolName.GET_COMPONENT_NATIVE_NOTES: handle_get_native_notes,
    ToolName.LIST_COMPONENT_FORMATS: handle_list_formats,
    # Lookup helpers
    ToolName.SUGGEST_SIMILAR_COMPONENTS: handle_suggest_similar,
}


async def execute_tool(name: str, params: dict[str, Any] | None, ctx: HandlerContext) -> ToolResult:
    """Dispatch a tool call to its handler.

    Unknown tools and invalid parameters become error payloads.

    Args:
        name: Tool name as sent by the client
        params: Tool arguments
        ctx: Shared handler context

    Returns:
        ToolResult from the handler
    """
    try:
        tool = ToolName(name)
    except ValueError:
        return ToolResult(data={"error": f"Unknown tool: {name}"}, is_error=True)

    try:
        return await TOOL_HANDLERS[tool](params or {}, ctx)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'params'}: {err['msg']}"
            for err in e.errors()
        )
        logger.info(f"{tool.value}: invalid parameters: {errors}")
        return ToolResult(data={"error": f"{tool.value}: invalid parameters: {errors}"}, is_error=True)


__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    "TOOL_HANDLERS",
    "dump",
    "error_result",
    "execute_tool",
    "json_result",
    # Component handlers
    "handle_get_component",
    "handle_list_components",
    "handle_search_criteria",
    "handle_suggest_similar",
    # Format handlers
    "handle_get_format",
    "handle_get_native_notes",
    "handle_list_formats",
]
