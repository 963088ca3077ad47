"""Content format tool handlers.

Handles:
- get_component_gherkin: Given/When/Then acceptance criteria
- get_component_condensed: Condensed testing instructions
- get_component_developer_notes: Implementation notes
- get_component_native_notes: iOS or Android developer notes
- list_component_formats: Formats present for a component

Format content is returned as raw text; failures carry suggestions (unknown
component) or the formats that do exist (missing format).
"""

import logging
from typing import Any

from ...models import (
    FORMAT_DESCRIPTIONS,
    ComponentFormatParams,
    ComponentFormatsResult,
    ContentFormat,
    ErrorResult,
    NativeNotesParams,
    Platform,
    ToolResult,
)
from ..core.errors import FormatUnavailableError, NotFoundError
from .base import HandlerContext, error_result, json_result

logger = logging.getLogger(__name__)


async def _format_content(
    ctx: HandlerContext,
    platform: Platform,
    component: str,
    format: ContentFormat,
    requested_platform: str | None = None,
) -> ToolResult:
    try:
        content = await ctx.loader.get_component_content(platform, component, format)
    except NotFoundError as e:
        return error_result(
            ErrorResult(
                error=str(e),
                component=component,
                platform=requested_platform,
                suggestions=ctx.loader.get_similar_components(
                    platform, component, ctx.suggestion_limit
                ),
            )
        )
    except FormatUnavailableError as e:
        logger.info(f"{e} (available: {', '.join(e.available) or 'none'})")
        return error_result(
            ErrorResult(
                error=str(e),
                component=component,
                platform=requested_platform,
                available_formats=e.available,
            )
        )
    return ToolResult(data=content)


async def handle_get_format(
    params: dict[str, Any],
    ctx: HandlerContext,
    format: ContentFormat,
) -> ToolResult:
    """Get one named content format for a component.

    Args:
        params: Dict containing:
            - platform: web or native
            - component: Component name

    Returns:
        ToolResult with the raw format text
    """
    args = ComponentFormatParams.model_validate(params)
    return await _format_content(ctx, args.platform, args.component, format)


async def handle_get_native_notes(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Get iOS or Android developer notes for a native component.

    Args:
        params: Dict containing:
            - platform: ios or android
            - component: Component name
    """
    args = NativeNotesParams.model_validate(params)
    return await _format_content(
        ctx,
        Platform.NATIVE,
        args.component,
        args.platform.notes_format,
        requested_platform=args.platform.value,
    )


async def handle_list_formats(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """List the content formats available for a component.

    Args:
        params: Dict containing:
            - platform: web or native
            - component: Component name

    Returns:
        ToolResult with ComponentFormatsResult
    """
    args = ComponentFormatParams.model_validate(params)
    try:
        formats = await ctx.loader.get_available_formats(args.platform, args.component)
        component = await ctx.loader.get_component(args.platform, args.component)
    except NotFoundError as e:
        return error_result(
            ErrorResult(
                error=str(e),
                component=args.component,
                suggestions=ctx.loader.get_similar_components(
                    args.platform, args.component, ctx.suggestion_limit
                ),
            )
        )

    result = ComponentFormatsResult(
        component=args.component,
        display_name=component.label or component.display_name,
        platform=args.platform.value,
        available_formats=[fmt.value for fmt in formats],
        format_descriptions={fmt.value: text for fmt, text in FORMAT_DESCRIPTIONS.items()},
    )
    return json_result(result)
