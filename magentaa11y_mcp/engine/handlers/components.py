"""Component tool handlers.

Handles:
- list_web_components / list_native_components: List indexed components
- get_web_component / get_native_component: Full component detail
- search_web_criteria / search_native_criteria: Fuzzy criteria search
- suggest_similar_components: Near-miss component names
"""

import logging
from typing import Any

from ...models import (
    ComponentListResult,
    ErrorResult,
    GetComponentParams,
    ListComponentsParams,
    Platform,
    SearchCriteriaParams,
    SuggestParams,
    ToolResult,
)
from ..core.errors import NotFoundError
from .base import HandlerContext, error_result, json_result

logger = logging.getLogger(__name__)


async def handle_list_components(
    params: dict[str, Any],
    ctx: HandlerContext,
    platform: Platform,
) -> ToolResult:
    """List components for a platform, optionally filtered by category.

    Args:
        params: Dict containing:
            - category: Optional exact category filter

    Returns:
        ToolResult with ComponentListResult (components + all categories)
    """
    args = ListComponentsParams.model_validate(params)
    result = ComponentListResult(
        components=ctx.loader.list_components(platform, args.category),
        categories=ctx.loader.get_categories(platform),
    )
    return json_result(result)


async def handle_get_component(
    params: dict[str, Any],
    ctx: HandlerContext,
    platform: Platform,
) -> ToolResult:
    """Get detailed accessibility criteria for one component.

    Args:
        params: Dict containing:
            - component: Component name (e.g. 'button')
            - include_code_examples: Keep fenced code blocks (default True)

    Returns:
        ToolResult with ComponentContent, or an error payload with
        suggestions when the component does not exist
    """
    args = GetComponentParams.model_validate(params)
    try:
        component = await ctx.loader.get_component(
            platform, args.component, include_code_examples=args.include_code_examples
        )
    except NotFoundError as e:
        logger.info(f"get {platform.value} component failed: {e}")
        return error_result(
            ErrorResult(
                error="Component not found",
                component=args.component,
                suggestions=ctx.loader.get_similar_components(
                    platform, args.component, ctx.suggestion_limit
                ),
            )
        )
    return json_result(component)


async def handle_search_criteria(
    params: dict[str, Any],
    ctx: HandlerContext,
    platform: Platform,
) -> ToolResult:
    """Search a platform's criteria by keyword.

    Args:
        params: Dict containing:
            - query: Search term or phrase
            - max_results: Maximum results (0 or absent uses the default)

    Returns:
        ToolResult with SearchResponse
    """
    args = SearchCriteriaParams.model_validate(params)
    max_results = args.max_results or ctx.default_max_results
    response = await ctx.loader.search(platform, args.query, max_results)
    return json_result(response)


async def handle_suggest_similar(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Suggest component names close to a (possibly misspelled) name.

    Args:
        params: Dict containing:
            - platform: web or native
            - component: Name to match
            - limit: Maximum suggestions (default from settings)
    """
    args = SuggestParams.model_validate(params)
    suggestions = ctx.loader.get_similar_components(
        args.platform, args.component, args.limit or ctx.suggestion_limit
    )
    return ToolResult(
        data={
            "component": args.component,
            "platform": args.platform.value,
            "suggestions": suggestions,
        }
    )
