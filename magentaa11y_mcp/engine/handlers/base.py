"""Base infrastructure for tool handlers.

This module provides the common types and utilities used by all handler modules.
Each handler receives a HandlerContext with shared state and returns a ToolResult.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Coroutine

from pydantic import BaseModel

from ...models import ErrorResult, ToolResult

if TYPE_CHECKING:
    from ..loader import ContentLoader


@dataclass
class HandlerContext:
    """Context object passed to all handlers.

    Holds the initialized content loader and the result-shaping defaults.
    This decouples handlers from the transport.
    """

    loader: "ContentLoader"
    default_max_results: int = 10
    suggestion_limit: int = 5


# Type alias for handler functions
HandlerFunc = Callable[
    [dict[str, Any], HandlerContext],
    Coroutine[Any, Any, ToolResult],
]


def dump(model: BaseModel) -> dict[str, Any]:
    """Serialize a model with wire (camelCase) field names, dropping unset fields."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def json_result(model: BaseModel) -> ToolResult:
    return ToolResult(data=dump(model))


def error_result(error: ErrorResult) -> ToolResult:
    return ToolResult(data=dump(error), is_error=True)
