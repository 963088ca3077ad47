"""JSON-RPC 2.0 helpers for MCP transport.

This module provides utility functions for creating JSON-RPC 2.0
responses and errors, and for shaping tool results as MCP content.

See: https://www.jsonrpc.org/specification
"""

import json
from typing import Any

from ..models import ToolResult

# MCP protocol revision advertised in the initialize handshake
PROTOCOL_VERSION = "2025-03-26"

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response.

    Args:
        id: Request ID (must match the request)
        result: The result payload

    Returns:
        JSON-RPC 2.0 response dict
    """
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Args:
        id: Request ID (can be None for parse errors)
        code: Error code (negative integer)
        message: Human-readable error message

    Returns:
        JSON-RPC 2.0 error response dict
    """
    return {"jsonrpc": "2.0", "id": id, "error": {"code": code, "message": message}}


def tool_content(result: ToolResult) -> dict:
    """Wrap a ToolResult as an MCP tools/call result.

    Text results are passed through; structured data is pretty-printed JSON.
    """
    text = result.data if isinstance(result.data, str) else json.dumps(result.data, indent=2)
    content: dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if result.is_error:
        content["isError"] = True
    return content
