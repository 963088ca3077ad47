"""MCP message handling over JSON-RPC 2.0.

Transport-agnostic: ``handle_message`` takes one decoded JSON-RPC message
and returns the response dict, or None for notifications.
"""

import logging
from typing import Any

from .. import __version__
from ..engine.handlers import HandlerContext, execute_tool
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PROTOCOL_VERSION,
    jsonrpc_error,
    jsonrpc_response,
    tool_content,
)
from .tool_defs import TOOL_DEFINITIONS

logger = logging.getLogger(__name__)

SERVER_INFO = {"name": "magentaa11y-mcp", "version": __version__}


async def handle_message(message: Any, ctx: HandlerContext) -> dict | None:
    """Handle one JSON-RPC message.

    Args:
        message: Decoded JSON-RPC request or notification
        ctx: Shared handler context

    Returns:
        JSON-RPC response dict, or None for notifications
    """
    if not isinstance(message, dict) or message.get("jsonrpc") != "2.0" or "method" not in message:
        return jsonrpc_error(
            message.get("id") if isinstance(message, dict) else None,
            INVALID_REQUEST,
            "Invalid request",
        )

    method = message["method"]
    params = message.get("params") or {}

    # Notifications carry no id and get no response
    if "id" not in message:
        logger.debug(f"Notification: {method}")
        return None

    request_id = message["id"]

    if method == "initialize":
        return jsonrpc_response(
            request_id,
            {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {"tools": {}},
                "serverInfo": SERVER_INFO,
            },
        )

    if method == "ping":
        return jsonrpc_response(request_id, {})

    if method == "tools/list":
        return jsonrpc_response(request_id, {"tools": TOOL_DEFINITIONS})

    if method == "tools/call":
        if not isinstance(params, dict) or not params.get("name"):
            return jsonrpc_error(request_id, INVALID_PARAMS, "tools/call requires a tool name")
        arguments = params.get("arguments") or {}
        if not isinstance(arguments, dict):
            return jsonrpc_error(request_id, INVALID_PARAMS, "Tool arguments must be an object")
        try:
            result = await execute_tool(params["name"], arguments, ctx)
        except Exception as e:
            logger.error(f"Tool {params['name']} failed: {e}", exc_info=True)
            return jsonrpc_error(request_id, INTERNAL_ERROR, "Internal error while executing tool")
        return jsonrpc_response(request_id, tool_content(result))

    return jsonrpc_error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")
