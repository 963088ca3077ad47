"""MCP (Model Context Protocol) transport module.

This module contains components for the MCP transport:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- Message handling (initialize, ping, tools/list, tools/call)
"""

from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    PROTOCOL_VERSION,
    jsonrpc_error,
    jsonrpc_response,
    tool_content,
)
from .tool_defs import TOOL_DEFINITIONS
from .transport import handle_message

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    # Message handling
    "handle_message",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "tool_content",
    "PROTOCOL_VERSION",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]
