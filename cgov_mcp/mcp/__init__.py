"""MCP protocol layer: JSON-RPC helpers, tool catalog and request routing."""

from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import TOOL_DEFINITIONS
from .transport import handle_jsonrpc, handle_request

__all__ = [
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "SERVER_ERROR",
    "TOOL_DEFINITIONS",
    "handle_jsonrpc",
    "handle_request",
    "jsonrpc_error",
    "jsonrpc_response",
]
