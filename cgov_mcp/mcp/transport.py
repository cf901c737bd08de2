"""Transport-independent MCP request routing.

`handle_jsonrpc` takes a decoded JSON-RPC body (single message or batch)
and returns the response payload, or None when nothing should be sent
back (notifications only).
"""

import logging
from typing import TYPE_CHECKING, Any

from .. import __version__
from .jsonrpc import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    is_notification,
    jsonrpc_error,
    jsonrpc_response,
)

if TYPE_CHECKING:
    from ..engine.dispatch import ToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "cgov-mcp"

# Newest first; an unknown client version is answered with the newest one
SUPPORTED_PROTOCOL_VERSIONS = ("2025-06-18", "2025-03-26", "2024-11-05")


def negotiate_protocol_version(requested: Any) -> str:
    if requested in SUPPORTED_PROTOCOL_VERSIONS:
        return requested
    return SUPPORTED_PROTOCOL_VERSIONS[0]


async def handle_call_tool(id: Any, params: dict, dispatcher: "ToolDispatcher") -> dict:
    """Handle MCP tools/call request.

    Tool failures come back as results with isError set, never as
    JSON-RPC errors.
    """
    name = params.get("name")
    if not isinstance(name, str):
        return jsonrpc_error(id, INVALID_PARAMS, "Missing tool name")

    arguments = params.get("arguments") or {}
    if not isinstance(arguments, dict):
        return jsonrpc_error(id, INVALID_PARAMS, "Tool arguments must be an object")

    result = await dispatcher.dispatch(name, arguments)
    return jsonrpc_response(id, result.to_mcp())


async def handle_request(message: Any, dispatcher: "ToolDispatcher") -> dict | None:
    """Handle a single JSON-RPC message."""
    if not isinstance(message, dict):
        return jsonrpc_error(None, INVALID_REQUEST, "Invalid Request")

    method = message.get("method")
    if is_notification(message):
        logger.debug(f"Notification received: {method}")
        return None

    id = message.get("id")
    params = message.get("params") or {}
    if not isinstance(method, str) or not isinstance(params, dict):
        return jsonrpc_error(id, INVALID_REQUEST, "Invalid Request")

    if method == "initialize":
        return jsonrpc_response(id, {
            "protocolVersion": negotiate_protocol_version(params.get("protocolVersion")),
            "serverInfo": {"name": SERVER_NAME, "version": __version__},
            "capabilities": {"tools": {}},
        })
    elif method == "tools/list":
        return jsonrpc_response(id, {"tools": dispatcher.catalog()})
    elif method == "tools/call":
        return await handle_call_tool(id, params, dispatcher)
    elif method == "ping":
        return jsonrpc_response(id, {})
    else:
        return jsonrpc_error(id, METHOD_NOT_FOUND, f"Method not found: {method}")


async def handle_jsonrpc(body: Any, dispatcher: "ToolDispatcher") -> dict | list | None:
    """Route a decoded JSON-RPC body, batch or single."""
    if isinstance(body, list):
        if not body:
            return jsonrpc_error(None, INVALID_REQUEST, "Invalid Request")
        responses = [r for message in body if (r := await handle_request(message, dispatcher))]
        return responses or None
    return await handle_request(body, dispatcher)
