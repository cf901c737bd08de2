"""stdio transport built on the MCP SDK low-level server.

stdout carries the protocol; all logging goes to stderr.
"""

import logging
from typing import TYPE_CHECKING, Any

import mcp.server.stdio
import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from . import __version__
from .errors import CgovError
from .mcp.transport import SERVER_NAME

if TYPE_CHECKING:
    from .engine.dispatch import ToolDispatcher

logger = logging.getLogger(__name__)


class ToolReportedError(CgovError):
    """Carries an error-flagged tool result through the SDK.

    The SDK turns an exception raised by a call_tool handler into a result
    with isError set and the exception text as content.
    """


def build_stdio_server(dispatcher: "ToolDispatcher") -> Server:
    """Create the SDK server backed by the tool dispatcher."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=tool["name"],
                description=tool["description"],
                inputSchema=tool["inputSchema"],
            )
            for tool in dispatcher.catalog()
        ]

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        result = await dispatcher.dispatch(name, arguments or {})
        if result.is_error:
            raise ToolReportedError(result.text)
        return [types.TextContent(type="text", text=block.text) for block in result.content]

    return server


async def run_stdio(dispatcher: "ToolDispatcher") -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    server = build_stdio_server(dispatcher)
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info("cgov-mcp server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version=__version__,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )
