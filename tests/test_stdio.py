"""Tests for the stdio server wiring."""

import mcp.types as types
import pytest

from cgov_mcp.engine.dispatch import ToolDispatcher
from cgov_mcp.stdio import build_stdio_server


class TestStdioServer:
    """Tests for build_stdio_server."""

    def test_registers_tool_handlers(self, dispatcher: ToolDispatcher) -> None:
        server = build_stdio_server(dispatcher)

        assert types.ListToolsRequest in server.request_handlers
        assert types.CallToolRequest in server.request_handlers

    @pytest.mark.asyncio
    async def test_lists_catalog(self, dispatcher: ToolDispatcher) -> None:
        server = build_stdio_server(dispatcher)
        handler = server.request_handlers[types.ListToolsRequest]

        result = await handler(types.ListToolsRequest(method="tools/list"))

        names = {tool.name for tool in result.root.tools}
        assert names == {tool["name"] for tool in dispatcher.catalog()}

    @pytest.mark.asyncio
    async def test_unknown_tool_is_error_result(self, dispatcher: ToolDispatcher) -> None:
        """Dispatch errors come back flagged, not as protocol faults."""
        server = build_stdio_server(dispatcher)
        handler = server.request_handlers[types.CallToolRequest]

        result = await handler(
            types.CallToolRequest(
                method="tools/call",
                params=types.CallToolRequestParams(name="does_not_exist", arguments={}),
            )
        )

        assert result.root.isError is True
        assert "does_not_exist" in result.root.content[0].text

    @pytest.mark.asyncio
    async def test_document_search(self, dispatcher: ToolDispatcher) -> None:
        server = build_stdio_server(dispatcher)
        handler = server.request_handlers[types.CallToolRequest]

        result = await handler(
            types.CallToolRequest(
                method="tools/call",
                params=types.CallToolRequestParams(
                    name="search_constitution", arguments={"query": "tenet"}
                ),
            )
        )

        assert not result.root.isError
        assert result.root.content[0].text.startswith('Found 1 matching section(s) for "tenet"')
        assert "- ARTICLE I. TENETS AND GUARDRAILS" in result.root.content[0].text
