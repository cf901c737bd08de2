"""Response models for tool results and HTTP endpoints."""

import json
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field


class TextContent(BaseModel):
    """A text content block of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Outcome of one tool invocation.

    Tool failures are results with `is_error` set, never exceptions.
    """

    content: list[TextContent] = Field(default_factory=list)
    is_error: bool = Field(default=False, description="Whether the tool reported an error")

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    def to_mcp(self) -> dict[str, Any]:
        """Serialize to the MCP CallToolResult shape."""
        payload: dict[str, Any] = {"content": [block.model_dump() for block in self.content]}
        if self.is_error:
            payload["isError"] = True
        return payload


def text_result(text: str, is_error: bool = False) -> ToolResult:
    return ToolResult(content=[TextContent(text=text)], is_error=is_error)


def json_result(data: Any, is_error: bool = False) -> ToolResult:
    return text_result(json.dumps(data, indent=2, default=str), is_error)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="ok")
    server: str = Field(default="cgov-mcp")
    version: str = Field(default="1.0.0")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
