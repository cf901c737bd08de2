"""cgov-mcp: read-only governance document and database tools over MCP."""

__version__ = "1.0.0"
