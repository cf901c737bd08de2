"""Exception types raised by the cgov MCP server."""


class CgovError(Exception):
    """Base class for errors surfaced to tool callers as error results."""


class DocumentUnavailableError(CgovError):
    """A policy document could not be read from its backing storage."""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"Document '{key}' unavailable: {reason}")
