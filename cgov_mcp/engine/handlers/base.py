"""Base infrastructure for tool handlers.

Each handler receives the raw argument dict and a HandlerContext carrying
the explicitly constructed resources, and returns a ToolResult.
"""

from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..formatting import ResultLimits

if TYPE_CHECKING:
    from ...db import DatabasePool
    from ...models import ToolResult
    from ..documents import DocumentStore


@dataclass
class HandlerContext:
    """Context object passed to all handlers.

    Holds no per-request state; concurrent invocations share it safely.
    """

    # Read-only database pool (database tools only)
    pool: "DatabasePool"

    # Document text access (document tools only)
    store: "DocumentStore"

    # Presentation limits for rendered results
    limits: ResultLimits = field(default_factory=ResultLimits)


# Type alias for handler functions
HandlerFunc = Callable[
    [dict[str, Any], HandlerContext],
    Coroutine[Any, Any, "ToolResult"],
]
