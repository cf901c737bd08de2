"""Tool handlers.

This package contains tool handlers organized by domain:
- database: Read-only SQL and schema introspection
- document: Search and section lookup for the policy documents
- extracts: KPI, budget, partition and criteria extracts

Each handler is an async function that takes:
- params: dict[str, Any] - Tool arguments from the MCP call
- ctx: HandlerContext - Pool, document store and result limits

And returns a ToolResult. Document handlers additionally take the
DocumentSpec they operate on as their first argument.
"""

from .base import HandlerContext, HandlerFunc
from .database import (
    handle_describe_table,
    handle_list_tables,
    handle_query_database,
    is_read_only_statement,
)
from .document import handle_get_section, handle_search_document
from .extracts import (
    handle_funding_partitions,
    handle_kpi_budgets,
    handle_vision_kpis,
    handle_voting_criteria,
)

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    # Database handlers
    "handle_query_database",
    "handle_list_tables",
    "handle_describe_table",
    "is_read_only_statement",
    # Document handlers
    "handle_search_document",
    "handle_get_section",
    # Extract handlers
    "handle_vision_kpis",
    "handle_kpi_budgets",
    "handle_funding_partitions",
    "handle_voting_criteria",
]
