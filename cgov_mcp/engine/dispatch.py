"""Tool routing.

`ToolDispatcher` maps tool names to handlers and turns every outcome into
a ToolResult, so transports never see a tool failure as an exception.
"""

import logging
from functools import partial
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..mcp.tool_defs import TOOL_DEFINITIONS
from ..models import ToolName, ToolResult, text_result
from .documents import CONSTITUTION, VISION, VOTING_PRINCIPLES, DocumentStore
from .formatting import ResultLimits
from .handlers import (
    HandlerContext,
    HandlerFunc,
    handle_describe_table,
    handle_funding_partitions,
    handle_get_section,
    handle_kpi_budgets,
    handle_list_tables,
    handle_query_database,
    handle_search_document,
    handle_vision_kpis,
    handle_voting_criteria,
)

if TYPE_CHECKING:
    from ..config import Settings
    from ..db import DatabasePool

logger = logging.getLogger(__name__)

TOOL_HANDLERS: dict[ToolName, HandlerFunc] = {
    # Database
    ToolName.QUERY_DATABASE: handle_query_database,
    ToolName.LIST_TABLES: handle_list_tables,
    ToolName.DESCRIBE_TABLE: handle_describe_table,
    # Constitution
    ToolName.SEARCH_CONSTITUTION: partial(handle_search_document, CONSTITUTION),
    ToolName.GET_CONSTITUTION_SECTION: partial(handle_get_section, CONSTITUTION),
    # Vision 2030
    ToolName.SEARCH_VISION_2030: partial(handle_search_document, VISION),
    ToolName.GET_VISION_SECTION: partial(handle_get_section, VISION),
    ToolName.GET_VISION_KPIS: handle_vision_kpis,
    # Voting principles
    ToolName.SEARCH_VOTING_PRINCIPLES: partial(handle_search_document, VOTING_PRINCIPLES),
    ToolName.GET_VOTING_PRINCIPLES_SECTION: partial(handle_get_section, VOTING_PRINCIPLES),
    ToolName.GET_VOTING_KPI_BUDGETS: handle_kpi_budgets,
    ToolName.GET_FUNDING_PARTITIONS: handle_funding_partitions,
    ToolName.GET_VOTING_CRITERIA: handle_voting_criteria,
}


def _describe_validation_error(e: ValidationError) -> str:
    parts = []
    for error in e.errors():
        loc = ".".join(str(p) for p in error["loc"]) or "arguments"
        parts.append(f"{loc}: {error['msg']}")
    return "; ".join(parts)


class ToolDispatcher:
    """Executes tools by name against a shared HandlerContext."""

    def __init__(self, ctx: HandlerContext):
        self.ctx = ctx

    def catalog(self) -> list[dict]:
        """Tool definitions as returned by tools/list."""
        return TOOL_DEFINITIONS

    async def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Execute a tool.

        Args:
            name: Tool name from the catalog
            arguments: Raw tool arguments

        Returns:
            ToolResult; failures are reported with is_error set
        """
        try:
            tool = ToolName(name)
        except ValueError:
            logger.warning(f"Unknown tool requested: {name}")
            return text_result(f"Unknown tool: {name}", is_error=True)

        handler = TOOL_HANDLERS[tool]
        try:
            return await handler(arguments or {}, self.ctx)
        except ValidationError as e:
            return text_result(f"Invalid parameter: {_describe_validation_error(e)}", is_error=True)
        except Exception as e:
            logger.error(f"Tool {name} failed: {e}", exc_info=True)
            return text_result(f"Database error: {e}", is_error=True)


def create_dispatcher(settings: "Settings", pool: "DatabasePool") -> ToolDispatcher:
    """Build a dispatcher whose context is wired from settings."""
    ctx = HandlerContext(
        pool=pool,
        store=DocumentStore(settings.documents_dir, cache_enabled=settings.document_cache_enabled),
        limits=ResultLimits(
            section_lookup=settings.section_result_limit,
            full_sections=settings.full_section_limit,
            summary=settings.summary_limit,
        ),
    )
    return ToolDispatcher(ctx)
