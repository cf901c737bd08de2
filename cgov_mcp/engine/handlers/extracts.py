"""Extract tool handlers for the vision and voting principles documents.

Handles:
- get_vision_kpis: Core KPI tables, optionally by category
- get_voting_kpi_budgets: KPI budget allocations, optionally one KPI
- get_funding_partitions: Front-loaded funding partitions
- get_voting_criteria: Voting decision framework criteria
"""

from collections.abc import Callable
from typing import Any

from ...errors import CgovError
from ...models import (
    FundingPartitionParams,
    KpiBudgetParams,
    ToolResult,
    VisionKpiParams,
    VotingCriteriaParams,
    text_result,
)
from .. import extracts
from ..documents import VISION, VOTING_PRINCIPLES, DocumentSpec
from .base import HandlerContext
from .document import load_document


async def _run_extract(
    spec: DocumentSpec,
    ctx: HandlerContext,
    error_label: str,
    extract: Callable[[str], str],
) -> ToolResult:
    try:
        content = await load_document(spec, ctx)
    except CgovError as e:
        return text_result(f"Error retrieving {error_label}: {e}", is_error=True)
    return text_result(extract(content))


async def handle_vision_kpis(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    args = VisionKpiParams.model_validate(params)
    return await _run_extract(
        VISION, ctx, "KPIs", lambda content: extracts.vision_kpis(content, args.category)
    )


async def handle_kpi_budgets(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    args = KpiBudgetParams.model_validate(params)
    return await _run_extract(
        VOTING_PRINCIPLES,
        ctx,
        "KPI budgets",
        lambda content: extracts.kpi_budgets(content, args.kpi_number),
    )


async def handle_funding_partitions(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    args = FundingPartitionParams.model_validate(params)
    return await _run_extract(
        VOTING_PRINCIPLES,
        ctx,
        "funding partitions",
        lambda content: extracts.funding_partitions(content, args.partition),
    )


async def handle_voting_criteria(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    args = VotingCriteriaParams.model_validate(params)
    return await _run_extract(
        VOTING_PRINCIPLES,
        ctx,
        "voting criteria",
        lambda content: extracts.voting_criteria(content, args.criterion),
    )
