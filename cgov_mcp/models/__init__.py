"""Pydantic models for tool parameters and results."""

from .enums import ToolName, TransportMode
from .requests import (
    DescribeTableParams,
    FundingPartitionParams,
    GetSectionParams,
    KpiBudgetParams,
    QueryDatabaseParams,
    SearchDocumentParams,
    VisionKpiParams,
    VotingCriteriaParams,
)
from .responses import HealthResponse, TextContent, ToolResult, json_result, text_result

__all__ = [
    # Enums
    "ToolName",
    "TransportMode",
    # Request models
    "QueryDatabaseParams",
    "DescribeTableParams",
    "SearchDocumentParams",
    "GetSectionParams",
    "VisionKpiParams",
    "KpiBudgetParams",
    "FundingPartitionParams",
    "VotingCriteriaParams",
    # Response models
    "TextContent",
    "ToolResult",
    "HealthResponse",
    "text_result",
    "json_result",
]
