"""Enumeration types for the cgov MCP server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available tools."""

    # Database
    QUERY_DATABASE = "query_database"
    LIST_TABLES = "list_tables"
    DESCRIBE_TABLE = "describe_table"
    # Constitution
    SEARCH_CONSTITUTION = "search_constitution"
    GET_CONSTITUTION_SECTION = "get_constitution_section"
    # Vision 2030
    SEARCH_VISION_2030 = "search_vision_2030"
    GET_VISION_SECTION = "get_vision_section"
    GET_VISION_KPIS = "get_vision_kpis"
    # Voting principles
    SEARCH_VOTING_PRINCIPLES = "search_voting_principles"
    GET_VOTING_PRINCIPLES_SECTION = "get_voting_principles_section"
    GET_VOTING_KPI_BUDGETS = "get_voting_kpi_budgets"
    GET_FUNDING_PARTITIONS = "get_funding_partitions"
    GET_VOTING_CRITERIA = "get_voting_criteria"


class TransportMode(StrEnum):
    """How the server is exposed."""

    HTTP = "http"
    STDIO = "stdio"
