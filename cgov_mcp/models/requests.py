"""Tool parameter models.

Arguments arrive as an untyped JSON object; each handler validates its
own parameters through one of these models.
"""

from pydantic import AliasChoices, BaseModel, Field


class QueryDatabaseParams(BaseModel):
    """Parameters for query_database tool."""

    sql: str = Field(..., description="The SQL SELECT query to execute")


class DescribeTableParams(BaseModel):
    """Parameters for describe_table tool."""

    table_name: str = Field(..., description="The name of the table to describe")
    schema_name: str = Field(default="public", description="The schema name")


class SearchDocumentParams(BaseModel):
    """Parameters for the search_* document tools.

    The optional filter is called `section` for the constitution and voting
    principles and `pillar` for the vision document; both names are accepted.
    """

    query: str = Field(..., description="Search query")
    section: str | None = Field(
        default=None,
        validation_alias=AliasChoices("section", "pillar"),
        description="Only search sections mentioning this text",
    )
    include_full_sections: bool = Field(
        default=False, description="Return full sections instead of snippets"
    )


class GetSectionParams(BaseModel):
    """Parameters for the get_*_section tools."""

    section_name: str = Field(..., description="Section name, number or code")


class VisionKpiParams(BaseModel):
    """Parameters for get_vision_kpis tool."""

    category: str | None = Field(default=None, description="KPI category filter")


class KpiBudgetParams(BaseModel):
    """Parameters for get_voting_kpi_budgets tool."""

    kpi_number: int | float | None = Field(default=None, description="KPI number (1-9)")


class FundingPartitionParams(BaseModel):
    """Parameters for get_funding_partitions tool."""

    partition: str | None = Field(default=None, description="Partition range filter")


class VotingCriteriaParams(BaseModel):
    """Parameters for get_voting_criteria tool."""

    criterion: str | None = Field(default=None, description="Criterion filter")
