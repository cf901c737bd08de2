"""Database tool handlers.

Handles:
- query_database: Run a read-only SELECT/WITH statement
- list_tables: List user tables
- describe_table: Column layout of one table
"""

import logging
from typing import Any

from ...models import DescribeTableParams, QueryDatabaseParams, ToolResult, json_result, text_result
from .base import HandlerContext

logger = logging.getLogger(__name__)

READ_ONLY_PREFIXES = ("SELECT", "WITH")

LIST_TABLES_SQL = """
    SELECT
      table_schema,
      table_name,
      table_type
    FROM information_schema.tables
    WHERE table_schema NOT IN ('pg_catalog', 'information_schema')
    ORDER BY table_schema, table_name
"""

DESCRIBE_TABLE_SQL = """
    SELECT
      column_name,
      data_type,
      character_maximum_length,
      is_nullable,
      column_default
    FROM information_schema.columns
    WHERE table_schema = $1 AND table_name = $2
    ORDER BY ordinal_position
"""


def is_read_only_statement(sql: str) -> bool:
    """First-line check; the transaction itself is also READ ONLY."""
    return sql.strip().upper().startswith(READ_ONLY_PREFIXES)


async def handle_query_database(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Execute a read-only SQL query.

    Args:
        params: Dict containing:
            - sql: The SELECT (or WITH) statement

    Returns:
        ToolResult with the rows as JSON
    """
    args = QueryDatabaseParams.model_validate(params)
    if not is_read_only_statement(args.sql):
        logger.info("Rejected non-SELECT statement")
        return text_result(
            "Error: Only SELECT queries are allowed. This is a read-only database connection.",
            is_error=True,
        )

    rows = await ctx.pool.query(args.sql)
    return json_result(rows)


async def handle_list_tables(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """List all tables outside the system schemas."""
    rows = await ctx.pool.query(LIST_TABLES_SQL)
    return json_result(rows)


async def handle_describe_table(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Describe a table's columns.

    Args:
        params: Dict containing:
            - table_name: Table to describe
            - schema_name: Schema (default 'public')
    """
    args = DescribeTableParams.model_validate(params)
    rows = await ctx.pool.query(DESCRIBE_TABLE_SQL, args.schema_name, args.table_name)
    return json_result(rows)
