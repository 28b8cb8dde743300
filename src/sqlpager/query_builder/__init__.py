"""Query builder module for paged SELECT generation.

Query builders translate a ``QuerySpec`` into SQL text plus bound parameters.
They do NOT execute queries - that is handled by executors.

Design Principles:
    1. **SQL Generation Only**: Builders only produce ``CompiledQuery`` values
    2. **Parameters, Never Interpolation**: Filter values and pagination are
       always bound through ``?`` placeholders
    3. **Stateless**: Builders don't maintain state between calls
    4. **Composable Clauses**: Each clause is a pure function in ``clauses``

Example:
    >>> from sqlpager.query_builder import QueryBuilder
    >>> from sqlpager.operations import QuerySpec
    >>> compiled = QueryBuilder().build(QuerySpec(table_name="users", filters={"id": [1, 2]}))
    >>> compiled.sql_text
    'SELECT * FROM users WHERE id IN (?, ?) LIMIT ? OFFSET ?'
"""

from sqlpager.query_builder.builder import QueryBuilder
from sqlpager.query_builder.clauses import (
    ClauseFragment,
    build_filter_predicate,
    build_group_by_clause,
    build_join_clauses,
    build_order_by_clause,
    build_pagination_clause,
    build_select_clause,
    build_where_clause,
)

__all__ = [
    "QueryBuilder",
    "ClauseFragment",
    "build_select_clause",
    "build_join_clauses",
    "build_filter_predicate",
    "build_where_clause",
    "build_group_by_clause",
    "build_order_by_clause",
    "build_pagination_clause",
]
