"""Paged SELECT query builder."""

from typing import Any, List, Optional, TYPE_CHECKING

from sqlpager.common.exceptions import validation_error
from sqlpager.logging import get_logger
from sqlpager.operations.select import QuerySpec
from sqlpager.query_builder.clauses import (
    ClauseFragment,
    build_group_by_clause,
    build_join_clauses,
    build_order_by_clause,
    build_pagination_clause,
    build_select_clause,
    build_where_clause,
)
from sqlpager.types.results import CompiledQuery

if TYPE_CHECKING:
    from sqlpager.settings import BuilderSettings

logger = get_logger(__name__)


class QueryBuilder:
    """Compile a ``QuerySpec`` into SQL text and bound parameters.

    The builder generates SQL only; execution belongs to an executor. It keeps
    no state between calls, so one instance can serve concurrent callers.

    Example:
        >>> spec = QuerySpec(
        ...     table_name="orders",
        ...     filters={"status": "paid", "amount": {"start": 10, "end": 100}},
        ...     sort=[{"column": "created_at", "direction": "desc"}],
        ...     page=2,
        ...     limit=5,
        ... )
        >>> compiled = QueryBuilder().build(spec)
        >>> compiled.sql_text
        'SELECT * FROM orders WHERE status = ? AND amount BETWEEN ? AND ? ORDER BY created_at DESC LIMIT ? OFFSET ?'
        >>> compiled.parameters
        ('paid', 10, 100, 5, 5)
    """

    def __init__(self, settings: Optional['BuilderSettings'] = None):
        """Initialize the builder.

        Args:
            settings: Builder options. Defaults to ``get_settings().builder``.
        """
        if settings is None:
            from sqlpager.settings import get_settings
            settings = get_settings().builder

        self.settings = settings
        self.stringify_scalars = settings.stringify_scalar_filters

    def build(self, spec: QuerySpec) -> CompiledQuery:
        """Build the SELECT statement described by ``spec``.

        Args:
            spec: Query description

        Returns:
            SQL text with ``?`` placeholders and the matching parameters

        Raises:
            ValidationError: If ``spec.table_name`` is empty
        """
        if not spec.table_name or not spec.table_name.strip():
            raise validation_error("Table name is required", field="table_name")

        fragments: List[ClauseFragment] = [
            build_select_clause(spec.columns, spec.table_name),
            build_join_clauses(spec.joins),
            build_where_clause(spec.default_where_conditions, spec.filters, self.stringify_scalars),
            build_group_by_clause(spec.group_by),
            build_order_by_clause(spec.sort),
            build_pagination_clause(spec.limit, spec.offset, spec.count_mode),
        ]

        clauses: List[str] = []
        parameters: List[Any] = []
        for sql, values in fragments:
            if sql:
                clauses.append(sql)
                parameters.extend(values)

        compiled = CompiledQuery(sql_text=" ".join(clauses), parameters=tuple(parameters))
        logger.debug(
            "Query compiled",
            extra={
                "db.sql.table": spec.table_name,
                "query.parameter_count": len(compiled.parameters),
                "query.count_mode": spec.count_mode,
            },
        )
        return compiled
