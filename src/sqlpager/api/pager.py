from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from sqlpager.logging import get_logger
from sqlpager.operations.select import QuerySpec
from sqlpager.protocols.executors import AsyncQueryExecutor, QueryExecutor, Row
from sqlpager.query_builder.builder import QueryBuilder
from sqlpager.types.results import CompiledQuery, Page
from sqlpager.utils.decorators import traced

logger = get_logger(__name__)

SpecInput = Union[QuerySpec, Mapping[str, Any]]

_default_builder: Optional[QueryBuilder] = None
_default_pager: Optional["Pager"] = None


def _coerce_spec(spec: SpecInput) -> QuerySpec:
    if isinstance(spec, QuerySpec):
        return spec
    return QuerySpec.model_validate(spec)


def _failure_context(compiled: CompiledQuery, exc: Exception) -> Dict[str, Any]:
    return {
        "db.statement": compiled.sql_text,
        "query.parameter_count": len(compiled.parameters),
        "error": str(exc),
        "error_type": type(exc).__name__,
    }


def _count_from_rows(spec: QuerySpec, rows: Sequence[Row]) -> int:
    if spec.counts_rows:
        return len(rows)
    if not rows:
        return 0
    return int(next(iter(rows[0].values())))


class Pager:
    """Build paged SELECT queries and run them through an executor.

    The pager adds no retry, timeout or cancellation of its own. Executor
    failures are logged with the failing SQL and re-raised unchanged.

    Example:
        >>> pager = Pager(SQLAlchemyExecutor())
        >>> rows = pager.fetch({"table_name": "orders", "filters": {"status": "paid"}})
        >>> page = pager.fetch_page({"table_name": "orders", "page": 2, "limit": 20})
        >>> page.total, page.pages
    """

    def __init__(
        self,
        executor: Optional[Union[QueryExecutor, AsyncQueryExecutor]] = None,
        builder: Optional[QueryBuilder] = None,
    ):
        """Initialize the pager.

        Args:
            executor: Sync or async executor. Required for the fetch methods,
                not for ``compile``.
            builder: Query builder. Defaults to one configured from settings.
        """
        self.executor = executor
        self.builder = builder or QueryBuilder()

    def compile(self, spec: SpecInput) -> CompiledQuery:
        """Compile ``spec`` without executing it."""
        return self.builder.build(_coerce_spec(spec))

    def _require_executor(self) -> Any:
        if self.executor is None:
            raise RuntimeError("Pager has no executor configured")
        return self.executor

    def _run(self, compiled: CompiledQuery) -> List[Row]:
        executor = self._require_executor()
        try:
            return list(executor.execute(compiled.sql_text, compiled.parameters))
        except Exception as exc:
            logger.error("Paged query execution failed", extra=_failure_context(compiled, exc))
            raise

    async def _run_async(self, compiled: CompiledQuery) -> List[Row]:
        executor = self._require_executor()
        try:
            return list(await executor.execute(compiled.sql_text, compiled.parameters))
        except Exception as exc:
            logger.error("Paged query execution failed", extra=_failure_context(compiled, exc))
            raise

    @traced(span_name="sqlpager.pager.fetch")
    def fetch(self, spec: SpecInput) -> List[Row]:
        """Fetch one page of rows.

        Raises:
            ValidationError: If the spec has no table name
            Exception: Whatever the executor raised, unchanged
        """
        return self._run(self.compile(spec))

    @traced(span_name="sqlpager.pager.fetch_async")
    async def fetch_async(self, spec: SpecInput) -> List[Row]:
        """Awaitable ``fetch`` for an ``AsyncQueryExecutor``."""
        return await self._run_async(self.compile(spec))

    @traced(span_name="sqlpager.pager.count")
    def count(self, spec: SpecInput) -> int:
        """Count the rows matching ``spec`` across all pages.

        Uses the count-query variant: ``COUNT(*)``, or the number of returned
        rows for GROUP BY and DISTINCT projections.
        """
        spec = _coerce_spec(spec)
        rows = self._run(self.builder.build(spec.for_count()))
        return _count_from_rows(spec, rows)

    @traced(span_name="sqlpager.pager.count_async")
    async def count_async(self, spec: SpecInput) -> int:
        """Awaitable ``count`` for an ``AsyncQueryExecutor``."""
        spec = _coerce_spec(spec)
        rows = await self._run_async(self.builder.build(spec.for_count()))
        return _count_from_rows(spec, rows)

    def fetch_page(self, spec: SpecInput) -> Page:
        """Fetch one page of rows together with the total row count."""
        spec = _coerce_spec(spec)
        items = self.fetch(spec)
        total = self.count(spec)
        return Page(items=tuple(items), total=total, page=spec.page, limit=spec.limit)

    async def fetch_page_async(self, spec: SpecInput) -> Page:
        """Awaitable ``fetch_page`` for an ``AsyncQueryExecutor``."""
        spec = _coerce_spec(spec)
        items = await self.fetch_async(spec)
        total = await self.count_async(spec)
        return Page(items=tuple(items), total=total, page=spec.page, limit=spec.limit)


def _get_builder() -> QueryBuilder:
    global _default_builder
    if _default_builder is None:
        _default_builder = QueryBuilder()
    return _default_builder


def _get_pager() -> Pager:
    global _default_pager
    if _default_pager is None:
        from sqlpager.executors.sqlalchemy_executor import SQLAlchemyExecutor
        _default_pager = Pager(SQLAlchemyExecutor(), _get_builder())
    return _default_pager


def compile_query(spec: SpecInput) -> CompiledQuery:
    """Compile a spec with the default builder. Pure; no I/O."""
    return _get_builder().build(_coerce_spec(spec))


def fetch_paged(spec: SpecInput, executor: Optional[QueryExecutor] = None) -> List[Row]:
    """Fetch one page of rows.

    Args:
        spec: Query spec or its dictionary form
        executor: Executor to use. Defaults to a ``SQLAlchemyExecutor``
            configured from settings.
    """
    if executor is None:
        return _get_pager().fetch(spec)
    return Pager(executor, _get_builder()).fetch(spec)
