"""Executor protocol definitions.

An executor runs compiled SQL against a database. The pager depends only on
these protocols, so any object with a matching ``execute`` method works:
the bundled SQLAlchemy executor, a driver wrapper, or a test double.
"""

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

Row = Mapping[str, Any]


@runtime_checkable
class QueryExecutor(Protocol):
    """Blocking executor for parameterized queries."""

    def execute(self, sql_text: str, parameters: Sequence[Any]) -> Sequence[Row]:
        """Run ``sql_text`` with ``parameters`` bound to its ``?`` placeholders.

        Args:
            sql_text: SQL with positional ``?`` placeholders
            parameters: Values in placeholder order

        Returns:
            Result rows as mappings of column name to value

        Raises:
            Exception: Any driver-level failure. Implementations are
                encouraged to raise ``ExecutionError``.
        """
        ...


@runtime_checkable
class AsyncQueryExecutor(Protocol):
    """Awaitable executor for parameterized queries."""

    async def execute(self, sql_text: str, parameters: Sequence[Any]) -> Sequence[Row]:
        """Awaitable counterpart of ``QueryExecutor.execute``."""
        ...
