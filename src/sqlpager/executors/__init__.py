"""Query executors.

Executors run ``CompiledQuery`` values against a database. The pager only
depends on the ``QueryExecutor`` protocol; ``SQLAlchemyExecutor`` is the
bundled implementation.
"""

from sqlpager.executors.sqlalchemy_executor import SQLAlchemyExecutor
from sqlpager.protocols.executors import AsyncQueryExecutor, QueryExecutor

__all__ = [
    "QueryExecutor",
    "AsyncQueryExecutor",
    "SQLAlchemyExecutor",
]
