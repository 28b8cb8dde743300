"""Protocol definitions for sqlpager.

Protocols provide type-safe interfaces without requiring inheritance,
following Python's structural subtyping.
"""

from .executors import AsyncQueryExecutor, QueryExecutor, Row

__all__ = [
    "QueryExecutor",
    "AsyncQueryExecutor",
    "Row",
]
