from sqlpager.__version__ import __version__

from sqlpager.api import Pager, compile_query, fetch_paged
from sqlpager.common.exceptions import ErrorCode, ExecutionError, SQLPagerError, ValidationError
from sqlpager.executors import AsyncQueryExecutor, QueryExecutor, SQLAlchemyExecutor
from sqlpager.operations import (
    AbsentFilter,
    JoinSpec,
    ListFilter,
    QuerySpec,
    RangeFilter,
    ScalarFilter,
    SortSpec,
)
from sqlpager.query_builder import QueryBuilder
from sqlpager.types import CompiledQuery, Page


__all__ = [
    "__version__",

    "QuerySpec",
    "JoinSpec",
    "SortSpec",
    "RangeFilter",
    "ListFilter",
    "ScalarFilter",
    "AbsentFilter",

    "QueryBuilder",
    "CompiledQuery",
    "Page",

    "QueryExecutor",
    "AsyncQueryExecutor",
    "SQLAlchemyExecutor",

    # Exceptions (public API)
    "SQLPagerError",
    "ValidationError",
    "ExecutionError",
    "ErrorCode",

    # api
    "Pager",
    "compile_query",
    "fetch_paged",
]
