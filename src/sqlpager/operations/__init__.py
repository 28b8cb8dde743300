"""Query description models.

Operations are pure data structures that describe WHAT to query, not HOW.
They are turned into SQL by ``sqlpager.query_builder`` and executed by an
executor from ``sqlpager.executors``.
"""

from sqlpager.operations.filters import (
    AbsentFilter,
    FilterValue,
    ListFilter,
    RangeFilter,
    ScalarFilter,
    to_filter_value,
)
from sqlpager.operations.select import JoinSpec, QuerySpec, SortSpec

__all__ = [
    "QuerySpec",
    "JoinSpec",
    "SortSpec",
    "FilterValue",
    "RangeFilter",
    "ListFilter",
    "ScalarFilter",
    "AbsentFilter",
    "to_filter_value",
]
