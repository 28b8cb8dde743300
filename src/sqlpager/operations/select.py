"""Paged SELECT query description.

A ``QuerySpec`` describes WHAT to select; ``QueryBuilder`` turns it into SQL
text and bound parameters. Identifiers and raw predicate fragments are
structural SQL text supplied by a trusted caller and are not validated here.
"""

import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import Field, field_serializer, field_validator

from sqlpager.constants.query import (
    COUNT_EXPRESSION,
    DEFAULT_COLUMNS,
    DEFAULT_JOIN_TYPE,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
)
from sqlpager.constants.sql import SortDirection
from sqlpager.operations.filters import FilterValue, to_filter_value
from sqlpager.types.base import SQLPagerBaseModel


_DISTINCT = re.compile(r"^\s*DISTINCT\b", re.IGNORECASE)


class JoinSpec(SQLPagerBaseModel):
    """One JOIN clause. Accepts ``type``/``on`` as input aliases."""

    join_type: str = Field(default=DEFAULT_JOIN_TYPE, alias="type")
    table: str = Field(..., min_length=1)
    on_condition: str = Field(..., min_length=1, alias="on")

    @field_validator("join_type", mode="before")
    @classmethod
    def default_join_type(cls, v: Any) -> Any:
        return v or DEFAULT_JOIN_TYPE


class SortSpec(SQLPagerBaseModel):
    """One ORDER BY entry. Accepts ``order`` as an input alias for ``direction``."""

    column: str = Field(..., min_length=1)
    direction: SortDirection = Field(default=SortDirection.ASC, alias="order")

    @field_validator("direction", mode="before")
    @classmethod
    def normalize_direction(cls, v: Any) -> Any:
        if v is None:
            return SortDirection.ASC
        if isinstance(v, str):
            return v.strip().upper()
        return v


class QuerySpec(SQLPagerBaseModel):
    """Declarative description of a paged SELECT.

    Attributes:
        table_name: Table to select from. Left empty when absent; the builder
            rejects it.
        default_where_conditions: Raw predicate ANDed with every filter.
        joins: JOIN clauses, emitted in order.
        filters: Column -> filter value, read-only; iteration order is
            predicate order.
        sort: ORDER BY entries.
        group_by: GROUP BY columns.
        columns: Selected column expressions, ``*`` by default.
        page: 1-based page number.
        limit: Rows per page.
        count_mode: Omit LIMIT/OFFSET (total-row-count queries).
    """

    table_name: str = Field(default="")
    default_where_conditions: Optional[str] = Field(default=None)
    joins: Tuple[JoinSpec, ...] = Field(default_factory=tuple)
    filters: Mapping[str, FilterValue] = Field(default_factory=dict, validate_default=True)
    sort: Tuple[SortSpec, ...] = Field(default_factory=tuple)
    group_by: Tuple[str, ...] = Field(default_factory=tuple)
    columns: Tuple[str, ...] = Field(default=DEFAULT_COLUMNS)
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    count_mode: bool = Field(default=False, alias="count_query")

    @field_validator("table_name", mode="before")
    @classmethod
    def absent_table_name(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("filters", mode="before")
    @classmethod
    def resolve_filters(cls, v: Any) -> Any:
        if v is None:
            return {}
        if not isinstance(v, Mapping):
            return v
        return {column: to_filter_value(value) for column, value in v.items()}

    @field_validator("filters")
    @classmethod
    def freeze_filters(cls, v: Mapping[str, FilterValue]) -> Mapping[str, FilterValue]:
        return MappingProxyType(dict(v))

    @field_serializer("filters")
    def serialize_filters(self, filters: Mapping[str, FilterValue]) -> Dict[str, Any]:
        return {column: value.model_dump() for column, value in filters.items()}

    @field_validator("columns", mode="before")
    @classmethod
    def default_columns(cls, v: Any) -> Any:
        if not v:
            return DEFAULT_COLUMNS
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("joins", "sort", "group_by", mode="before")
    @classmethod
    def empty_sequences(cls, v: Any) -> Any:
        return () if v is None else v

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def counts_rows(self) -> bool:
        """Whether totals come from counting result rows rather than ``COUNT(*)``.

        True for GROUP BY and DISTINCT projections, where each returned row is
        one item of the paged result.
        """
        return bool(self.group_by) or any(_DISTINCT.match(column) for column in self.columns)

    def for_count(self) -> "QuerySpec":
        """Return the count-query variant of this spec.

        Pagination and sorting are dropped. The projection becomes
        ``COUNT(*) AS total`` unless ``counts_rows`` is set, in which case it is
        kept so each group or distinct row yields one row.
        """
        update: Dict[str, Any] = {"count_mode": True, "sort": ()}
        if not self.counts_rows:
            update["columns"] = (COUNT_EXPRESSION,)
        return self.model_copy(update=update)
