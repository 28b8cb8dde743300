"""Pure clause builders for paged SELECT statements.

Every function returns a ``(sql_fragment, parameters)`` pair. The fragment is
empty when the clause does not apply, and ``parameters`` holds exactly one
value per placeholder in the fragment, in placeholder order. The builder
composes the fragments in ANSI clause order:

    SELECT .. FROM .. [JOIN ..]* [WHERE ..] [GROUP BY ..] [ORDER BY ..] [LIMIT ? OFFSET ?]

Filter values always travel as parameters. Table names, join targets and
conditions, columns and the default WHERE fragment are structural text and
are inserted as given.
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from sqlpager.constants.sql import FALSE_PREDICATE, PLACEHOLDER, SortDirection
from sqlpager.operations.filters import (
    AbsentFilter,
    FilterValue,
    ListFilter,
    RangeFilter,
    ScalarFilter,
)
from sqlpager.operations.select import JoinSpec, SortSpec

ClauseFragment = Tuple[str, List[Any]]

# Bound as-is even when scalars are stringified
_UNSTRINGIFIED_TYPES = (bool, bytes, bytearray)


def _placeholders(count: int) -> str:
    return ", ".join([PLACEHOLDER] * count)


def build_select_clause(columns: Sequence[str], table_name: str) -> ClauseFragment:
    """``SELECT <columns> FROM <table>``."""
    return f"SELECT {', '.join(columns)} FROM {table_name}", []


def build_join_clauses(joins: Iterable[JoinSpec]) -> ClauseFragment:
    """One ``<type> <table> ON <condition>`` per join, in input order."""
    parts = [f"{join.join_type} {join.table} ON {join.on_condition}" for join in joins]
    return " ".join(parts), []


def build_filter_predicate(
    column: str,
    value: FilterValue,
    stringify_scalars: bool = True,
) -> Optional[ClauseFragment]:
    """Translate one filter entry into a predicate.

    Args:
        column: Column (or expression) the filter applies to.
        value: Resolved filter variant.
        stringify_scalars: Bind scalar values as ``str(value)``. Booleans and
            binary values are always bound unchanged.

    Returns:
        ``(predicate, parameters)``, or None for an absent value.
    """
    if isinstance(value, RangeFilter):
        return f"{column} BETWEEN {PLACEHOLDER} AND {PLACEHOLDER}", [value.start, value.end]

    if isinstance(value, ListFilter):
        if not value.values:
            # IN () is not valid SQL; an empty set matches nothing
            return FALSE_PREDICATE, []
        return f"{column} IN ({_placeholders(len(value.values))})", list(value.values)

    if isinstance(value, ScalarFilter):
        bound = value.value
        if stringify_scalars and not isinstance(bound, _UNSTRINGIFIED_TYPES):
            bound = str(bound)
        return f"{column} = {PLACEHOLDER}", [bound]

    if isinstance(value, AbsentFilter):
        return None

    raise TypeError(f"Unsupported filter value for {column}: {type(value).__name__}")


def build_where_clause(
    default_where_conditions: Optional[str],
    filters: Mapping[str, FilterValue],
    stringify_scalars: bool = True,
) -> ClauseFragment:
    """``WHERE`` joining the default fragment and filter predicates with AND.

    Empty entries are dropped before joining, so the clause never carries a
    dangling ``AND`` and is omitted entirely when nothing applies.
    """
    predicates: List[str] = [default_where_conditions or ""]
    parameters: List[Any] = []

    for column, value in filters.items():
        fragment = build_filter_predicate(column, value, stringify_scalars)
        if fragment is None:
            continue
        predicate, values = fragment
        predicates.append(predicate)
        parameters.extend(values)

    predicates = [predicate for predicate in predicates if predicate.strip()]
    if not predicates:
        return "", []
    return f"WHERE {' AND '.join(predicates)}", parameters


def build_group_by_clause(group_by: Sequence[str]) -> ClauseFragment:
    """``GROUP BY <columns>``."""
    if not group_by:
        return "", []
    return f"GROUP BY {', '.join(group_by)}", []


def build_order_by_clause(sort: Sequence[SortSpec]) -> ClauseFragment:
    """``ORDER BY <column> <ASC|DESC>, ...``."""
    if not sort:
        return "", []
    entries = [f"{entry.column} {SortDirection(entry.direction).value}" for entry in sort]
    return f"ORDER BY {', '.join(entries)}", []


def build_pagination_clause(limit: int, offset: int, count_mode: bool = False) -> ClauseFragment:
    """``LIMIT ? OFFSET ?`` bound to ``limit`` then ``offset``; omitted in count mode."""
    if count_mode:
        return "", []
    return f"LIMIT {PLACEHOLDER} OFFSET {PLACEHOLDER}", [limit, offset]
