"""Constants module for sqlpager.

This module contains all constant values and enumerations used throughout
the package. As Layer 0 in the architecture, it has no dependencies on
other sqlpager modules.

Organization:
    - sql: SQL keyword enums and placeholder tokens
    - query: Query spec defaults
"""

from sqlpager.constants.sql import (
    FALSE_PREDICATE,
    PLACEHOLDER,
    JoinType,
    SortDirection,
)
from sqlpager.constants.query import (
    COUNT_COLUMN_ALIAS,
    COUNT_EXPRESSION,
    DEFAULT_COLUMNS,
    DEFAULT_JOIN_TYPE,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
)

__all__ = [
    "PLACEHOLDER",
    "FALSE_PREDICATE",
    "JoinType",
    "SortDirection",
    "COUNT_COLUMN_ALIAS",
    "COUNT_EXPRESSION",
    "DEFAULT_COLUMNS",
    "DEFAULT_JOIN_TYPE",
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
]
