"""Default values applied when a query spec is constructed."""

from typing import Tuple

from sqlpager.constants.sql import JoinType


DEFAULT_COLUMNS: Tuple[str, ...] = ("*",)
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_JOIN_TYPE = JoinType.LEFT.value

# Column expression used by count queries that have no GROUP BY
COUNT_COLUMN_ALIAS = "total"
COUNT_EXPRESSION = f"COUNT(*) AS {COUNT_COLUMN_ALIAS}"
