"""SQL keyword constants.

This module contains the SQL keyword enums and tokens used when assembling
SELECT statements. These constants are in Layer 0 and have no dependencies
on other sqlpager modules.
"""

from enum import Enum


PLACEHOLDER = "?"
"""Positional (qmark) parameter marker emitted for every bound value."""

FALSE_PREDICATE = "1 = 0"
"""Constant-false predicate emitted for an empty IN list."""


class SortDirection(str, Enum):
    """Sort direction for ORDER BY entries."""

    ASC = "ASC"
    DESC = "DESC"


class JoinType(str, Enum):
    """Common JOIN keywords.

    Join types are structural SQL text, so a ``JoinSpec`` accepts any string.
    These members exist for callers that prefer not to spell keywords by hand.
    """

    INNER = "INNER JOIN"
    LEFT = "LEFT JOIN"
    RIGHT = "RIGHT JOIN"
    FULL = "FULL JOIN"
    CROSS = "CROSS JOIN"
