"""Result value objects produced by the builder and the pager."""

import math
from typing import Any, Mapping, Tuple

from pydantic import Field

from sqlpager.constants.sql import PLACEHOLDER
from sqlpager.types.base import SQLPagerBaseModel


class CompiledQuery(SQLPagerBaseModel):
    """SQL text plus the values bound to its placeholders, in order."""

    sql_text: str
    parameters: Tuple[Any, ...] = Field(default_factory=tuple)

    @property
    def placeholder_count(self) -> int:
        """Number of ``?`` markers in ``sql_text``.

        Structural fragments supplied by the caller (for instance a default
        WHERE condition containing a literal ``'?'``) are counted too.
        """
        return self.sql_text.count(PLACEHOLDER)

    def __str__(self) -> str:
        return self.sql_text


class Page(SQLPagerBaseModel):
    """One page of rows with the totals needed for pagination metadata."""

    items: Tuple[Mapping[str, Any], ...] = Field(default_factory=tuple)
    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1
