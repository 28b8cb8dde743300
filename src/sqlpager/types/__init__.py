"""Shared value types for sqlpager."""

from sqlpager.types.base import SQLPagerBaseModel
from sqlpager.types.results import CompiledQuery, Page

__all__ = [
    "SQLPagerBaseModel",
    "CompiledQuery",
    "Page",
]
