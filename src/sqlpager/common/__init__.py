"""Common exceptions for sqlpager.

The exception system categorizes errors by ``ErrorCode``. Two subclasses of
``SQLPagerError`` let callers tell fixable input problems
(``ValidationError``) from executor failures (``ExecutionError``).
"""

from sqlpager.common.exceptions import (
    ErrorCode,
    ExecutionError,
    SQLPagerError,
    ValidationError,
    configuration_error,
    connection_error,
    execution_error,
    query_execution_error,
    validation_error,
)

__all__ = [
    "SQLPagerError",
    "ValidationError",
    "ExecutionError",
    "ErrorCode",
    "configuration_error",
    "validation_error",
    "connection_error",
    "execution_error",
    "query_execution_error",
]
