from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for sqlpager operations.

    Each category has a specific prefix so errors can be identified without
    inspecting the exception class.

    Attributes:
        CONFIG_*: Configuration-related errors
        VALIDATION_*: Input validation errors
        CONNECTION_*: Network and connection errors
        EXECUTION_*: Query execution errors
    """
    # Configuration errors
    CONFIG_ERROR = "CONFIG_001"
    CONFIG_INVALID = "CONFIG_002"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"
    MISSING_PARAMETER = "VALIDATION_002"

    # Connection errors
    CONNECTION_ERROR = "CONNECTION_001"
    TIMEOUT_ERROR = "CONNECTION_002"

    # Execution errors
    EXECUTION_ERROR = "EXECUTION_001"
    QUERY_EXECUTION_ERROR = "EXECUTION_002"


_MAX_QUERY_DETAIL_LENGTH = 500


def _truncate_query(query: str) -> str:
    if len(query) > _MAX_QUERY_DETAIL_LENGTH:
        return query[:_MAX_QUERY_DETAIL_LENGTH] + "..."
    return query


class SQLPagerError(Exception):
    """Base exception for all sqlpager errors.

    Errors are categorized by ``error_code``. Two subclasses split the
    taxonomy callers care about: ``ValidationError`` for bad input that the
    caller can fix, and ``ExecutionError`` for failures of the executor.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
        is_retryable: Whether the error is transient and can be retried
    """

    default_error_code = ErrorCode.EXECUTION_ERROR

    def __init__(
        self,
        message: str,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        is_retryable: bool = False
    ):
        """Initialize sqlpager error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum; defaults per subclass
            details: Additional error details
            cause: Optional underlying exception
            is_retryable: Whether error is transient
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        self.cause = cause
        self.is_retryable = is_retryable

        # Lazy import to avoid circular dependency
        from sqlpager.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={
                "error_code": self.error_code.value,
                "details": self.details,
                "is_retryable": is_retryable,
            },
            exc_info=cause,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
            "is_retryable": self.is_retryable
        }


class ValidationError(SQLPagerError):
    """The query spec violates the builder's input contract.

    Raised before any SQL text is produced. Never retryable.
    """

    default_error_code = ErrorCode.VALIDATION_ERROR


class ExecutionError(SQLPagerError):
    """The query executor failed to run a compiled query."""

    default_error_code = ErrorCode.EXECUTION_ERROR


# Helper functions for common error scenarios
def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> SQLPagerError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional error details

    Returns:
        SQLPagerError with CONFIG_ERROR code
    """
    details = kwargs.get('details', {})
    if config_key:
        details["config_key"] = config_key

    return SQLPagerError(
        message=message,
        error_code=ErrorCode.CONFIG_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def validation_error(
    message: str,
    field: Optional[str] = None,
    value: Any = None,
    **kwargs
) -> ValidationError:
    """Create a validation error.

    Args:
        message: Error message
        field: Field that failed validation
        value: Invalid value
        **kwargs: Additional error details

    Returns:
        ValidationError with VALIDATION_ERROR code (or the code passed in)
    """
    details = kwargs.get('details', {})
    if field:
        details["field"] = field
    if value is not None:
        details["value"] = str(value)

    return ValidationError(
        message=message,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def connection_error(
    message: str,
    service: Optional[str] = None,
    **kwargs
) -> ExecutionError:
    """Create a connection error.

    Args:
        message: Error message
        service: Service or backend that failed to connect
        **kwargs: Additional error details

    Returns:
        ExecutionError with CONNECTION_ERROR code
    """
    details = kwargs.get('details', {})
    if service:
        details["service"] = service

    return ExecutionError(
        message=message,
        error_code=ErrorCode.CONNECTION_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def execution_error(
    message: str,
    operation: Optional[str] = None,
    query: Optional[str] = None,
    **kwargs
) -> ExecutionError:
    """Create an execution error.

    Args:
        message: Error message
        operation: Operation that failed
        query: Query that failed (if applicable)
        **kwargs: Additional error details

    Returns:
        ExecutionError with EXECUTION_ERROR code
    """
    details = kwargs.get('details', {})
    if operation:
        details["operation"] = operation
    if query:
        details["query"] = _truncate_query(query)

    return ExecutionError(
        message=message,
        error_code=ErrorCode.EXECUTION_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def query_execution_error(
    query: str,
    original_error: Exception,
    **kwargs
) -> ExecutionError:
    """Create a query execution error.

    Args:
        query: SQL query that failed
        original_error: The underlying exception
        **kwargs: Additional error details

    Returns:
        ExecutionError with QUERY_EXECUTION_ERROR code
    """
    details = kwargs.get('details', {})
    details["query"] = _truncate_query(query)

    return ExecutionError(
        message=f"Query execution failed: {str(original_error)}",
        error_code=ErrorCode.QUERY_EXECUTION_ERROR,
        details=details,
        cause=original_error,
        **{k: v for k, v in kwargs.items() if k not in ['details', 'cause']}
    )
