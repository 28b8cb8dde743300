"""Tests for the sqlpager error taxonomy."""

import logging

import pytest

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


class TestSQLPagerError:

    def test_default_codes_per_subclass(self):
        assert ValidationError("bad").error_code == ErrorCode.VALIDATION_ERROR
        assert ExecutionError("failed").error_code == ErrorCode.EXECUTION_ERROR
        assert SQLPagerError("generic").error_code == ErrorCode.EXECUTION_ERROR

    def test_subclasses_share_base(self):
        assert issubclass(ValidationError, SQLPagerError)
        assert issubclass(ExecutionError, SQLPagerError)
        assert not issubclass(ValidationError, ExecutionError)

    def test_str_includes_code_and_cause(self):
        error = ExecutionError("Query failed", cause=KeyError("x"))
        assert str(error) == "[EXECUTION_001] Query failed (caused by: KeyError: 'x')"

    def test_str_without_cause(self):
        assert str(ValidationError("Table name is required")) == "[VALIDATION_001] Table name is required"

    def test_to_dict(self):
        error = ValidationError("bad", details={"field": "page"})
        assert error.to_dict() == {
            "type": "ValidationError",
            "message": "bad",
            "error_code": "VALIDATION_001",
            "error_name": "VALIDATION_ERROR",
            "details": {"field": "page"},
            "is_retryable": False,
        }

    def test_construction_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="sqlpager.common.exceptions"):
            ExecutionError("Query failed", details={"query": "SELECT 1"})

        assert "Query failed" in caplog.text
        record = caplog.records[-1]
        assert record.error_code == "EXECUTION_001"
        assert record.details == {"query": "SELECT 1"}


class TestHelpers:

    def test_validation_error(self):
        error = validation_error("Table name is required", field="table_name", value=0)
        assert isinstance(error, ValidationError)
        assert error.details == {"field": "table_name", "value": "0"}

    def test_configuration_error(self):
        error = configuration_error("Bad url", config_key="executor.database_url")
        assert error.error_code == ErrorCode.CONFIG_ERROR
        assert error.details["config_key"] == "executor.database_url"

    def test_connection_error(self):
        cause = OSError("refused")
        error = connection_error("Failed to create engine", service="postgresql", cause=cause)
        assert isinstance(error, ExecutionError)
        assert error.error_code == ErrorCode.CONNECTION_ERROR
        assert error.details["service"] == "postgresql"
        assert error.cause is cause

    def test_execution_error(self):
        error = execution_error("Fetch failed", operation="fetch", query="SELECT 1")
        assert error.details == {"operation": "fetch", "query": "SELECT 1"}

    def test_query_execution_error(self):
        cause = RuntimeError("no such table: t")
        error = query_execution_error("SELECT * FROM t", cause)

        assert isinstance(error, ExecutionError)
        assert error.error_code == ErrorCode.QUERY_EXECUTION_ERROR
        assert error.message == "Query execution failed: no such table: t"
        assert error.cause is cause
        assert error.details["query"] == "SELECT * FROM t"

    def test_long_query_is_truncated(self):
        error = query_execution_error("SELECT " + "x, " * 400 + "y FROM t", ValueError("boom"))
        assert len(error.details["query"]) == 503
        assert error.details["query"].endswith("...")

    def test_raise_and_catch_by_base(self):
        with pytest.raises(SQLPagerError):
            raise validation_error("bad")
