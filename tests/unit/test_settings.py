"""Tests for environment-driven settings."""

import pydantic
import pytest

from sqlpager.settings import BuilderSettings, ExecutorSettings, _reload_settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "SQLPAGER_LOG_LEVEL",
        "SQLPAGER_ENVIRONMENT",
        "SQLPAGER_BUILDER_STRINGIFY_SCALAR_FILTERS",
        "SQLPAGER_EXECUTOR_DATABASE_URL",
        "SQLPAGER_EXECUTOR_MAX_RETRIES",
        "SQLPAGER_EXECUTOR__POOL_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    monkeypatch.undo()
    _reload_settings()


class TestDefaults:

    def test_defaults(self):
        settings = _reload_settings()
        assert settings.environment == "dev"
        assert settings.log_level == "INFO"
        assert settings.builder.stringify_scalar_filters is True
        assert settings.executor.database_url == "sqlite://"
        assert settings.executor.pool_size == 5
        assert settings.executor.max_overflow == 10
        assert settings.executor.pool_timeout == 30
        assert settings.executor.max_retries == 0
        assert settings.executor.retry_delay_seconds == 1.0

    def test_backend_name(self):
        assert ExecutorSettings(database_url="sqlite://").backend_name == "sqlite"
        assert ExecutorSettings(database_url="mssql+pyodbc://u:p@host/db").backend_name == "mssql"


class TestEnvironment:

    def test_group_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("SQLPAGER_BUILDER_STRINGIFY_SCALAR_FILTERS", "false")
        monkeypatch.setenv("SQLPAGER_EXECUTOR_MAX_RETRIES", "3")

        settings = _reload_settings()

        assert settings.builder.stringify_scalar_filters is False
        assert settings.executor.max_retries == 3

    def test_nested_delimiter(self, monkeypatch):
        monkeypatch.setenv("SQLPAGER_EXECUTOR__POOL_SIZE", "12")
        assert _reload_settings().executor.pool_size == 12

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("SQLPAGER_LOG_LEVEL", "debug")
        assert _reload_settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("SQLPAGER_LOG_LEVEL", "chatty")
        with pytest.raises(pydantic.ValidationError):
            _reload_settings()


class TestValidation:

    def test_invalid_database_url(self):
        with pytest.raises(pydantic.ValidationError, match="Invalid database URL"):
            ExecutorSettings(database_url="not a url")

    @pytest.mark.parametrize("field, value", [("pool_size", 0), ("max_retries", -1), ("retry_delay_seconds", -0.5)])
    def test_bounds(self, field, value):
        with pytest.raises(pydantic.ValidationError):
            ExecutorSettings(**{field: value})

    def test_builder_settings_direct(self):
        assert BuilderSettings(stringify_scalar_filters=False).stringify_scalar_filters is False


class TestSingleton:

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload_picks_up_changes(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("SQLPAGER_ENVIRONMENT", "prod")

        assert get_settings() is first
        reloaded = get_settings(force_reload=True)
        assert reloaded is not first
        assert reloaded.environment == "prod"
