from typing import Optional

from pydantic import Field, field_validator

from .base import SQLPagerBaseSettings
from .builder import BuilderSettings
from .executor import ExecutorSettings


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class _Settings(SQLPagerBaseSettings):

    environment: str = Field(
        default="dev",
        description="Deployment environment attached to every log record (dev, qa, prod, ...)"
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level used by setup_logging"
    )
    builder: BuilderSettings = Field(
        default_factory=BuilderSettings,
        description="Query compilation options"
    )
    executor: ExecutorSettings = Field(
        default_factory=ExecutorSettings,
        description="SQLAlchemy executor configuration"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}. Use one of {sorted(_LOG_LEVELS)}")
        return level


# Singleton instance
_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.

    The settings are loaded from environment variables on first access and
    reused afterwards so every component sees the same configuration.

    Args:
        force_reload: If True, creates a new Settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        Settings: The singleton Settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()

        # Pick up environment changes
        fresh = get_settings(force_reload=True)
        ```

    Note:
        Safe for concurrent reads. The first load is expected to happen at
        startup, before worker threads are spawned.
    """
    global _settings

    if _settings is None or force_reload:
        _settings = _Settings()

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh _Settings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
