from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from .base import SQLPagerBaseSettings


class ExecutorSettings(SQLPagerBaseSettings):
    """Connection settings for the SQLAlchemy executor."""

    model_config = SettingsConfigDict(env_prefix="SQLPAGER_EXECUTOR_")

    database_url: str = Field(
        default="sqlite://",
        description="SQLAlchemy database URL. The DBAPI driver must use the qmark ('?') paramstyle."
    )
    pool_size: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Connections kept open in the pool (pooled backends only)"
    )
    max_overflow: int = Field(
        default=10,
        ge=0,
        le=100,
        description="Connections allowed beyond pool_size"
    )
    pool_timeout: int = Field(
        default=30,
        ge=1,
        description="Seconds to wait for a pooled connection"
    )
    max_retries: int = Field(
        default=0,
        ge=0,
        le=10,
        description="Retry attempts on transient database errors. 0 disables retries."
    )
    retry_delay_seconds: float = Field(
        default=1.0,
        ge=0.0,
        le=60.0,
        description="Initial delay between retry attempts in seconds"
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Reject URLs SQLAlchemy cannot parse."""
        try:
            make_url(v)
        except ArgumentError as exc:
            raise ValueError(f"Invalid database URL: {exc}") from exc
        return v

    @property
    def backend_name(self) -> str:
        return make_url(self.database_url).get_backend_name()
