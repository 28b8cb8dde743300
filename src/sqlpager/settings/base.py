from pydantic_settings import BaseSettings, SettingsConfigDict


class SQLPagerBaseSettings(BaseSettings):
    """Base class for every sqlpager settings group.

    Values are read from the environment (and an optional ``.env`` file)
    case-insensitively. Nested groups use ``__`` as delimiter, e.g.
    ``SQLPAGER_EXECUTOR__DATABASE_URL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SQLPAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )
