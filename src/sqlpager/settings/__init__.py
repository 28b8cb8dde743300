"""Settings module providing configuration management for sqlpager.

Built on Pydantic Settings: type-safe values with validation, read from
environment variables and an optional ``.env`` file.

Architecture:
    1. Base Layer (base.py):
       - SQLPagerBaseSettings: shared model config (``SQLPAGER_`` prefix)

    2. Domain Settings:
       - builder.py: query compilation options
       - executor.py: SQLAlchemy executor connection and retry options

    3. Main Aggregator (main.py):
       - _Settings: aggregates all domain settings
       - get_settings(): singleton accessor

Environment Variable Naming:
    - Format: SQLPAGER_[GROUP_]SETTING_NAME
    - Nested: Use double underscore __ (e.g., SQLPAGER_EXECUTOR__DATABASE_URL)

Quick Start:
    >>> from sqlpager.settings import get_settings
    >>> settings = get_settings()
    >>> settings.executor.database_url
    'sqlite://'
"""

from .main import _Settings, get_settings, _reload_settings
from .base import SQLPagerBaseSettings
from .builder import BuilderSettings
from .executor import ExecutorSettings

__all__ = [
    "get_settings",
    "BuilderSettings",
    "ExecutorSettings",
]
