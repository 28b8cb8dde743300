from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .base import SQLPagerBaseSettings


class BuilderSettings(SQLPagerBaseSettings):
    """Options affecting how query specs are compiled."""

    model_config = SettingsConfigDict(env_prefix="SQLPAGER_BUILDER_")

    stringify_scalar_filters: bool = Field(
        default=True,
        description=(
            "Bind scalar equality filters as their string form. Disable for drivers "
            "that need typed parameters (e.g. strict numeric comparisons). Booleans and "
            "bytes are never stringified."
        )
    )
