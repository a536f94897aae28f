"""API service configuration.

Settings are a `pydantic-settings` object. Field names match the environment
variable names (case-insensitive), so `DB_POOL_SIZE=2` sets `db_pool_size`.
Values are parsed and validated once at startup (fail fast): a missing
`DATABASE_URL` or a non-numeric `DB_POOL_SIZE` raises `ValidationError` naming
the field.

The parsed object is stored on `app.state.settings` and handed to route
handlers through dependency injection, so tests build an app with explicit
settings (`Settings(database_url="sqlite://")`) instead of patching the
environment.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .queries import MAX_VERSION_LENGTH, VERSION_PATTERN


class Settings(BaseSettings):
    """Runtime settings for the level object API."""

    model_config = SettingsConfigDict(frozen=True, extra="ignore")

    database_url: str = Field(min_length=1)
    db_pool_size: int = Field(default=5, ge=1)
    db_pool_timeout: float = Field(default=3.0, gt=0)
    db_statement_timeout_ms: int = Field(default=5000, ge=0)
    # When set, requests may omit `version` and address this table (the
    # fixed-table deployment).
    default_version: str | None = Field(
        default=None,
        pattern=VERSION_PATTERN,
        max_length=MAX_VERSION_LENGTH,
    )
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)

    @field_validator("default_version", mode="before")
    @classmethod
    def _blank_version_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value
