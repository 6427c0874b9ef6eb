"""Application settings and configuration.

This module defines all configuration options for the Province Glow service.
Settings are loaded from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or a ``.env`` file.
    List-valued settings (``BANNED_WORDS``, ``CORS_ORIGINS``) are given as JSON
    arrays in the environment.
    """

    # Application metadata
    app_name: str = Field(default="Province Glow", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    environment: Literal["development", "production", "test"] = Field(
        default="production",
        alias="ENVIRONMENT",
    )
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str = Field(default="sqlite:///./province_glow.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    sqlite_busy_timeout_seconds: float = Field(default=30.0, alias="SQLITE_BUSY_TIMEOUT_SECONDS")

    # External IP geolocation lookup (ip-api.com compatible)
    geo_lookup_url: str = Field(default="http://ip-api.com/json", alias="GEO_LOOKUP_URL")
    geo_lookup_timeout_seconds: float = Field(default=3.0, alias="GEO_LOOKUP_TIMEOUT_SECONDS")

    # IANA zone name used for the daily light-up reset; None means server local time.
    timezone: str | None = Field(default=None, alias="TIMEZONE")

    # Message board settings
    banned_words: list[str] = Field(
        default=["fuck", "shit", "bitch", "傻逼", "操你妈"],
        alias="BANNED_WORDS",
    )
    message_max_length: int = Field(default=200, alias="MESSAGE_MAX_LENGTH")
    message_cooldown_seconds: int = Field(default=60, alias="MESSAGE_COOLDOWN_SECONDS")
    message_feed_limit: int = Field(default=50, alias="MESSAGE_FEED_LIMIT")

    # CORS configuration for the map frontend
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        """Return True when dev-only tooling (mock locations) is enabled."""
        return self.environment == "development"

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides.

        Returns:
            The active database URL (test database if in testing mode, otherwise production)
        """
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling such as Alembic."""
        url = self.effective_database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url


settings = Settings()
