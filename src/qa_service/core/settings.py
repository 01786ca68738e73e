"""Application settings and configuration.

This module defines all configuration options for the Q&A service and its
ingestion tooling. Settings are loaded from environment variables (or an
``.env`` file) with sensible defaults where one exists.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The database can be configured with a single ``DATABASE_URL`` or with the
    discrete ``POSTGRES_*`` variables. When no URL is given, host, user,
    password and database name are all required.
    """

    # Application metadata
    app_name: str = Field(default="Q&A Service", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    postgres_host: str | None = Field(default=None, alias="POSTGRES_HOST")
    postgres_user: str | None = Field(default=None, alias="POSTGRES_USER")
    postgres_password: str | None = Field(default=None, alias="POSTGRES_PASSWORD")
    postgres_port: int = Field(default=5432, alias="POSTGRES_PORT")
    postgres_db: str | None = Field(default=None, alias="POSTGRES_DB")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Bulk ingestion input
    db_data_file: str | None = Field(default=None, alias="DB_DATA_FILE")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_methods: list[str] = Field(default=["GET", "POST"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _require_database_location(self) -> "Settings":
        if self.database_url:
            return self
        missing = [
            alias
            for alias, value in (
                ("POSTGRES_HOST", self.postgres_host),
                ("POSTGRES_USER", self.postgres_user),
                ("POSTGRES_PASSWORD", self.postgres_password),
                ("POSTGRES_DB", self.postgres_db),
            )
            if not value
        ]
        if missing:
            raise ValueError(
                "Environment variable(s) not set: "
                + ", ".join(missing)
                + " (or set DATABASE_URL)"
            )
        return self

    @property
    def effective_database_url(self) -> str:
        """Return the SQLAlchemy URL for the configured database.

        Returns:
            ``DATABASE_URL`` verbatim when set, otherwise a psycopg URL assembled
            from the ``POSTGRES_*`` variables.
        """
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+psycopg",
            username=self.postgres_user,
            password=self.postgres_password,
            host=self.postgres_host,
            port=self.postgres_port,
            database=self.postgres_db,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()  # type: ignore[call-arg]
