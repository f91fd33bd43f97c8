"""Pydantic-settings configuration for the chart series service.

Loads database connection parameters and API behaviour from a .env file
with sensible defaults for local development. Computed fields produce
fully-formed connection URLs for the async runtime and for Alembic.
"""

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    project_name: str = "CRM Charts"
    debug: bool = False
    log_level: str = "INFO"

    # Hosted PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "crm"
    postgres_user: str = "crm_user"
    postgres_password: str = ""

    # SQLAlchemy pool settings
    db_pool_size: int = 10
    db_max_overflow: int = 5
    db_pool_pre_ping: bool = True
    db_sslmode: str = "prefer"  # Set to "require" for the hosted database

    # API
    allowed_origins: str = ""  # Comma-separated extra CORS origins
    rate_limit: str = "100/minute"
    chart_default_lookback_days: int = 365

    @computed_field
    @property
    def async_database_url(self) -> str:
        """Async connection string for asyncpg."""
        base = (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )
        if self.db_sslmode and self.db_sslmode != "disable":
            return f"{base}?ssl={self.db_sslmode}"
        return base

    @computed_field
    @property
    def sync_database_url(self) -> str:
        """Sync connection string for psycopg2 (used by Alembic)."""
        base = (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )
        if self.db_sslmode and self.db_sslmode != "disable":
            return f"{base}?sslmode={self.db_sslmode}"
        return base


# Singleton instance
settings = Settings()
