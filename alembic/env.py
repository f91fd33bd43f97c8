"""Alembic environment configuration for the chart tables.

The database URL comes from application settings rather than alembic.ini,
so migrations always target the same database as the API.
"""

from logging.config import fileConfig

from alembic import context

# Import all model modules so they register with Base.metadata
from src.core.models import (  # noqa: F401
    fixed_income_definitions,
    fixed_income_trades,
    instrument_definitions,
    market_data_ohlcv,
    series_definitions,
    time_series_data,
)
from src.core.config import settings
from src.core.database import sync_engine
from src.core.models.base import Base

# Alembic Config object -- provides access to .ini values
config = context.config

# Set up Python logging from the config file
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Target metadata for autogenerate support
target_metadata = Base.metadata


# ---------------------------------------------------------------------------
# Migration runners
# ---------------------------------------------------------------------------


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (emit SQL to stdout)."""
    context.configure(
        url=settings.sync_database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode (connect to database)."""
    with sync_engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
