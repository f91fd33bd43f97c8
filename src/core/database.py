"""Database engine layer for the chart series service.

Provides an async engine (asyncpg) for the FastAPI runtime and a sync
engine (psycopg2) for Alembic migrations. The session factory uses
autoflush=False and expire_on_commit=False; the service only reads, so
request handlers never commit.
"""

from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import settings

# ---------------------------------------------------------------------------
# Async engine (for application runtime -- asyncpg)
# ---------------------------------------------------------------------------
async_engine = create_async_engine(
    settings.async_database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=settings.db_pool_pre_ping,
    echo=settings.debug,
)

# Async session factory
async_session_factory = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)

# ---------------------------------------------------------------------------
# Sync engine (for Alembic -- psycopg2)
# ---------------------------------------------------------------------------
sync_engine = create_engine(
    settings.sync_database_url,
    pool_size=2,
    pool_pre_ping=True,
    echo=settings.debug,
)
