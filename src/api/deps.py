"""FastAPI dependency injection for database sessions and the series resolver."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.charts import SeriesResolver, SqlSeriesStore
from src.core.database import async_session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session; auto-rollback on error."""
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_series_resolver(session: AsyncSession = Depends(get_db)) -> SeriesResolver:
    """Build a request-scoped SeriesResolver over the SQL datastore."""
    return SeriesResolver(SqlSeriesStore(session))
