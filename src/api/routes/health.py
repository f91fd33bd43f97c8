"""Health-check and data-status endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.deps import get_db
from src.core.models import (
    FixedIncomeDefinition,
    FixedIncomeTrade,
    InstrumentDefinition,
    MarketDataOHLCV,
    SeriesDefinition,
    TimeSeriesData,
)

router = APIRouter(tags=["Health"])

_COUNTED_MODELS = (
    InstrumentDefinition,
    MarketDataOHLCV,
    FixedIncomeDefinition,
    FixedIncomeTrade,
    SeriesDefinition,
    TimeSeriesData,
)


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_db)) -> dict:
    """Basic liveness probe -- verifies the database connection."""
    db_status = "disconnected"
    try:
        await session.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as exc:
        db_status = f"disconnected: {exc}"

    return {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/data-status")
async def data_status(session: AsyncSession = Depends(get_db)) -> dict:
    """Return row counts for every chart definition and observation table."""
    table_counts: dict[str, int] = {}
    for model in _COUNTED_MODELS:
        result = await session.execute(select(func.count()).select_from(model))
        table_counts[model.__tablename__] = result.scalar_one()

    return {
        "table_counts": table_counts,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
