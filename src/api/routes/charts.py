"""Chart data endpoints: batch series fetch and the ticker catalogue.

Both endpoints answer with a ``success`` flag. Malformed input yields a 400
with a single error message; a ticker that cannot be resolved is reported
inside the batch payload and never fails the request.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.api.deps import get_series_resolver
from src.api.schemas.chart_schemas import (
    BatchChartResponse,
    ErrorResponse,
    SeriesCatalogResponse,
    TickerEntry,
    to_series_entry,
)
from src.charts import BatchInputError, SeriesResolver
from src.core.config import settings
from src.core.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/charts", tags=["Charts"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def parse_ticker_list(raw: Optional[str]) -> list[str]:
    """Split a comma-separated ticker parameter, dropping blanks."""
    tickers = [t.strip() for t in (raw or "").split(",") if t.strip()]
    if not tickers:
        raise BatchInputError("tickers parameter is required")
    return tickers


def parse_lookback_days(raw: Optional[str], default: int) -> int:
    """Parse the ``days`` parameter; a missing or blank value means *default*."""
    if raw is None or not raw.strip():
        return default
    try:
        days = int(raw.strip())
    except ValueError:
        raise BatchInputError(f"days must be an integer, got '{raw}'")
    if days < 0:
        raise BatchInputError(f"days must be zero or positive, got {days}")
    return days


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


# ---------------------------------------------------------------------------
# GET /api/v1/charts/batch
# ---------------------------------------------------------------------------
@router.get(
    "/batch",
    response_model=BatchChartResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_batch_chart_data(
    tickers: Optional[str] = Query(
        None, description="Comma-separated tickers, e.g. USDCLP,BCP5,COPPER"
    ),
    days: Optional[str] = Query(
        None, description="Lookback window in calendar days (default 365)"
    ),
    resolver: SeriesResolver = Depends(get_series_resolver),
):
    """Return chart points and metadata for each requested ticker."""
    try:
        ticker_list = parse_ticker_list(tickers)
        lookback_days = parse_lookback_days(days, settings.chart_default_lookback_days)
        results = await resolver.resolve_batch(ticker_list, lookback_days)
    except BatchInputError as exc:
        return _error_response(400, str(exc))
    except Exception as exc:
        logger.error("batch_chart_request_failed", error=str(exc), exc_info=True)
        return _error_response(500, str(exc) or "error fetching chart data")

    return BatchChartResponse(
        series={ticker: to_series_entry(result) for ticker, result in results.items()}
    )


# ---------------------------------------------------------------------------
# GET /api/v1/charts/series
# ---------------------------------------------------------------------------
@router.get(
    "/series",
    response_model=SeriesCatalogResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_chart_series(
    resolver: SeriesResolver = Depends(get_series_resolver),
):
    """Return every ticker available for charting, sorted case-insensitively."""
    try:
        tickers = await resolver.list_available_tickers()
    except Exception as exc:
        logger.error("chart_series_request_failed", error=str(exc), exc_info=True)
        return _error_response(500, str(exc) or "error fetching chart series")

    return SeriesCatalogResponse(
        total=len(tickers),
        series=[TickerEntry(ticker=t) for t in tickers],
    )
