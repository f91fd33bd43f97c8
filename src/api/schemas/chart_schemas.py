"""Pydantic v2 response schemas for the charts API.

The batch endpoint returns one entry per requested ticker: either a series
payload (points + metadata) or an ``{"error": ...}`` object. The catalogue
endpoint returns the deduplicated ticker list.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from pydantic import BaseModel

from src.charts import ResolvedSeries, TickerResolutionError


class ChartPoint(BaseModel):
    time: date
    value: float


class SeriesMetadataOut(BaseModel):
    ticker: str
    name: str
    unit: str
    source: str
    dataset: str
    last_update: Optional[str] = None
    points: int
    skipped_points: int = 0


class SeriesPayload(BaseModel):
    data: list[ChartPoint]
    metadata: SeriesMetadataOut


class SeriesErrorPayload(BaseModel):
    error: str


class BatchChartResponse(BaseModel):
    success: bool = True
    series: dict[str, Union[SeriesPayload, SeriesErrorPayload]]


class TickerEntry(BaseModel):
    ticker: str


class SeriesCatalogResponse(BaseModel):
    success: bool = True
    total: int
    series: list[TickerEntry]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


def to_series_entry(
    result: Union[ResolvedSeries, TickerResolutionError],
) -> Union[SeriesPayload, SeriesErrorPayload]:
    """Map a resolver result onto its wire shape."""
    if isinstance(result, TickerResolutionError):
        return SeriesErrorPayload(error=result.message)

    return SeriesPayload(
        data=[ChartPoint(time=o.time, value=o.value) for o in result.observations],
        metadata=SeriesMetadataOut(
            ticker=result.ticker,
            name=result.name,
            unit=result.unit,
            source=result.source,
            dataset=result.dataset,
            last_update=result.last_update,
            points=len(result.observations),
            skipped_points=result.skipped_points,
        ),
    )
