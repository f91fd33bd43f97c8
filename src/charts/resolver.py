"""Multi-dataset ticker resolution for the charts page.

A ticker may be defined in any of three datasets, each a definition table
paired with an observation table:

- ``price``: instrument_definitions -> market_data_ohlcv (close, by ticker)
- ``fixed_income``: fixed_income_definitions -> fixed_income_trades
  (average_yield, by instrument_id)
- ``series``: series_definitions -> time_series_data (value, by series_id)

SeriesResolver walks an ordered list of ResolutionStrategy objects and takes
the first one that yields at least one observation. Data from two datasets
is never merged. Each ticker in a batch is resolved independently: a
missing ticker or a datastore fault becomes a TickerResolutionError in that
ticker's slot and the rest of the batch carries on.

Usage::

    resolver = SeriesResolver(SqlSeriesStore(session))
    results = await resolver.resolve_batch(["USDCLP", "BCP5"], 365)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Union

from src.charts.errors import BatchInputError, TickerResolutionError
from src.charts.series import Observation, ResolvedSeries
from src.charts.store import SeriesStore
from src.core.models import (
    FixedIncomeDefinition,
    FixedIncomeTrade,
    InstrumentDefinition,
    MarketDataOHLCV,
    SeriesDefinition,
    TimeSeriesData,
)
from src.core.models.base import Base
from src.core.utils.logging_config import get_logger
from src.core.utils.parsing import coerce_observation_date, parse_observation_value

logger = get_logger(__name__)

BatchResult = dict[str, Union[ResolvedSeries, TickerResolutionError]]


@dataclass(frozen=True)
class ResolutionStrategy:
    """One dataset a ticker can be resolved against.

    When ``scope_by_ticker`` is set, observations are matched on the ticker
    string (case-insensitively); otherwise on the definition's id.
    """

    dataset: str
    definition_model: type[Base]
    observation_model: type[Base]
    scope_column: str
    date_column: str
    value_column: str
    unit: str
    source: str
    scope_by_ticker: bool = False

    async def resolve(
        self, store: SeriesStore, ticker: str, start: date
    ) -> Optional[ResolvedSeries]:
        """Return the ticker's series from this dataset, or None if it has no data."""
        definition = await store.find_definition(self.definition_model, ticker)
        if definition is None:
            return None

        scope_value = ticker if self.scope_by_ticker else definition.id
        rows = await store.fetch_observations(
            self.observation_model,
            scope_column=self.scope_column,
            scope_value=scope_value,
            date_column=self.date_column,
            value_column=self.value_column,
            start=start,
            case_insensitive=self.scope_by_ticker,
        )

        observations, skipped = self._parse_rows(ticker, rows)
        if not observations:
            if rows:
                logger.warning(
                    "dataset_rows_unparseable",
                    ticker=ticker,
                    dataset=self.dataset,
                    rows=len(rows),
                )
            return None

        return ResolvedSeries(
            ticker=ticker,
            name=ticker,
            unit=self.unit,
            source=self.source,
            dataset=self.dataset,
            observations=observations,
            skipped_points=skipped,
        )

    def _parse_rows(
        self, ticker: str, rows: list[tuple[Any, Any]]
    ) -> tuple[list[Observation], int]:
        observations: list[Observation] = []
        skipped = 0
        for raw_time, raw_value in rows:
            try:
                observations.append(
                    Observation(
                        time=coerce_observation_date(raw_time),
                        value=parse_observation_value(raw_value),
                    )
                )
            except ValueError as exc:
                skipped += 1
                logger.warning(
                    "observation_skipped",
                    ticker=ticker,
                    dataset=self.dataset,
                    raw_time=str(raw_time),
                    error=str(exc),
                )
        # stable sort keeps stored order for equal dates
        observations.sort(key=lambda o: o.time)
        return observations, skipped


# Fixed priority: price -> fixed income -> generic series
DEFAULT_STRATEGIES: tuple[ResolutionStrategy, ...] = (
    ResolutionStrategy(
        dataset="price",
        definition_model=InstrumentDefinition,
        observation_model=MarketDataOHLCV,
        scope_column="ticker",
        date_column="timestamp",
        value_column="close",
        unit="CLP",
        source="quantex",
        scope_by_ticker=True,
    ),
    ResolutionStrategy(
        dataset="fixed_income",
        definition_model=FixedIncomeDefinition,
        observation_model=FixedIncomeTrade,
        scope_column="instrument_id",
        date_column="trade_date",
        value_column="average_yield",
        unit="percentage",
        source="fixed_income_trades",
    ),
    ResolutionStrategy(
        dataset="series",
        definition_model=SeriesDefinition,
        observation_model=TimeSeriesData,
        scope_column="series_id",
        date_column="timestamp",
        value_column="value",
        unit="CLP",
        source="quantex",
    ),
)


def _validate_batch(tickers: Sequence[str], lookback_days: int) -> None:
    if isinstance(tickers, str) or not isinstance(tickers, Sequence):
        raise BatchInputError("tickers must be a list of ticker strings")
    if not tickers:
        raise BatchInputError("at least one ticker is required")
    for ticker in tickers:
        if not isinstance(ticker, str) or not ticker.strip():
            raise BatchInputError(f"invalid ticker: {ticker!r}")
    if isinstance(lookback_days, bool) or not isinstance(lookback_days, int):
        raise BatchInputError(f"days must be an integer, got {lookback_days!r}")
    if lookback_days < 0:
        raise BatchInputError(f"days must be zero or positive, got {lookback_days}")


class SeriesResolver:
    """Resolve tickers to chart series across the configured datasets.

    Stateless apart from the injected store; create one per request.
    """

    def __init__(
        self,
        store: SeriesStore,
        strategies: Sequence[ResolutionStrategy] = DEFAULT_STRATEGIES,
    ) -> None:
        self._store = store
        self._strategies = tuple(strategies)

    async def resolve_batch(
        self,
        tickers: Sequence[str],
        lookback_days: int,
        *,
        as_of: Optional[date] = None,
    ) -> BatchResult:
        """Resolve every ticker over the last *lookback_days* calendar days.

        The window starts at ``as_of - lookback_days`` (inclusive) and has no
        upper bound, so forward-dated rows are returned as well. *as_of*
        defaults to today's UTC date.

        Returns:
            One entry per distinct input ticker: a ResolvedSeries, or a
            TickerResolutionError describing why it could not be resolved.

        Raises:
            BatchInputError: If the request is malformed or the window would
                start before ``date.min``. Raised before any dataset is
                queried.
        """
        _validate_batch(tickers, lookback_days)

        today = as_of or datetime.now(timezone.utc).date()
        max_days = (today - date.min).days
        if lookback_days > max_days:
            raise BatchInputError(
                f"days must be at most {max_days}, got {lookback_days}"
            )
        start = today - timedelta(days=lookback_days)

        results: BatchResult = {}
        for ticker in tickers:
            if ticker in results:
                continue
            try:
                results[ticker] = await self._resolve_ticker(ticker, start)
            except Exception as exc:
                logger.error(
                    "ticker_resolution_failed",
                    ticker=ticker,
                    error=str(exc),
                    exc_info=True,
                )
                await self._recover()
                results[ticker] = TickerResolutionError(
                    ticker, f"no data found for {ticker}: {exc}"
                )

        resolved = sum(1 for r in results.values() if isinstance(r, ResolvedSeries))
        logger.info(
            "batch_resolved",
            tickers=len(results),
            resolved=resolved,
            failed=len(results) - resolved,
            start=start.isoformat(),
        )
        return results

    async def list_available_tickers(self) -> list[str]:
        """Return every ticker defined in any dataset.

        Tickers are deduplicated case-insensitively, keeping the spelling
        from the highest-priority dataset, and sorted case-insensitively.
        A definition table that cannot be read is logged and skipped.
        """
        catalogue: dict[str, str] = {}
        for strategy in self._strategies:
            try:
                tickers = await self._store.list_tickers(strategy.definition_model)
            except Exception as exc:
                logger.error(
                    "ticker_catalogue_table_failed",
                    dataset=strategy.dataset,
                    error=str(exc),
                    exc_info=True,
                )
                await self._recover()
                continue

            for ticker in tickers:
                if not isinstance(ticker, str) or not ticker.strip():
                    continue
                catalogue.setdefault(ticker.lower(), ticker)

        return sorted(catalogue.values(), key=lambda t: (t.lower(), t))

    async def _resolve_ticker(
        self, ticker: str, start: date
    ) -> Union[ResolvedSeries, TickerResolutionError]:
        for strategy in self._strategies:
            series = await strategy.resolve(self._store, ticker, start)
            if series is not None:
                logger.debug(
                    "ticker_resolved",
                    ticker=ticker,
                    dataset=strategy.dataset,
                    points=len(series.observations),
                )
                return series

        logger.info("ticker_not_found", ticker=ticker)
        return TickerResolutionError(ticker, f"no data found for {ticker}")

    async def _recover(self) -> None:
        try:
            await self._store.rollback()
        except Exception as exc:
            logger.error("store_rollback_failed", error=str(exc))
