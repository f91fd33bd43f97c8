"""SQLAlchemy 2.0 ORM models for the chart series service.

Re-exports Base and the six chart tables:
  - 3 definition tables: InstrumentDefinition, FixedIncomeDefinition,
    SeriesDefinition
  - 3 observation tables: MarketDataOHLCV, FixedIncomeTrade, TimeSeriesData
"""

from .base import Base
from .fixed_income_definitions import FixedIncomeDefinition
from .fixed_income_trades import FixedIncomeTrade
from .instrument_definitions import InstrumentDefinition
from .market_data_ohlcv import MarketDataOHLCV
from .series_definitions import SeriesDefinition
from .time_series_data import TimeSeriesData

__all__ = [
    "Base",
    "InstrumentDefinition",
    "MarketDataOHLCV",
    "FixedIncomeDefinition",
    "FixedIncomeTrade",
    "SeriesDefinition",
    "TimeSeriesData",
]
