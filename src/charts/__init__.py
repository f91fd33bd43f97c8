"""Chart series resolution across the price, fixed-income and named-series datasets.

Public API:
    SeriesResolver, ResolutionStrategy, DEFAULT_STRATEGIES
    SeriesStore, SqlSeriesStore, DefinitionRef
    Observation, ResolvedSeries
    SeriesResolverError, BatchInputError, TickerResolutionError
"""

from .errors import BatchInputError, SeriesResolverError, TickerResolutionError
from .resolver import DEFAULT_STRATEGIES, ResolutionStrategy, SeriesResolver
from .series import Observation, ResolvedSeries
from .store import DefinitionRef, SeriesStore, SqlSeriesStore

__all__ = [
    "SeriesResolver",
    "ResolutionStrategy",
    "DEFAULT_STRATEGIES",
    "SeriesStore",
    "SqlSeriesStore",
    "DefinitionRef",
    "Observation",
    "ResolvedSeries",
    "SeriesResolverError",
    "BatchInputError",
    "TickerResolutionError",
]
