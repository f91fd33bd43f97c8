"""Exception hierarchy for chart series resolution.

- SeriesResolverError: base for all resolver errors
- BatchInputError: malformed batch request; aborts the whole call
- TickerResolutionError: a single ticker could not be resolved; recorded in
  that ticker's slot of the batch result and never raised past the resolver
"""


class SeriesResolverError(Exception):
    """Base exception for all chart series resolution errors."""


class BatchInputError(SeriesResolverError):
    """Raised when a batch request is malformed (no tickers, bad day count)."""


class TickerResolutionError(SeriesResolverError):
    """Per-ticker failure: no data in any dataset, or a datastore fault."""

    def __init__(self, ticker: str, message: str) -> None:
        super().__init__(message)
        self.ticker = ticker
        self.message = message

    def __repr__(self) -> str:
        return f"TickerResolutionError(ticker={self.ticker!r}, message={self.message!r})"
