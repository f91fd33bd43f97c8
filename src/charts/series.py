"""Domain types returned by the series resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Observation:
    """A single (date, value) reading of a resolved series."""

    time: date
    value: float


@dataclass(frozen=True)
class ResolvedSeries:
    """A ticker's observations from the one dataset that defined it.

    Observations are ascending by date. Spacing may be irregular and
    duplicate dates are passed through as stored.
    """

    ticker: str
    name: str
    unit: str
    source: str
    dataset: str
    observations: list[Observation] = field(default_factory=list)
    skipped_points: int = 0

    @property
    def last_update(self) -> Optional[str]:
        """Date of the most recent observation as an ISO UTC midnight timestamp."""
        if not self.observations:
            return None
        return f"{self.observations[-1].time.isoformat()}T00:00:00Z"
