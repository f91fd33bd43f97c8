"""Root pytest configuration and shared fixtures.

Provides common test fixtures used across all test modules:
- as_of: fixed "today" for resolver tests
- memory_store: an in-memory SeriesStore seeded per test
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Any, Optional

import pytest

from src.charts.store import DefinitionRef, SeriesStore


class InMemorySeriesStore(SeriesStore):
    """SeriesStore over plain dicts, with hooks for injecting faults.

    Definitions and observation rows are keyed by ORM model class, so the
    resolver's strategies work against it unchanged.
    """

    def __init__(self) -> None:
        self.definitions: dict[type, list[DefinitionRef]] = defaultdict(list)
        self.observations: dict[type, list[dict[str, Any]]] = defaultdict(list)
        self.lookup_failures: dict[tuple[type, str], Exception] = {}
        self.broken_tables: dict[type, Exception] = {}
        self.calls: list[tuple[str, str, Any]] = []
        self.rollbacks = 0

    # -- seeding helpers --

    def add_definition(self, model: type, id: int, ticker: Optional[str]) -> None:
        self.definitions[model].append(DefinitionRef(id=id, ticker=ticker))

    def add_rows(self, model: type, rows: list[dict[str, Any]]) -> None:
        self.observations[model].extend(rows)

    def fail_lookup(self, model: type, ticker: str, exc: Exception) -> None:
        self.lookup_failures[(model, ticker.lower())] = exc

    # -- SeriesStore --

    async def find_definition(self, model, ticker):
        self.calls.append(("find_definition", model.__tablename__, ticker))
        exc = self.lookup_failures.get((model, ticker.lower()))
        if exc is not None:
            raise exc
        matches = sorted(
            (
                d
                for d in self.definitions[model]
                if d.ticker is not None and d.ticker.lower() == ticker.lower()
            ),
            key=lambda d: d.id,
        )
        return matches[0] if matches else None

    async def fetch_observations(
        self,
        model,
        *,
        scope_column,
        scope_value,
        date_column,
        value_column,
        start,
        case_insensitive=False,
    ):
        self.calls.append(("fetch_observations", model.__tablename__, scope_value))

        def _in_scope(row: dict[str, Any]) -> bool:
            if case_insensitive:
                return str(row[scope_column]).lower() == str(scope_value).lower()
            return row[scope_column] == scope_value

        rows = [
            r for r in self.observations[model]
            if _in_scope(r) and r[date_column] >= start
        ]
        rows.sort(key=lambda r: r[date_column])
        return [(r[date_column], r[value_column]) for r in rows]

    async def list_tickers(self, model):
        self.calls.append(("list_tickers", model.__tablename__, None))
        if model in self.broken_tables:
            raise self.broken_tables[model]
        return sorted(
            (d.ticker for d in self.definitions[model]),
            key=lambda t: (t is None, t or ""),
        )

    async def rollback(self) -> None:
        self.rollbacks += 1


@pytest.fixture
def as_of() -> date:
    """Fixed processing date used as "today" by resolver tests."""
    return date(2025, 6, 30)


@pytest.fixture
def memory_store() -> InMemorySeriesStore:
    """Return an empty in-memory SeriesStore."""
    return InMemorySeriesStore()
