"""Read-only access to the chart definition and observation tables.

SeriesStore is the narrow datastore surface the resolver depends on:
single-definition lookup by ticker, range-filtered observation fetch, and
the ticker column of a definition table. SqlSeriesStore implements it on
an async SQLAlchemy session; tests substitute an in-memory store.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.models.base import Base


@dataclass(frozen=True)
class DefinitionRef:
    """Identity of a definition row: internal id plus the stored ticker."""

    id: int
    ticker: str


class SeriesStore(abc.ABC):
    """Abstract datastore used by SeriesResolver."""

    @abc.abstractmethod
    async def find_definition(
        self, model: type[Base], ticker: str
    ) -> Optional[DefinitionRef]:
        """Return the first definition (by id) whose ticker matches case-insensitively."""

    @abc.abstractmethod
    async def fetch_observations(
        self,
        model: type[Base],
        *,
        scope_column: str,
        scope_value: Any,
        date_column: str,
        value_column: str,
        start: date,
        case_insensitive: bool = False,
    ) -> list[tuple[Any, Any]]:
        """Return raw ``(date, value)`` rows with ``date_column >= start``, ascending."""

    @abc.abstractmethod
    async def list_tickers(self, model: type[Base]) -> list[Optional[str]]:
        """Return the ticker column of a definition table."""

    async def rollback(self) -> None:
        """Discard any failed transaction state so later reads can proceed."""
        return None


class SqlSeriesStore(SeriesStore):
    """SeriesStore backed by an AsyncSession on the hosted PostgreSQL database."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_definition(
        self, model: type[Base], ticker: str
    ) -> Optional[DefinitionRef]:
        # lower() equality rather than ILIKE so '%' and '_' stay literal
        stmt = (
            select(model.id, model.ticker)
            .where(func.lower(model.ticker) == ticker.lower())
            .order_by(model.id.asc())
            .limit(1)
        )
        row = (await self._session.execute(stmt)).first()
        if row is None:
            return None
        return DefinitionRef(id=row.id, ticker=row.ticker)

    async def fetch_observations(
        self,
        model: type[Base],
        *,
        scope_column: str,
        scope_value: Any,
        date_column: str,
        value_column: str,
        start: date,
        case_insensitive: bool = False,
    ) -> list[tuple[Any, Any]]:
        scope_col = getattr(model, scope_column)
        date_col = getattr(model, date_column)
        value_col = getattr(model, value_column)

        if case_insensitive:
            condition = func.lower(scope_col) == str(scope_value).lower()
        else:
            condition = scope_col == scope_value

        stmt = (
            select(date_col.label("time"), value_col.label("value"))
            .where(condition)
            .where(date_col >= start)
            .order_by(date_col.asc())
        )
        rows = (await self._session.execute(stmt)).all()
        return [(r.time, r.value) for r in rows]

    async def list_tickers(self, model: type[Base]) -> list[Optional[str]]:
        stmt = select(model.ticker).order_by(model.ticker.asc())
        return list((await self._session.execute(stmt)).scalars().all())

    async def rollback(self) -> None:
        await self._session.rollback()
