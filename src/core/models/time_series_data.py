"""Observations for generic named series, scoped by series_id."""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, Date, ForeignKey, Index, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class TimeSeriesData(Base):
    __tablename__ = "time_series_data"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    series_id: Mapped[int] = mapped_column(
        ForeignKey("series_definitions.id"), nullable=False
    )
    timestamp: Mapped[date] = mapped_column(Date, nullable=False)
    value: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)

    __table_args__ = (
        Index("ix_time_series_data_series_timestamp", "series_id", "timestamp"),
    )
