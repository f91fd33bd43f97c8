"""Daily OHLCV price observations for instrument definitions.

Rows carry the ticker directly; the chart resolver matches them on
lower(ticker) and reads the close as the series value.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, Date, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class MarketDataOHLCV(Base):
    __tablename__ = "market_data_ohlcv"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    ticker: Mapped[str] = mapped_column(String(50), nullable=False)
    timestamp: Mapped[date] = mapped_column(Date, nullable=False)
    open: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    high: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    low: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    close: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    volume: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)

    __table_args__ = (
        Index("ix_market_data_ohlcv_ticker_timestamp", "ticker", "timestamp"),
    )
