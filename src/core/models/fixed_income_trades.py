"""Fixed-income trades -- one row per instrument per trade date.

Trades do not carry the ticker; they are scoped by instrument_id.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, Date, ForeignKey, Index, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class FixedIncomeTrade(Base):
    __tablename__ = "fixed_income_trades"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    instrument_id: Mapped[int] = mapped_column(
        ForeignKey("fixed_income_definitions.id"), nullable=False
    )
    trade_date: Mapped[date] = mapped_column(Date, nullable=False)
    average_yield: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    amount: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)

    __table_args__ = (
        Index("ix_fixed_income_trades_instrument_date", "instrument_id", "trade_date"),
    )
