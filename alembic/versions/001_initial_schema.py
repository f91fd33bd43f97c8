"""Initial schema: three definition tables and their observation tables.

Creates:
- instrument_definitions + market_data_ohlcv (price data, keyed by ticker)
- fixed_income_definitions + fixed_income_trades (keyed by instrument_id)
- series_definitions + time_series_data (keyed by series_id)

Revision ID: c7e41a90b2d3
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "c7e41a90b2d3"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFINITION_TABLES = ("instrument_definitions", "fixed_income_definitions", "series_definitions")


def upgrade() -> None:
    # -----------------------------------------------------------------------
    # Definition tables
    # -----------------------------------------------------------------------
    op.create_table(
        "instrument_definitions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("ticker", sa.String(50), nullable=False),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_instrument_definitions"),
    )

    op.create_table(
        "fixed_income_definitions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("ticker", sa.String(50), nullable=False),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_fixed_income_definitions"),
    )

    op.create_table(
        "series_definitions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("ticker", sa.String(100), nullable=False),
        sa.Column("name", sa.String(300), nullable=True),
        sa.Column("unit", sa.String(50), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_series_definitions"),
    )

    # Ticker lookups compare lower(ticker)
    for table in DEFINITION_TABLES:
        op.create_index(f"ix_{table}_ticker_lower", table, [sa.text("lower(ticker)")])

    # -----------------------------------------------------------------------
    # Observation tables
    # -----------------------------------------------------------------------
    op.create_table(
        "market_data_ohlcv",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("ticker", sa.String(50), nullable=False),
        sa.Column("timestamp", sa.Date(), nullable=False),
        sa.Column("open", sa.Numeric(), nullable=True),
        sa.Column("high", sa.Numeric(), nullable=True),
        sa.Column("low", sa.Numeric(), nullable=True),
        sa.Column("close", sa.Numeric(), nullable=True),
        sa.Column("volume", sa.Numeric(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_market_data_ohlcv"),
    )
    op.create_index(
        "ix_market_data_ohlcv_ticker_timestamp", "market_data_ohlcv", ["ticker", "timestamp"]
    )

    op.create_table(
        "fixed_income_trades",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("instrument_id", sa.Integer(), nullable=False),
        sa.Column("trade_date", sa.Date(), nullable=False),
        sa.Column("average_yield", sa.Numeric(), nullable=True),
        sa.Column("amount", sa.Numeric(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_fixed_income_trades"),
        sa.ForeignKeyConstraint(
            ["instrument_id"],
            ["fixed_income_definitions.id"],
            name="fk_fixed_income_trades_instrument_id_fixed_income_definitions",
        ),
    )
    op.create_index(
        "ix_fixed_income_trades_instrument_date",
        "fixed_income_trades",
        ["instrument_id", "trade_date"],
    )

    op.create_table(
        "time_series_data",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("series_id", sa.Integer(), nullable=False),
        sa.Column("timestamp", sa.Date(), nullable=False),
        sa.Column("value", sa.Numeric(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_time_series_data"),
        sa.ForeignKeyConstraint(
            ["series_id"],
            ["series_definitions.id"],
            name="fk_time_series_data_series_id_series_definitions",
        ),
    )
    op.create_index(
        "ix_time_series_data_series_timestamp", "time_series_data", ["series_id", "timestamp"]
    )


def downgrade() -> None:
    op.drop_table("time_series_data")
    op.drop_table("fixed_income_trades")
    op.drop_table("market_data_ohlcv")
    for table in reversed(DEFINITION_TABLES):
        op.drop_index(f"ix_{table}_ticker_lower", table_name=table)
        op.drop_table(table)
