"""Tests for the health endpoints and application wiring."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.deps import get_db
from src.api.routes import health


def _client_with_session(session: MagicMock) -> TestClient:
    app = FastAPI()
    app.include_router(health.router)

    async def _override_db():
        yield session

    app.dependency_overrides[get_db] = _override_db
    return TestClient(app)


def test_health_ok_when_database_answers():
    session = MagicMock()
    session.execute = AsyncMock()

    resp = _client_with_session(session).get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"


def test_health_degraded_when_database_fails():
    session = MagicMock()
    session.execute = AsyncMock(side_effect=ConnectionRefusedError("refused"))

    resp = _client_with_session(session).get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "degraded"
    assert body["database"].startswith("disconnected")


def test_data_status_counts_every_chart_table():
    result = MagicMock()
    result.scalar_one.return_value = 12
    session = MagicMock()
    session.execute = AsyncMock(return_value=result)

    resp = _client_with_session(session).get("/health/data-status")

    assert resp.status_code == 200
    counts = resp.json()["table_counts"]
    assert counts == {
        "instrument_definitions": 12,
        "market_data_ohlcv": 12,
        "fixed_income_definitions": 12,
        "fixed_income_trades": 12,
        "series_definitions": 12,
        "time_series_data": 12,
    }


def test_main_app_mounts_chart_and_health_routes():
    from src.api.main import app

    paths = app.openapi()["paths"]
    assert "/health" in paths
    assert "/health/data-status" in paths
    assert "/api/v1/charts/batch" in paths
    assert "/api/v1/charts/series" in paths
