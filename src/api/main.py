"""FastAPI application entry-point for the CRM charts API.

Configures CORS, rate limiting, lifespan startup/shutdown, and mounts the
route modules.
Run with:  uvicorn src.api.main:app --reload --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from sqlalchemy import text

from src.api.routes import charts, health
from src.core.config import settings
from src.core.database import async_engine
from src.core.utils.logging_config import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Lifespan -- run once at startup / shutdown
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Test the database connection on startup; dispose engine on shutdown."""
    try:
        async with async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("database_connection_verified")
    except Exception as exc:
        logger.error("database_connection_failed", error=str(exc))

    yield

    await async_engine.dispose()
    logger.info("database_engine_disposed")


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------
openapi_tags = [
    {"name": "Health", "description": "Health check endpoints"},
    {"name": "Charts", "description": "Chart series lookup and batch fetch"},
]

app = FastAPI(
    title=f"{settings.project_name} API",
    version="0.1.0",
    description=(
        "Read-only API behind the CRM charts page. Resolves tickers across the "
        "price, fixed-income and named-series datasets."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=openapi_tags,
)

# Rate limiting
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------
_allowed_origins = [
    "http://localhost:3000",
    "http://localhost:8000",
]
if settings.allowed_origins:
    _allowed_origins.extend(
        o.strip() for o in settings.allowed_origins.split(",") if o.strip()
    )
if settings.debug:
    _allowed_origins = ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
# Health endpoints live at the root (no prefix)
app.include_router(health.router)

# Data endpoints sit under /api/v1
app.include_router(charts.router, prefix="/api/v1")
