"""FRA decision-support FastAPI application entry point.

Creates the FastAPI app, configures middleware and logging, includes
routers, and loads the static catalogs and claim records once at
startup.
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from config.settings import settings
from src.api.router import api_router

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Structured logging configuration
# ---------------------------------------------------------------------------


def _configure_logging() -> None:
    """Set up structlog with JSON or console rendering based on settings."""
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            settings.log_level,
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Application lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load read-only data and build the engine.

    On startup:
      1. Load scheme and intervention catalogs into a ``CatalogStore``
      2. Load claim records (already normalised by document intake)
      3. Build the ``RecommendationEngine`` with the configured location sets
      4. Store everything on ``app.state``

    Nothing is mutated afterwards, so request handlers share it without
    locking.
    """
    _configure_logging()
    logger.info("app.startup", env=settings.env)

    app.state.start_time = time.time()

    # -- 1. Catalogs ----------------------------------------------------------
    from src.services.catalog import CatalogStore

    app.state.catalog = None
    try:
        app.state.catalog = CatalogStore.from_settings(settings)
    except (OSError, ValueError):
        # Requests that need the catalogs answer 503 until this is fixed.
        logger.error("app.catalog_load_failed", exc_info=True)

    # -- 2. Claim records -------------------------------------------------------
    from src.data.seed import load_claims

    app.state.claim_records = ()
    try:
        app.state.claim_records = load_claims(settings.claims_path)
        logger.info("app.claim_records_loaded", count=len(app.state.claim_records))
    except (OSError, ValueError):
        logger.error("app.claim_records_load_failed", exc_info=True)

    # -- 3. Engine ------------------------------------------------------------
    from src.services.recommendation import RecommendationEngine
    from src.services.rule_config import RuleConfig

    app.state.engine = RecommendationEngine(RuleConfig.from_settings(settings))
    logger.info("app.engine_initialised")

    logger.info("app.startup_complete")

    yield

    logger.info("app.shutdown_complete")


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="FRA Decision Support API",
    description=(
        "Explainable scheme eligibility and intervention recommendations "
        "for Forest Rights Act land claims."
    ),
    version="0.1.0",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
)

# -- CORS middleware --------------------------------------------------------
if settings.is_production:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization", "X-Caller-Role", "X-Owner-Record-Id"],
    )
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173", "http://127.0.0.1:8000"],
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS", "HEAD"],
        allow_headers=["Content-Type", "Accept", "Authorization", "X-Caller-Role", "X-Owner-Record-Id"],
    )

# -- Include routers -------------------------------------------------------
app.include_router(api_router)


@app.get("/api", response_class=ORJSONResponse)
async def api_info() -> dict:
    """API information endpoint."""
    return {
        "name": "FRA Decision Support API",
        "description": "Scheme eligibility and intervention recommendations for FRA claims",
        "version": app.version,
        "docs": "/docs",
        "health": "/api/v1/health",
        "endpoints": {
            "recommendations": "/api/v1/recommendations",
            "claims": "/api/v1/claims",
            "catalog": "/api/v1/catalog",
            "health": "/api/v1/health",
        },
        "roles": ["admin", "user"],
    }
