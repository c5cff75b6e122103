"""FastAPI application entrypoint."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agrismart.config import get_settings
from agrismart.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from agrismart.routes import crops, dashboard, diseases, history, predictions, soil, weather
from agrismart.services import reference_data
from agrismart.store import build_store

logger = logging.getLogger("agrismart")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Load and validate every reference table
      3. Seed the per-process farm store
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "AgriSmart starting",
        extra={"log_level": settings.log_level, "log_format": settings.log_format.value},
    )

    try:
        app.state.reference_counts = reference_data.load_all()
        app.state.store = build_store()
    except Exception as exc:
        logger.exception("startup failure", extra={"error": str(exc)})
        raise

    yield

    logger.info("AgriSmart shutting down")


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description=(
        "Farm management API: crop income prediction from agronomic profiles, "
        "plus weather, soil, crop health, disease and season history pages."
    ),
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── Middleware ──────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


async def _run_readiness_checks(app: FastAPI) -> dict[str, dict[str, Any]]:
    checks: dict[str, dict[str, Any]] = {}

    try:
        checks["reference_data"] = {"ok": True, "tables": reference_data.load_all()}
    except Exception as exc:
        checks["reference_data"] = {"ok": False, "error": str(exc)}

    store = getattr(app.state, "store", None)
    if store is None:
        checks["store"] = {"ok": False, "error": "store not initialised"}
    else:
        checks["store"] = {
            "ok": True,
            "soil_fields": len(store.soil_fields),
            "crops": len(store.crops),
        }
    return checks


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check: verifies the API process is alive."""
    return {
        "status": "ok",
        "service": "agrismart",
        "version": VERSION,
    }


@app.get("/health/ready", tags=["system"])
async def readiness_check() -> JSONResponse:
    """Readiness check: reference tables parse and the farm store is seeded."""
    checks = await _run_readiness_checks(app)
    ready = all(check["ok"] for check in checks.values())
    return JSONResponse(
        status_code=200 if ready else 503,
        content={"status": "ok" if ready else "degraded", "checks": checks},
    )


# ── Router registration ────────────────────────────────────────────────────
app.include_router(predictions.router, prefix="/api/v1")
app.include_router(weather.router, prefix="/api/v1")
app.include_router(soil.router, prefix="/api/v1")
app.include_router(crops.router, prefix="/api/v1")
app.include_router(diseases.router, prefix="/api/v1")
app.include_router(history.router, prefix="/api/v1")
app.include_router(dashboard.router, prefix="/api/v1")
