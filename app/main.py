"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import configure_logging
from app.engine.errors import (
    InsufficientCatalogError,
    InvalidMetricError,
    InvalidProfileError,
    InvalidWindowError,
)

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Daily targets, nutrition / fitness / wellness plans and habit analytics.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")


# ----------------------------------------------------------------------
# Engine error mapping
# ----------------------------------------------------------------------

@app.exception_handler(InvalidProfileError)
async def invalid_profile_handler(request: Request, exc: InvalidProfileError):
    logger.info("Rejected profile: %s", exc)
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                        content={"detail": str(exc), "field": exc.field, "reason": exc.reason})


@app.exception_handler(InvalidWindowError)
async def invalid_window_handler(request: Request, exc: InvalidWindowError):
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                        content={"detail": str(exc), "reason": exc.reason, "window_days": exc.window_days})


@app.exception_handler(InvalidMetricError)
async def invalid_metric_handler(request: Request, exc: InvalidMetricError):
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                        content={"detail": str(exc), "metric": exc.metric, "available": exc.available})


@app.exception_handler(InsufficientCatalogError)
async def insufficient_catalog_handler(request: Request, exc: InsufficientCatalogError):
    logger.warning("Plan generation refused: %s", exc)
    return JSONResponse(status_code=status.HTTP_409_CONFLICT,
                        content={"detail": str(exc), "warnings": [w.model_dump(mode="json") for w in exc.warnings]})


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "VitalPlan API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "vitalplan-api",
        "version": settings.VERSION
    }
