"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, catalog, logs, plans, profile, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    profile.router, prefix="/profile", tags=["Profile & targets"]
)
api_router.include_router(
    plans.router, prefix="/plans", tags=["Plans"]
)
api_router.include_router(
    logs.router, prefix="/logs", tags=["Daily logs"]
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
api_router.include_router(
    catalog.router, prefix="/catalog", tags=["Catalog"]
)
