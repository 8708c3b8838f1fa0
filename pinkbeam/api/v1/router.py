"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes use
dependencies from pinkbeam.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from pinkbeam.api.v1.endpoints import email_templates, health, notifications, search

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(
    notifications.router, prefix="/notifications", tags=["notifications"]
)
api_router.include_router(
    email_templates.router, prefix="/email-templates", tags=["email-templates"]
)
