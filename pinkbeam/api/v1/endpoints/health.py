"""Health check endpoints: liveness and database readiness."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from pinkbeam.core.config import get_settings
from pinkbeam.domain.exceptions import SqlNotConfiguredException
from pinkbeam.infrastructure.persistence.database import get_session_factory
from pinkbeam.schemas.health import HealthResponse, ReadinessResponse
from pinkbeam.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(email_enabled=get_settings().email_enabled)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database unavailable", "model": ReadinessResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """200 when the database answers SELECT 1; 503 otherwise."""
    try:
        session_factory = get_session_factory()
    except SqlNotConfiguredException:
        return JSONResponse(
            status_code=503,
            content=ReadinessResponse(
                status="not_ready", database="not_configured"
            ).model_dump(),
        )
    try:
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(
            status_code=503,
            content=ReadinessResponse(status="not_ready", database="error").model_dump(),
        )
    return ReadinessResponse()
