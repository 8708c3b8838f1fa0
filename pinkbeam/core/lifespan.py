"""Application lifespan: startup and shutdown.

Only wiring of infrastructure (shared HTTP client, telemetry, DB engine
dispose); no business logic here.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from pinkbeam.core.config import get_settings
from pinkbeam.infrastructure.persistence import database
from pinkbeam.shared.telemetry.logging import get_logger
from pinkbeam.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Shutdown order: shared HTTP client close, telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    # Shared HTTP client for the email provider (connection reuse).
    app.state.email_http_client = httpx.AsyncClient(
        timeout=settings.resend_timeout_seconds
    )
    if not settings.email_enabled:
        logger.warning("RESEND_API_KEY not set; outbound email is disabled")

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
        )
        telemetry.setup(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        if settings.database_url:
            database.get_session_factory()
            telemetry.instrument_sqlalchemy(database.engine)
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "email_http_client", None) is not None:
        await app.state.email_http_client.aclose()
        app.state.email_http_client = None
        logger.info("Email HTTP client closed")

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    await database.dispose_engine()
