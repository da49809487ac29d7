from collections.abc import Callable
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
from clockcheck.core.config import AppSettings, settings as default_settings
from clockcheck.core.logging_config import setup_logging
from clockcheck.core.security import TokenGate
from clockcheck.middlewares.logging_middleware import LoggingMiddleware
from clockcheck.middlewares.metrics_middleware import PrometheusMiddleware, metrics
from clockcheck.schemas.health import ErrorResponse, HealthResponse, StatusResponse
from clockcheck.schemas.time import TimeResponse
from clockcheck.services.clock import format_timestamp, utc_now

logger = setup_logging()

UNAUTHORIZED_MESSAGE = "Unauthorized"


def create_app(settings: AppSettings | None = None, clock: Callable[[], datetime] = utc_now) -> FastAPI:
    """Create and configure the FastAPI application.

    The auth token is taken from *settings* once, here; handlers never look
    at the environment. *clock* supplies the instant served by ``/time``.
    """
    settings = settings or default_settings
    gate = TokenGate(settings.auth_token)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup...", auth_enabled=gate.is_enabled, metrics_enabled=settings.metrics_enabled)
        yield
        logger.info("Application shutdown...")

    app = FastAPI(title=settings.app_name, version=settings.version, debug=settings.debug, lifespan=lifespan)
    app.state.token_gate = gate

    # Add Logging Middleware
    app.add_middleware(LoggingMiddleware)

    if settings.metrics_enabled:
        # Add Prometheus middleware
        app.add_middleware(PrometheusMiddleware)

        # Expose metrics endpoint
        @app.get("/metrics", include_in_schema=False)
        async def get_metrics():
            return await metrics()

    @app.get("/status", response_model=StatusResponse)
    async def status():
        return StatusResponse(version=settings.version)

    @app.get(
        "/health",
        response_model=HealthResponse,
        responses={401: {"model": ErrorResponse}},
    )
    async def health(token: str | None = Query(default=None)):
        if not gate.check(token):
            logger.warning("Health check rejected", reason="invalid or missing token")
            error = ErrorResponse(message=UNAUTHORIZED_MESSAGE)
            return JSONResponse(content=error.model_dump(mode="json"), status_code=401)
        return HealthResponse()

    @app.get("/time", response_model=TimeResponse)
    async def current_time():
        return TimeResponse(time=format_timestamp(clock()))

    return app
