"""FastAPI application factory.

``create_app()`` is the composition root for the network service: it
wires settings, the storage engine, the service, the health monitor,
middleware, and routers into one ``FastAPI`` instance.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

import gsdx
from gsdx.api.middleware import RequestContextMiddleware
from gsdx.api.routes import health_router, router
from gsdx.config.settings import GsdxSettings
from gsdx.infrastructure.database import create_db_engine, init_database
from gsdx.infrastructure.health import HealthMonitor
from gsdx.services import GsdxService, ServiceError, ServiceResult
from gsdx.services.adapter import StatusCode

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build storage and background tasks on startup; tear them down on exit."""
    settings: GsdxSettings = app.state.settings
    engine: Engine | None = app.state.engine
    owns_engine = engine is None
    if engine is None:
        engine = create_db_engine(
            settings.database_url,
            max_connections=settings.database.max_connections,
            acquire_timeout=settings.database.acquire_timeout,
            schema=settings.database.schema_name,
        )
    if settings.database.create_schema:
        init_database(engine)

    monitor = HealthMonitor(engine, interval=settings.health.interval_seconds)
    await asyncio.to_thread(monitor.check)
    monitor.start()

    app.state.engine = engine
    app.state.service = GsdxService.from_engine(engine)
    app.state.health = monitor
    logger.info("server_started", version=gsdx.__version__, dialect=engine.dialect.name)
    try:
        yield
    finally:
        await monitor.stop()
        if owns_engine:
            engine.dispose()
            app.state.engine = None
        logger.info("server_stopped")


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and query strings as INVALID_ARGUMENT."""
    errors = jsonable_encoder(exc.errors())
    messages = [str(err.get("msg", "")) for err in errors]
    result = ServiceResult(
        ok=False,
        op=request.url.path,
        error=ServiceError(
            code=StatusCode.INVALID_ARGUMENT.value,
            message=",".join(messages),
            detail={"errors": errors},
        ),
    )
    return JSONResponse(result.model_dump(mode="json"), status_code=400)


def create_app(
    settings: GsdxSettings | None = None,
    *,
    engine: Engine | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Args:
        settings: Override settings (useful for testing). Defaults to a
            fresh :class:`GsdxSettings` read from env and ``gsdx.toml``.
        engine: Use an existing engine instead of creating one; the caller
            keeps ownership and must dispose it.
    """
    settings = settings or GsdxSettings.from_cli()

    app = FastAPI(title="gsdx", version=gsdx.__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(router)
    app.include_router(health_router)
    return app
