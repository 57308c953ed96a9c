"""
hollywood_stars.api.app

FastAPI app factory for the Hollywood Stars service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Initialize and dispose the DB engine and session factory.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hollywood_stars import __version__
from hollywood_stars.api.errors import register_error_handlers
from hollywood_stars.api.routers.health import router as health_router
from hollywood_stars.api.routers.stars import router as stars_router
from hollywood_stars.db.init_db import init_db
from hollywood_stars.db.session import create_engine, create_sessionmaker
from hollywood_stars.observability.logging import configure_logging, get_logger
from hollywood_stars.observability.middleware import RequestContextMiddleware
from hollywood_stars.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.json_logs,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, port=settings.api_port)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod runs Alembic migrations instead.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Hollywood Stars",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(stars_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Business logic stays in `services.star_service`; this module only composes.
