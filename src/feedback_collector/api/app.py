"""
feedback_collector.api.app

FastAPI app factory for the Feedback Collector service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from feedback_collector import __version__
from feedback_collector.api.routers.admin import router as admin_router
from feedback_collector.api.routers.feedback import router as feedback_router
from feedback_collector.api.routers.health import router as health_router
from feedback_collector.api.routers.index import router as index_router
from feedback_collector.db.init_db import init_db
from feedback_collector.db.session import create_engine, create_sessionmaker
from feedback_collector.observability.logging import configure_logging, get_logger
from feedback_collector.observability.middleware import RequestContextMiddleware
from feedback_collector.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # One engine (and pool) per process; requests get sessions via `api.deps.db_session`.
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Dev/test convenience: create tables automatically. Prod should use Alembic migrations.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Feedback Collector",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(index_router)
    app.include_router(admin_router)
    app.include_router(feedback_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; data access and view selection live in the routers.
