"""
Application factory.

Run with:
    uvicorn kanban.main:create_app --factory

Everything process-wide (settings, engine, session factory) hangs off
`app.state`, so every app built by `create_app` is self-contained and tests
can build one per case against their own database.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1 import accountables, projects, secretariats
from .api.v1.error_handlers import register_exception_handlers
from .config.settings import Settings, get_settings
from .core.logging import RequestIDMiddleware, setup_logging
from .database.base import Base
from .database.session import build_engine, build_sessionmaker
from .utils.logging import get_project_version

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine = app.state.engine

    if settings.DB_CREATE_ALL:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("app.startup.schema_created", extra={"dialect": engine.dialect.name})

    logger.info("app.startup", extra={"env": settings.ENV, "dialect": engine.dialect.name})
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("app.shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the Kanban API.

    Args:
        settings: Explicit settings; `get_settings()` is used when omitted.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        version=get_project_version(),
        lifespan=lifespan,
    )

    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)

    # Added last, runs first: the request id is set before CORS handling logs anything.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(secretariats.router)
    app.include_router(accountables.router)
    app.include_router(projects.router)

    return app


if __name__ == "__main__":
    uvicorn.run("kanban.main:create_app", factory=True, host="0.0.0.0", port=8000)
