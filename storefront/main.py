"""Main FastAPI application entry point.

Builds the application: trace middleware, CORS, envelope exception handlers,
the versioned API under ``api_prefix``, system endpoints and the uploads
mount. The lifespan checks the stores on startup and closes them on shutdown.

Run with:
    uvicorn storefront.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from storefront.core.config import get_settings
from storefront.core.container import get_cache, get_database, get_logger
from storefront.core.result import Failure
from storefront.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from storefront.presentation.routers.api.v1 import v1_router
from storefront.presentation.routers.api.v1.errors import register_exception_handlers
from storefront.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: verify database and cache connectivity (logged, not fatal)
    - Shutdown: close the cache pool and dispose the database engine
    """
    logger = get_logger()
    database = get_database()
    cache = get_cache()

    if not await database.check_connection():
        logger.warning("database_unavailable_on_startup")
    if isinstance(await cache.ping(), Failure):
        logger.warning("cache_unavailable_on_startup")
    logger.info("application_started", environment=get_settings().environment.value)

    yield

    await cache.close()
    await database.close()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="E-commerce backend: accounts, brands and products",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Trace-Id"],
    )
    app.add_middleware(TraceMiddleware)

    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(v1_router, prefix=settings.api_prefix)

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.upload_url_base,
        StaticFiles(directory=upload_dir),
        name="uploads",
    )

    return app


app = create_app()
