"""System router for non-versioned application endpoints.

Root and health endpoints report service and dependency status. They are
side-effect free and unauthenticated.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from storefront.core.config import get_settings
from storefront.core.container import get_cache, get_database
from storefront.core.result import Success
from storefront.infrastructure.cache import RedisAdapter
from storefront.infrastructure.persistence import Database
from storefront.presentation.routers.api.v1.errors import envelope_response

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> JSONResponse:
    """Root endpoint with service name, version and environment."""
    settings = get_settings()
    return envelope_response(
        status.HTTP_200_OK,
        "operational",
        data={
            "name": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment.value,
        },
    )


@system_router.get("/health")
async def health(
    database: Annotated[Database, Depends(get_database)],
    cache: Annotated[RedisAdapter, Depends(get_cache)],
) -> JSONResponse:
    """Health check for monitoring and load balancers.

    Returns:
        200 when the database and cache respond, 503 otherwise.
    """
    database_ok = await database.check_connection()
    cache_ok = isinstance(await cache.ping(), Success)
    healthy = database_ok and cache_ok
    return envelope_response(
        status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        "healthy" if healthy else "unhealthy",
        data={
            "database": "ok" if database_ok else "unavailable",
            "cache": "ok" if cache_ok else "unavailable",
        },
    )
