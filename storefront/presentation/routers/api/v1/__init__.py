"""API v1 routers.

Exports:
    v1_router: All versioned resource routers, mounted under ``api_prefix``.
"""

from fastapi import APIRouter

from storefront.presentation.routers.api.v1.auth import auth_router
from storefront.presentation.routers.api.v1.brands import brands_router
from storefront.presentation.routers.api.v1.products import products_router
from storefront.presentation.routers.api.v1.users import users_router

v1_router = APIRouter()
v1_router.include_router(auth_router)
v1_router.include_router(users_router)
v1_router.include_router(brands_router)
v1_router.include_router(products_router)

__all__ = ["v1_router"]
