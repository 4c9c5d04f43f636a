"""Casbin authorization dependencies.

Architecture:
    - JWT Authentication (auth_dependencies.py): verifies user identity
    - Casbin Authorization (this file): verifies the user's roles grant a right

Usage:
    @router.post("/products")
    async def create_product(
        current_user: CurrentUser = Depends(require_right("manageProducts")),
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status

from storefront.core.container import get_authorization
from storefront.infrastructure.authorization import CasbinAdapter
from storefront.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)

FORBIDDEN_MESSAGE = "Forbidden"


def forbidden() -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_MESSAGE)


def require_right(right: str) -> Callable[..., Awaitable[CurrentUser]]:
    """Create a dependency that requires ``right`` for any of the user's roles.

    Args:
        right: Right name from the policy (getUsers, manageUsers, manageProducts).

    Returns:
        Dependency resolving to the authenticated CurrentUser.

    Raises:
        HTTPException 401: No valid access token.
        HTTPException 403: Roles do not grant the right.
    """

    async def right_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
        authorization: Annotated[CasbinAdapter, Depends(get_authorization)],
    ) -> CurrentUser:
        if not authorization.has_right(current_user.roles, right):
            raise forbidden()
        return current_user

    return right_checker
