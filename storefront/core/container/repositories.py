"""Repository dependency factories.

Request-scoped repository instances. Each request gets fresh repositories
sharing the request's database session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from storefront.infrastructure.persistence.repositories import (
        BrandRepository,
        ProductRepository,
        TokenRepository,
        UserRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Usage:
        @router.get("/users/{user_id}")
        async def get_user(
            user_repo: UserRepository = Depends(get_user_repository),
        ):
            user = await user_repo.find_by_id(user_id)
    """
    from storefront.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_token_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "TokenRepository":
    """Get token repository (request-scoped)."""
    from storefront.infrastructure.persistence.repositories import TokenRepository

    return TokenRepository(session=session)


async def get_brand_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "BrandRepository":
    """Get brand repository (request-scoped)."""
    from storefront.infrastructure.persistence.repositories import BrandRepository

    return BrandRepository(session=session)


async def get_product_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ProductRepository":
    """Get product repository (request-scoped)."""
    from storefront.infrastructure.persistence.repositories import ProductRepository

    return ProductRepository(session=session)
