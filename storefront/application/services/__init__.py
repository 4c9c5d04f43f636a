"""Application services shared by several handlers."""

from storefront.application.services.auth_token_service import (
    AuthTokenService,
    TokenLifetimes,
)

__all__ = ["AuthTokenService", "TokenLifetimes"]
