"""Security adapters: password hashing and token signing."""

from storefront.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from storefront.infrastructure.security.jwt_service import JWTService

__all__ = ["BcryptPasswordService", "JWTService"]
