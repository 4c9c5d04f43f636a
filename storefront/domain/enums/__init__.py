"""Domain enums."""

from storefront.domain.enums.token_type import TokenType
from storefront.domain.enums.user_role import UserRole

__all__ = ["TokenType", "UserRole"]
