"""SQLAlchemy repository adapters."""

from storefront.infrastructure.persistence.repositories.brand_repository import (
    BrandRepository,
)
from storefront.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)
from storefront.infrastructure.persistence.repositories.token_repository import (
    TokenRepository,
)
from storefront.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "BrandRepository",
    "ProductRepository",
    "TokenRepository",
    "UserRepository",
]
