"""SQLAlchemy models.

Importing this package registers every table on ``BaseModel.metadata``.
"""

from storefront.infrastructure.persistence.models.brand import Brand
from storefront.infrastructure.persistence.models.product import Product
from storefront.infrastructure.persistence.models.token import Token
from storefront.infrastructure.persistence.models.user import User

__all__ = ["Brand", "Product", "Token", "User"]
