"""Domain entities."""

from storefront.domain.entities.brand import Brand
from storefront.domain.entities.page import Page, QueryOptions
from storefront.domain.entities.product import Product
from storefront.domain.entities.token import AuthTokenPair, IssuedToken, TokenRecord
from storefront.domain.entities.user import User

__all__ = [
    "AuthTokenPair",
    "Brand",
    "IssuedToken",
    "Page",
    "Product",
    "QueryOptions",
    "TokenRecord",
    "User",
]
