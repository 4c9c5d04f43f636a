"""Query handlers."""

from storefront.application.queries.handlers.brand_query_handlers import (
    GetBrandHandler,
    ListBrandsHandler,
)
from storefront.application.queries.handlers.product_query_handlers import (
    GetProductHandler,
    ListAllProductsHandler,
    ListProductsHandler,
)
from storefront.application.queries.handlers.user_query_handlers import (
    GetUserHandler,
    ListUsersHandler,
)

__all__ = [
    "GetBrandHandler",
    "GetProductHandler",
    "GetUserHandler",
    "ListAllProductsHandler",
    "ListBrandsHandler",
    "ListProductsHandler",
    "ListUsersHandler",
]
