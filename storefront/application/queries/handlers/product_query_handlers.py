"""Product query handlers.

- GetProductHandler: single product by id
- ListProductsHandler: filtered, sorted, paginated listing
- ListAllProductsHandler: full catalog without paging
"""

from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.application.queries.product_queries import (
    GetProduct,
    ListAllProducts,
    ListProducts,
)
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Page, Product
from storefront.domain.protocols import ProductRepository


class GetProductError:
    """GetProduct-specific errors."""

    PRODUCT_NOT_FOUND = "Product not found"


class GetProductHandler:
    """Handler for GetProduct query."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, query: GetProduct) -> Result[Product, ApplicationError]:
        """Handle GetProduct query.

        Returns:
            Success(Product) if found.
            Failure(ApplicationError) with NOT_FOUND otherwise.
        """
        product = await self._product_repo.find_by_id(query.product_id)
        if product is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=GetProductError.PRODUCT_NOT_FOUND,
                )
            )
        return Success(value=product)


class ListProductsHandler:
    """Handler for ListProducts query."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(
        self, query: ListProducts
    ) -> Result[Page[Product], ApplicationError]:
        return Success(
            value=await self._product_repo.query(query.filters, query.options)
        )


class ListAllProductsHandler:
    """Handler for ListAllProducts query."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(
        self, query: ListAllProducts
    ) -> Result[list[Product], ApplicationError]:
        return Success(value=await self._product_repo.list_all())
