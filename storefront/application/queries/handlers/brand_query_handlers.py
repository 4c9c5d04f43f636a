"""Brand query handlers."""

from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.application.queries.brand_queries import GetBrand, ListBrands
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Brand
from storefront.domain.protocols import BrandRepository


class GetBrandError:
    """GetBrand-specific errors."""

    BRAND_NOT_FOUND = "Brand not found"


class GetBrandHandler:
    """Handler for GetBrand query."""

    def __init__(self, brand_repo: BrandRepository) -> None:
        self._brand_repo = brand_repo

    async def handle(self, query: GetBrand) -> Result[Brand, ApplicationError]:
        brand = await self._brand_repo.find_by_id(query.brand_id)
        if brand is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=GetBrandError.BRAND_NOT_FOUND,
                )
            )
        return Success(value=brand)


class ListBrandsHandler:
    """Handler for ListBrands query."""

    def __init__(self, brand_repo: BrandRepository) -> None:
        self._brand_repo = brand_repo

    async def handle(self, query: ListBrands) -> Result[list[Brand], ApplicationError]:
        return Success(value=await self._brand_repo.list_all())
