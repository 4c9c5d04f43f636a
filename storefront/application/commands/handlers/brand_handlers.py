"""Brand command handlers."""

from dataclasses import replace

from uuid_extensions import uuid7

from storefront.application.commands.brand_commands import (
    CreateBrand,
    DeleteBrand,
    UpdateBrand,
)
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Brand, QueryOptions
from storefront.domain.protocols import (
    BrandRepository,
    LoggerProtocol,
    ProductFilter,
    ProductRepository,
)


class BrandError:
    """Brand error messages."""

    NAME_ALREADY_TAKEN = "Brand name already taken"
    BRAND_NOT_FOUND = "Brand not found"
    BRAND_IN_USE = "Brand still has products"


def _name_taken(domain_error: DomainError | None = None) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.BAD_REQUEST,
            message=BrandError.NAME_ALREADY_TAKEN,
            domain_error=domain_error,
        )
    )


def _brand_not_found() -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.NOT_FOUND,
            message=BrandError.BRAND_NOT_FOUND,
        )
    )


class CreateBrandHandler:
    """Handler for CreateBrand command."""

    def __init__(self, brand_repo: BrandRepository, logger: LoggerProtocol) -> None:
        self._brand_repo = brand_repo
        self._logger = logger

    async def handle(self, cmd: CreateBrand) -> Result[Brand, ApplicationError]:
        """Handle CreateBrand command.

        Returns:
            Success(Brand), or Failure(BAD_REQUEST) when the name is taken.
        """
        if await self._brand_repo.exists_by_name(cmd.brand_name):
            return _name_taken()

        brand = Brand(
            id=uuid7(),
            brand_name=cmd.brand_name,
            brand_image=cmd.brand_image,
            description=cmd.description,
        )
        saved = await self._brand_repo.save(brand)
        if isinstance(saved, Failure):
            return _name_taken(saved.error)
        self._logger.info("brand_created", brand_id=str(brand.id))
        return Success(value=brand)


class UpdateBrandHandler:
    """Handler for UpdateBrand command."""

    def __init__(self, brand_repo: BrandRepository, logger: LoggerProtocol) -> None:
        self._brand_repo = brand_repo
        self._logger = logger

    async def handle(self, cmd: UpdateBrand) -> Result[Brand, ApplicationError]:
        brand = await self._brand_repo.find_by_id(cmd.brand_id)
        if brand is None:
            return _brand_not_found()

        if cmd.brand_name is not None and await self._brand_repo.exists_by_name(
            cmd.brand_name, exclude_brand_id=brand.id
        ):
            return _name_taken()

        updated = replace(
            brand,
            brand_name=cmd.brand_name if cmd.brand_name is not None else brand.brand_name,
            brand_image=cmd.brand_image if cmd.brand_image is not None else brand.brand_image,
            description=cmd.description if cmd.description is not None else brand.description,
        )
        stored = await self._brand_repo.update(updated)
        if isinstance(stored, Failure):
            return _name_taken(stored.error)
        self._logger.info("brand_updated", brand_id=str(brand.id))
        return Success(value=updated)


class DeleteBrandHandler:
    """Handler for DeleteBrand command.

    A brand referenced by products cannot be removed.
    """

    def __init__(
        self,
        brand_repo: BrandRepository,
        product_repo: ProductRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._brand_repo = brand_repo
        self._product_repo = product_repo
        self._logger = logger

    async def handle(self, cmd: DeleteBrand) -> Result[None, ApplicationError]:
        in_use = await self._product_repo.query(
            ProductFilter(brand_id=cmd.brand_id), QueryOptions(limit=1)
        )
        if in_use.total_results:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.BAD_REQUEST,
                    message=BrandError.BRAND_IN_USE,
                )
            )

        if not await self._brand_repo.delete(cmd.brand_id):
            return _brand_not_found()
        self._logger.info("brand_deleted", brand_id=str(cmd.brand_id))
        return Success(value=None)
