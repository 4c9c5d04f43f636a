"""Product command handlers.

Flow (create):
1. Check the referenced brand exists
2. Check the upload count (thumbnail required, at most five detail images)
3. Store each upload via FileStorageProtocol, collecting URLs; if one fails,
   the files already stored for this request are deleted again
4. Create Product entity and save it

On failure:
- Unknown brand -> Failure(BAD_REQUEST, "Brand not found")
- Rejected upload (type, size) -> Failure(BAD_REQUEST, storage message)
- Storage write error -> Failure(INTERNAL_ERROR)
"""

from dataclasses import replace

from uuid_extensions import uuid7

from storefront.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from storefront.application.dtos import UploadedFile
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Product
from storefront.domain.protocols import (
    BrandRepository,
    FileStorageProtocol,
    LoggerProtocol,
    ProductRepository,
)

MAX_DETAIL_IMAGES = 5


class ProductError:
    """Product error messages."""

    PRODUCT_NOT_FOUND = "Product not found"
    BRAND_NOT_FOUND = "Brand not found"
    THUMBNAIL_REQUIRED = "Thumbnail image is required"
    TOO_MANY_IMAGES = f"At most {MAX_DETAIL_IMAGES} detail images are allowed"
    NEGATIVE_PRICE = "Price must not be negative"
    NEGATIVE_QUANTITY = "Quantity must not be negative"
    UPLOAD_FAILED = "Failed to store uploaded file"


def _bad_request(message: str) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(code=ApplicationErrorCode.BAD_REQUEST, message=message)
    )


def _product_not_found() -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.NOT_FOUND,
            message=ProductError.PRODUCT_NOT_FOUND,
        )
    )


class CreateProductHandler:
    """Handler for CreateProduct command."""

    def __init__(
        self,
        product_repo: ProductRepository,
        brand_repo: BrandRepository,
        file_storage: FileStorageProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize product creation handler.

        Args:
            product_repo: Product persistence.
            brand_repo: Used to check the referenced brand.
            file_storage: Stores image uploads and returns their URLs.
            logger: Structured logger.
        """
        self._product_repo = product_repo
        self._brand_repo = brand_repo
        self._file_storage = file_storage
        self._logger = logger

    async def handle(self, cmd: CreateProduct) -> Result[Product, ApplicationError]:
        """Handle CreateProduct command.

        Returns:
            Success(Product) with stored image URLs.
            Failure(ApplicationError) with BAD_REQUEST or INTERNAL_ERROR.
        """
        if cmd.price < 0:
            return _bad_request(ProductError.NEGATIVE_PRICE)
        if cmd.quantity < 0:
            return _bad_request(ProductError.NEGATIVE_QUANTITY)
        if cmd.thumbnail is None:
            return _bad_request(ProductError.THUMBNAIL_REQUIRED)
        if len(cmd.product_image_detail) > MAX_DETAIL_IMAGES:
            return _bad_request(ProductError.TOO_MANY_IMAGES)
        if await self._brand_repo.find_by_id(cmd.brand_id) is None:
            return _bad_request(ProductError.BRAND_NOT_FOUND)

        urls: list[str] = []
        for upload in (cmd.thumbnail, *cmd.product_image_detail):
            stored = await self._store(upload)
            if isinstance(stored, Failure):
                await self._discard(urls)
                return stored
            urls.append(stored.value)

        product = Product(
            id=uuid7(),
            product_name=cmd.product_name,
            description_product=cmd.description_product,
            price=cmd.price,
            brand_id=cmd.brand_id,
            thumbnail=urls[0],
            product_image_detail=urls[1:],
            size=cmd.size,
            type=cmd.type,
            quantity=cmd.quantity,
            status=cmd.status,
        )
        await self._product_repo.save(product)
        self._logger.info(
            "product_created",
            product_id=str(product.id),
            brand_id=str(product.brand_id),
            images=len(urls),
        )
        return Success(value=product)

    async def _discard(self, urls: list[str]) -> None:
        for url in urls:
            removed = await self._file_storage.delete(url)
            if isinstance(removed, Failure):
                self._logger.warning(
                    "upload_cleanup_failed", url=url, reason=removed.error.message
                )

    async def _store(self, upload: UploadedFile) -> Result[str, ApplicationError]:
        result = await self._file_storage.save(
            filename=upload.filename,
            content=upload.content,
            content_type=upload.content_type,
        )
        match result:
            case Success(value=url):
                return Success(value=url)
            case Failure(error=error) if error.code == ErrorCode.VALIDATION_FAILED:
                self._logger.warning("upload_rejected", reason=error.message)
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.BAD_REQUEST,
                        message=error.message,
                        domain_error=error,
                    )
                )
            case Failure(error=error):
                self._logger.error("upload_failed", reason=error.message)
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.INTERNAL_ERROR,
                        message=ProductError.UPLOAD_FAILED,
                        domain_error=error,
                    )
                )


class UpdateProductHandler:
    """Handler for UpdateProduct command.

    Changing ``brand_id`` re-checks that the new brand exists.
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        brand_repo: BrandRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._product_repo = product_repo
        self._brand_repo = brand_repo
        self._logger = logger

    async def handle(self, cmd: UpdateProduct) -> Result[Product, ApplicationError]:
        product = await self._product_repo.find_by_id(cmd.product_id)
        if product is None:
            return _product_not_found()

        if cmd.price is not None and cmd.price < 0:
            return _bad_request(ProductError.NEGATIVE_PRICE)
        if cmd.quantity is not None and cmd.quantity < 0:
            return _bad_request(ProductError.NEGATIVE_QUANTITY)
        if cmd.product_image_detail is not None and (
            len(cmd.product_image_detail) > MAX_DETAIL_IMAGES
        ):
            return _bad_request(ProductError.TOO_MANY_IMAGES)
        if (
            cmd.brand_id is not None
            and cmd.brand_id != product.brand_id
            and await self._brand_repo.find_by_id(cmd.brand_id) is None
        ):
            return _bad_request(ProductError.BRAND_NOT_FOUND)

        changes = {
            name: value
            for name, value in (
                ("product_name", cmd.product_name),
                ("description_product", cmd.description_product),
                ("price", cmd.price),
                ("brand_id", cmd.brand_id),
                ("thumbnail", cmd.thumbnail),
                ("product_image_detail", cmd.product_image_detail),
                ("size", cmd.size),
                ("type", cmd.type),
                ("quantity", cmd.quantity),
                ("status", cmd.status),
            )
            if value is not None
        }
        updated = replace(product, **changes)
        await self._product_repo.update(updated)
        self._logger.info(
            "product_updated", product_id=str(product.id), fields=sorted(changes)
        )
        return Success(value=updated)


class DeleteProductHandler:
    """Handler for DeleteProduct command."""

    def __init__(self, product_repo: ProductRepository, logger: LoggerProtocol) -> None:
        self._product_repo = product_repo
        self._logger = logger

    async def handle(self, cmd: DeleteProduct) -> Result[None, ApplicationError]:
        if not await self._product_repo.delete(cmd.product_id):
            return _product_not_found()
        self._logger.info("product_deleted", product_id=str(cmd.product_id))
        return Success(value=None)
