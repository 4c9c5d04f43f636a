"""Product commands."""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from storefront.application.dtos import UploadedFile


@dataclass(frozen=True, kw_only=True)
class CreateProduct:
    """Create a product with uploaded images.

    Attributes:
        thumbnail: Main image upload.
        product_image_detail: Detail image uploads (at most five).

    Example:
        >>> command = CreateProduct(
        ...     product_name="Runner 2",
        ...     description_product="Lightweight running shoe",
        ...     price=Decimal("89.90"),
        ...     brand_id=brand_id,
        ...     thumbnail=UploadedFile(filename="main.png", content=b"..."),
        ... )
    """

    product_name: str
    description_product: str
    price: Decimal
    brand_id: UUID
    thumbnail: UploadedFile | None = None
    product_image_detail: list[UploadedFile] = field(default_factory=list)
    size: str | None = None
    type: str | None = None
    quantity: int = 0
    status: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateProduct:
    """Change product fields. ``None`` leaves a field unchanged.

    Image fields take URLs here; uploads only happen on create.
    """

    product_id: UUID
    product_name: str | None = None
    description_product: str | None = None
    price: Decimal | None = None
    brand_id: UUID | None = None
    thumbnail: str | None = None
    product_image_detail: list[str] | None = None
    size: str | None = None
    type: str | None = None
    quantity: int | None = None
    status: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteProduct:
    product_id: UUID
