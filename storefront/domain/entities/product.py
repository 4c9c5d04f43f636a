"""Product domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID


@dataclass
class Product:
    """Catalog product belonging to a brand.

    Attributes:
        id: Product identifier.
        product_name: Display name.
        description_product: Long description.
        price: Unit price, never negative.
        brand_id: Owning brand.
        thumbnail: URL of the main image.
        product_image_detail: URLs of detail images (at most five uploads).
        size: Optional size label.
        type: Optional product type label.
        quantity: Units in stock.
        status: Optional listing status label.
    """

    id: UUID
    product_name: str
    description_product: str
    price: Decimal
    brand_id: UUID
    thumbnail: str | None = None
    product_image_detail: list[str] = field(default_factory=list)
    size: str | None = None
    type: str | None = None
    quantity: int = 0
    status: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
