"""Product database model."""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import JSON, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.base import BaseMutableModel


class Product(BaseMutableModel):
    """Product row.

    Indexes:
        - ix_products_brand_id: listing products of one brand
        - ix_products_product_name: name search and sorting
    """

    __tablename__ = "products"

    product_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Display name",
    )
    description_product: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Long description",
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        comment="Unit price",
    )
    brand_id: Mapped[UUID] = mapped_column(
        ForeignKey("brands.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        comment="Owning brand",
    )
    thumbnail: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Main image URL",
    )
    product_image_detail: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Detail image URLs",
    )
    size: Mapped[str | None] = mapped_column(String(50), nullable=True)
    type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Units in stock",
    )
    status: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        comment="Listing status label",
    )
