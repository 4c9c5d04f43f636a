"""Brand database model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.base import BaseMutableModel


class Brand(BaseMutableModel):
    """Brand row. ``brand_name`` is unique."""

    __tablename__ = "brands"

    brand_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Brand name (unique)",
    )
    brand_image: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Logo URL",
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Free-text description",
    )
