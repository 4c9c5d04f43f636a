"""Brand domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Brand:
    """Product brand.

    Attributes:
        id: Brand identifier.
        brand_name: Unique brand name.
        brand_image: Optional logo URL.
        description: Optional free-text description.
    """

    id: UUID
    brand_name: str
    brand_image: str | None = None
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
