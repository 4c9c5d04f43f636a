"""Brand commands."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateBrand:
    """Create a brand with a unique name."""

    brand_name: str
    brand_image: str | None = None
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateBrand:
    """Change brand fields. ``None`` leaves a field unchanged."""

    brand_id: UUID
    brand_name: str | None = None
    brand_image: str | None = None
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteBrand:
    brand_id: UUID
