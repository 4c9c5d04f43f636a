"""Brand queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetBrand:
    brand_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListBrands:
    """All brands ordered by name."""
