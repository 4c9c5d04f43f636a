"""ProductRepository port."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from storefront.domain.entities import Page, Product, QueryOptions


@dataclass(frozen=True, slots=True, kw_only=True)
class ProductFilter:
    """Product list filters.

    Attributes:
        product_name: Case-insensitive substring match.
        brand_id: Exact brand match.
    """

    product_name: str | None = None
    brand_id: UUID | None = None


class ProductRepository(Protocol):
    """Product persistence operations."""

    async def find_by_id(self, product_id: UUID) -> Product | None: ...

    async def list_all(self) -> list[Product]: ...

    async def query(self, filters: ProductFilter, options: QueryOptions) -> Page[Product]:
        """List products matching ``filters``, sorted and paginated."""
        ...

    async def save(self, product: Product) -> None: ...

    async def update(self, product: Product) -> None: ...

    async def delete(self, product_id: UUID) -> bool:
        """Delete a product. Returns False if it did not exist."""
        ...
