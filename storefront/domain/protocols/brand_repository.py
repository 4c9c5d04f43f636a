"""BrandRepository port."""

from typing import Protocol
from uuid import UUID

from storefront.core.errors import ConflictError
from storefront.core.result import Result
from storefront.domain.entities import Brand


class BrandRepository(Protocol):
    """Brand persistence operations."""

    async def find_by_id(self, brand_id: UUID) -> Brand | None: ...

    async def exists_by_name(
        self, brand_name: str, *, exclude_brand_id: UUID | None = None
    ) -> bool:
        """Check whether ``brand_name`` is taken (case-insensitive)."""
        ...

    async def list_all(self) -> list[Brand]: ...

    async def save(self, brand: Brand) -> Result[None, ConflictError]:
        """Insert a brand. Fails with ConflictError on a duplicate name."""
        ...

    async def update(self, brand: Brand) -> Result[None, ConflictError]: ...

    async def delete(self, brand_id: UUID) -> bool:
        """Delete a brand. Returns False if it did not exist."""
        ...
