"""Product queries (CQRS read operations)."""

from dataclasses import dataclass, field
from uuid import UUID

from storefront.domain.entities import QueryOptions
from storefront.domain.protocols import ProductFilter


@dataclass(frozen=True, kw_only=True)
class GetProduct:
    product_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListProducts:
    """Filtered, paginated product listing.

    Example:
        >>> query = ListProducts(
        ...     filters=ProductFilter(product_name="runner"),
        ...     options=QueryOptions(sort_by="price:asc", limit=12, page=2),
        ... )
    """

    filters: ProductFilter = field(default_factory=ProductFilter)
    options: QueryOptions = field(default_factory=QueryOptions)


@dataclass(frozen=True, kw_only=True)
class ListAllProducts:
    """Every product, unpaginated."""
