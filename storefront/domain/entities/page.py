"""Paginated query result."""

from dataclasses import dataclass
from math import ceil
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class QueryOptions:
    """Sorting and paging options for list queries.

    Attributes:
        sort_by: Comma-separated ``field:asc|desc`` pairs, e.g.
            ``"price:desc,product_name:asc"``. Unknown fields are ignored.
        limit: Page size (at least 1).
        page: 1-indexed page number.
    """

    sort_by: str | None = None
    limit: int = 10
    page: int = 1

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def sort_fields(self) -> list[tuple[str, bool]]:
        """Parse ``sort_by`` into ``(field, descending)`` pairs.

        Example:
            >>> QueryOptions(sort_by="price:desc,name").sort_fields()
            [('price', True), ('name', False)]
        """
        if not self.sort_by:
            return []
        fields: list[tuple[str, bool]] = []
        for part in self.sort_by.split(","):
            name, _, order = part.strip().partition(":")
            if name:
                fields.append((name, order.lower() == "desc"))
        return fields


@dataclass(frozen=True, slots=True, kw_only=True)
class Page(Generic[T]):
    """One page of results plus totals.

    Attributes:
        results: Items on this page.
        page: Current page number.
        limit: Page size.
        total_results: Number of matching items across all pages.
    """

    results: list[T]
    page: int
    limit: int
    total_results: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total_results / self.limit) if self.limit else 0
