"""Common schemas used across API endpoints.

Provides the response envelope, the paginated result wrapper and the camelCase
base model shared by every request and response schema.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.domain.entities import Page

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(ApiModel, Generic[T]):
    """Standard response envelope.

    Attributes:
        code: HTTP status code, repeated in the body.
        data: Payload, or null on failure.
        message: Human-readable outcome.
        success: True for 2xx responses.

    Example:
        >>> ApiResponse[BrandResponse](code=201, data=brand, message="Brand created")
    """

    code: int = Field(..., description="HTTP status code")
    data: T | None = Field(default=None, description="Response payload")
    message: str = Field(default="", description="Outcome message")
    success: bool = Field(default=True, description="Whether the request succeeded")


class PageResponse(ApiModel, Generic[T]):
    """One page of a list endpoint.

    Attributes:
        results: Items on this page.
        page: Current page number (1-indexed).
        limit: Page size.
        total_pages: Number of pages.
        total_results: Matching items across all pages.
    """

    results: list[T]
    page: int
    limit: int
    total_pages: int
    total_results: int

    @classmethod
    def from_page(cls, page: Page, item_schema: type[BaseModel]) -> "PageResponse":
        """Build from a domain Page, converting each item with ``item_schema``."""
        return cls(
            results=[item_schema.model_validate(item) for item in page.results],
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
            total_results=page.total_results,
        )
