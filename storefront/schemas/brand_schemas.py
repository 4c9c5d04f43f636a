"""Brand request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, model_validator

from storefront.schemas.common_schemas import ApiModel


class BrandResponse(ApiModel):
    id: UUID
    brand_name: str
    brand_image: str | None = None
    description: str | None = None
    created_at: datetime
    updated_at: datetime


class CreateBrandRequest(ApiModel):
    """Request schema for brand creation.

    POST /v1/brands
    Returns: 201 Created
    """

    brand_name: str = Field(..., min_length=1, max_length=100, examples=["Acme"])
    brand_image: str | None = Field(default=None, max_length=500)
    description: str | None = Field(default=None, max_length=2000)


class UpdateBrandRequest(ApiModel):
    """Request schema for brand update. At least one field is required."""

    brand_name: str | None = Field(default=None, min_length=1, max_length=100)
    brand_image: str | None = Field(default=None, max_length=500)
    description: str | None = Field(default=None, max_length=2000)

    @model_validator(mode="after")
    def require_one_field(self) -> "UpdateBrandRequest":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self
