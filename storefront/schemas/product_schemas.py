"""Product request/response schemas.

Creation is a multipart form handled directly by the router; only the JSON
update body and the response are modelled here.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import Field, PlainSerializer, model_validator

from storefront.schemas.common_schemas import ApiModel

Price = Annotated[
    Decimal,
    Field(ge=0, max_digits=12, decimal_places=2, examples=["89.90"]),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductResponse(ApiModel):
    id: UUID
    product_name: str
    description_product: str
    price: Price
    brand_id: UUID
    thumbnail: str | None = None
    product_image_detail: list[str] = Field(default_factory=list)
    size: str | None = None
    type: str | None = None
    quantity: int
    status: str | None = None
    created_at: datetime
    updated_at: datetime


class UpdateProductRequest(ApiModel):
    """Request schema for product update.

    PATCH /v1/products/{productId}
    At least one field is required. Image fields take URLs.
    """

    product_name: str | None = Field(default=None, min_length=1, max_length=200)
    description_product: str | None = Field(default=None, max_length=5000)
    price: Price | None = None
    brand_id: UUID | None = None
    thumbnail: str | None = Field(default=None, max_length=500)
    product_image_detail: list[str] | None = Field(default=None, max_length=5)
    size: str | None = Field(default=None, max_length=50)
    type: str | None = Field(default=None, max_length=50)
    quantity: int | None = Field(default=None, ge=0)
    status: str | None = Field(default=None, max_length=50)

    @model_validator(mode="after")
    def require_one_field(self) -> "UpdateProductRequest":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self
