"""User request/response schemas.

Endpoints:
    POST   /v1/users            - Create user
    GET    /v1/users            - List users (filters, sort, pagination)
    GET    /v1/users/{userId}   - Get user
    PATCH  /v1/users/{userId}   - Update user
    DELETE /v1/users/{userId}   - Delete user
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, model_validator

from storefront.domain.enums import UserRole
from storefront.domain.types import DisplayName, Email, Password, PhoneNumber
from storefront.schemas.common_schemas import ApiModel


class UserResponse(ApiModel):
    """Public view of a user. Never includes the password hash."""

    id: UUID
    email: str
    name: str
    role: UserRole
    is_email_verified: bool
    avatar: str | None = None
    phone_number: str | None = None
    address: str | None = None
    created_at: datetime
    updated_at: datetime


class CreateUserRequest(ApiModel):
    """Request schema for admin user creation.

    POST /v1/users
    Returns: 201 Created
    """

    email: Email
    password: Password
    name: DisplayName
    role: UserRole = Field(default=UserRole.USER, description="Account role")


class UpdateUserRequest(ApiModel):
    """Request schema for partial user update.

    PATCH /v1/users/{userId}
    At least one field is required.
    """

    email: Email | None = None
    password: Password | None = None
    name: DisplayName | None = None
    role: UserRole | None = None
    avatar: str | None = Field(default=None, max_length=500)
    phone_number: PhoneNumber | None = None
    address: str | None = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def require_one_field(self) -> "UpdateUserRequest":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self
