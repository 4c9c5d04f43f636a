"""HTTP request/response schemas (pydantic)."""

from storefront.schemas.auth_schemas import (
    AuthResponse,
    AuthTokensResponse,
    ConfirmOtpRequest,
    ForgotPasswordRequest,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    ResetPasswordRequest,
    SendOtpRequest,
    TokenResponse,
)
from storefront.schemas.brand_schemas import (
    BrandResponse,
    CreateBrandRequest,
    UpdateBrandRequest,
)
from storefront.schemas.common_schemas import ApiModel, ApiResponse, PageResponse
from storefront.schemas.product_schemas import ProductResponse, UpdateProductRequest
from storefront.schemas.user_schemas import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "ApiModel",
    "ApiResponse",
    "AuthResponse",
    "AuthTokensResponse",
    "BrandResponse",
    "ConfirmOtpRequest",
    "CreateBrandRequest",
    "CreateUserRequest",
    "ForgotPasswordRequest",
    "LoginRequest",
    "PageResponse",
    "ProductResponse",
    "RefreshTokenRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    "SendOtpRequest",
    "TokenResponse",
    "UpdateBrandRequest",
    "UpdateProductRequest",
    "UserResponse",
]
