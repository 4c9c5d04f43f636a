"""Authentication request/response schemas.

Endpoints:
    POST /v1/auth/register                 - Register
    POST /v1/auth/login                    - Login
    POST /v1/auth/logout                   - Logout (delete refresh token)
    POST /v1/auth/refresh-tokens           - Rotate token pair
    POST /v1/auth/forgot-password          - Email a reset link
    POST /v1/auth/reset-password?token=    - Set a new password
    POST /v1/auth/send-verification-email  - Email a verification link
    POST /v1/auth/verify-email?token=      - Mark email verified
    POST /v1/auth/send-otp                 - Email a one-time code
    POST /v1/auth/confirm-otp              - Confirm a one-time code
"""

from datetime import datetime

from pydantic import Field

from storefront.domain.entities import AuthTokenPair
from storefront.domain.types import DisplayName, Email, OtpCode, Password
from storefront.schemas.common_schemas import ApiModel
from storefront.schemas.user_schemas import UserResponse


# =============================================================================
# Requests
# =============================================================================


class RegisterRequest(ApiModel):
    """Request schema for registration.

    POST /v1/auth/register
    Returns: 201 Created
    """

    email: Email
    password: Password
    name: DisplayName


class LoginRequest(ApiModel):
    """Request schema for login.

    Password strength is not re-checked here; a wrong password is a 401.
    """

    email: Email
    password: str = Field(..., min_length=1, max_length=128)


class RefreshTokenRequest(ApiModel):
    """Request schema for logout and token refresh."""

    refresh_token: str = Field(..., min_length=1, description="Refresh token value")


class ForgotPasswordRequest(ApiModel):
    email: Email


class ResetPasswordRequest(ApiModel):
    password: Password


class SendOtpRequest(ApiModel):
    email: Email


class ConfirmOtpRequest(ApiModel):
    email: Email
    code: OtpCode


# =============================================================================
# Responses
# =============================================================================


class TokenResponse(ApiModel):
    token: str
    expires: datetime


class AuthTokensResponse(ApiModel):
    """Access and refresh token pair."""

    access: TokenResponse
    refresh: TokenResponse


class AuthResponse(ApiModel):
    """User plus a fresh token pair (register, login, refresh)."""

    user: UserResponse
    tokens: AuthTokensResponse

    @classmethod
    def build(cls, user: object, tokens: AuthTokenPair) -> "AuthResponse":
        return cls(
            user=UserResponse.model_validate(user),
            tokens=AuthTokensResponse.model_validate(tokens),
        )
