"""Authentication commands (CQRS write operations).

Commands are immutable, keyword-only data containers. Values arrive already
validated by the request schemas; handlers hold the business logic and
return ``Result`` values.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register a new customer account and sign it in.

    Attributes:
        email: Normalized email address.
        password: Plaintext password (hashed by the handler).
        name: Display name.

    Example:
        >>> command = RegisterUser(
        ...     email="jane@example.com",
        ...     password="password1",
        ...     name="Jane",
        ... )
        >>> result = await handler.handle(command)
    """

    email: str
    password: str
    name: str


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange email and password for a token pair."""

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Revoke a refresh token.

    Attributes:
        refresh_token: Refresh token value to delete.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class RefreshTokens:
    """Rotate a refresh token: consume it and issue a new pair."""

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class ForgotPassword:
    """Email a reset-password link if an account uses ``email``."""

    email: str


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Set a new password using a reset-password token.

    Attributes:
        token: Reset-password token from the emailed link.
        new_password: Plaintext password (hashed by the handler).
    """

    token: str
    new_password: str


@dataclass(frozen=True, kw_only=True)
class SendVerificationEmail:
    """Email a verification link to the signed-in user."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Mark an email address verified using a verify-email token."""

    token: str


@dataclass(frozen=True, kw_only=True)
class SendOtp:
    """Generate and email a one-time code for ``email``."""

    email: str


@dataclass(frozen=True, kw_only=True)
class ConfirmOtp:
    """Confirm a one-time code previously sent to ``email``.

    Attributes:
        email: Address the code was sent to.
        code: Six digit code typed by the user.
    """

    email: str
    code: str
