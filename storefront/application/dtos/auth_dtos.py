"""Auth result DTOs returned by handlers."""

from dataclasses import dataclass

from storefront.domain.entities import AuthTokenPair, User


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticatedUser:
    """User plus a freshly issued token pair.

    Returned by registration, login and refresh.
    """

    user: User
    tokens: AuthTokenPair
