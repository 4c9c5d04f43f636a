"""User administration commands."""

from dataclasses import dataclass
from uuid import UUID

from storefront.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Create a user account on behalf of an administrator.

    Example:
        >>> command = CreateUser(
        ...     email="staff@example.com",
        ...     password="password1",
        ...     name="Staff",
        ...     role=UserRole.ADMIN,
        ... )
    """

    email: str
    password: str
    name: str
    role: UserRole = UserRole.USER


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Change profile fields. ``None`` leaves a field unchanged.

    Attributes:
        user_id: Account to update.
        password: New plaintext password, hashed by the handler.
    """

    user_id: UUID
    email: str | None = None
    password: str | None = None
    name: str | None = None
    role: UserRole | None = None
    avatar: str | None = None
    phone_number: str | None = None
    address: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    user_id: UUID
