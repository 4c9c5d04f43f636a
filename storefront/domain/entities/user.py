"""User domain entity.

Pure business data, no framework dependencies. Persisted by the user
repository, never exposed with its password hash.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from storefront.domain.enums import UserRole


@dataclass
class User:
    """Registered account.

    Business Rules:
        - Email is unique across all users (case-insensitive).
        - Password is stored only as a bcrypt hash.
        - ``is_email_verified`` flips to True once a verify-email token is
          consumed and never flips back.

    Attributes:
        id: Unique user identifier (UUIDv7).
        email: Lowercased email address.
        password_hash: bcrypt hash of the password.
        name: Display name.
        role: Authorization role.
        is_email_verified: Whether the email address has been confirmed.
        avatar: Optional avatar URL.
        phone_number: Optional phone number (digits only).
        address: Optional postal address.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="jane@example.com",
        ...     password_hash="$2b$12$...",
        ...     name="Jane",
        ... )
        >>> user.is_admin()
        False
    """

    id: UUID
    email: str
    password_hash: str
    name: str
    role: UserRole = UserRole.USER
    is_email_verified: bool = False
    avatar: str | None = None
    phone_number: str | None = None
    address: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_admin(self) -> bool:
        """Check whether the user holds the admin role."""
        return self.role == UserRole.ADMIN

    def mark_email_verified(self) -> None:
        """Record that the user proved ownership of their email address.

        Side Effects:
            - Sets is_email_verified to True
            - Refreshes updated_at
        """
        self.is_email_verified = True
        self.updated_at = datetime.now(UTC)

    def change_password_hash(self, password_hash: str) -> None:
        """Replace the stored password hash.

        Args:
            password_hash: New bcrypt hash (never plaintext).
        """
        self.password_hash = password_hash
        self.updated_at = datetime.now(UTC)
