"""Password hashing port."""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """One-way password hashing and verification.

    Usage:
        password_hash = password_service.hash_password("password1")
        password_service.verify_password("password1", password_hash)  # True
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password (salted, never reversible)."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True on match. False on mismatch or malformed hash (no exception).
        """
        ...
