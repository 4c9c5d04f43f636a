"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol with bcrypt.

Security:
    - Salted, adaptive hash; cost factor comes from settings (default 12)
    - Constant-time verification
    - Input is truncated to bcrypt's 72-byte limit before hashing and
      verifying, so long passphrases behave identically in both paths
"""

import bcrypt

BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        password_service: PasswordHashingProtocol = get_password_service()
        password_hash = password_service.hash_password("password1")
        password_service.verify_password("password1", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: bcrypt log2 rounds. Each +1 doubles hashing time;
                12 is roughly 250ms. Tests use the minimum of 4.

        Raises:
            ValueError: If cost_factor is outside bcrypt's 4-31 range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            60 character hash in ``$2b$<cost>$<salt><hash>`` format. Each call
            yields a different hash because the salt is random.

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> service.hash_password("password1") != service.hash_password("password1")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash. False on mismatch or when the
            stored hash is not a bcrypt hash.
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError:
            return False
