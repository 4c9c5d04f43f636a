"""Token kinds issued by the auth token service."""

from enum import Enum


class TokenType(str, Enum):
    """Value of the ``type`` claim in every signed token.

    Only ``REFRESH``, ``RESET_PASSWORD`` and ``VERIFY_EMAIL`` tokens are
    persisted. ``ACCESS`` tokens are stateless.
    """

    ACCESS = "access"
    REFRESH = "refresh"
    RESET_PASSWORD = "resetPassword"
    VERIFY_EMAIL = "verifyEmail"
