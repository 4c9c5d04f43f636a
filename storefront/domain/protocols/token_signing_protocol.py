"""Signed token port.

Signs and validates the compact tokens handed to clients. Persistence and
revocation live in the token repository, not here.
"""

from datetime import datetime
from typing import Any, Protocol
from uuid import UUID

from storefront.core.errors import DomainError
from storefront.core.result import Result
from storefront.domain.enums import TokenType


class TokenSigningProtocol(Protocol):
    """Issue and validate signed, expiring tokens.

    Usage:
        token = signer.sign(user_id=user.id, token_type=TokenType.REFRESH, expires=exp)
        match signer.decode(token, expected_type=TokenType.REFRESH):
            case Success(value=claims):
                user_id = claims["sub"]
            case Failure(error=error):
                ...
    """

    def sign(
        self,
        *,
        user_id: UUID,
        token_type: TokenType,
        expires: datetime,
        extra_claims: dict[str, Any] | None = None,
    ) -> str:
        """Sign a token for ``user_id`` expiring at ``expires``.

        Args:
            user_id: Subject (``sub`` claim).
            token_type: Value of the ``type`` claim.
            expires: Expiry timestamp (``exp`` claim).
            extra_claims: Additional claims, e.g. ``email`` and ``roles``.

        Returns:
            Encoded token string.
        """
        ...

    def decode(
        self, token: str, *, expected_type: TokenType
    ) -> Result[dict[str, Any], DomainError]:
        """Validate signature, expiry and ``type`` claim.

        Returns:
            Success(claims) or Failure(AuthenticationError).
        """
        ...
