"""JWT token service (adapter).

Implements TokenSigningProtocol using PyJWT with HMAC-SHA256.

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Every token carries a ``type`` claim, so a refresh token can never be
      replayed as a reset-password token and vice versa
    - Unique JWT ID (jti) per token, so two tokens issued in the same second
      never collide in the token store
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from storefront.core.enums import ErrorCode
from storefront.core.errors import AuthenticationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.enums import TokenType


class JWTService:
    """JWT signing and validation service.

    Usage:
        signer = JWTService(secret_key=settings.secret_key)
        token = signer.sign(
            user_id=user.id,
            token_type=TokenType.ACCESS,
            expires=expires,
            extra_claims={"email": user.email, "roles": [user.role.value]},
        )
        result = signer.decode(token, expected_type=TokenType.ACCESS)
    """

    def __init__(self, secret_key: str) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing. MUST be at least
                256 bits (32 bytes).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key.encode("utf-8")) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = "HS256"

    def sign(
        self,
        *,
        user_id: UUID,
        token_type: TokenType,
        expires: datetime,
        extra_claims: dict[str, Any] | None = None,
    ) -> str:
        """Sign a token.

        Args:
            user_id: Subject of the token.
            token_type: Token kind, stored in the ``type`` claim.
            expires: Absolute expiry.
            extra_claims: Additional claims merged into the payload.

        Returns:
            Encoded JWT (header.payload.signature).

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.sign(
            ...     user_id=uuid7(),
            ...     token_type=TokenType.REFRESH,
            ...     expires=datetime.now(UTC) + timedelta(days=30),
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "type": token_type.value,
            "iat": int(now.timestamp()),
            "exp": int(expires.timestamp()),
            "jti": str(uuid7()),
        }
        if extra_claims:
            payload.update(extra_claims)

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def decode(
        self, token: str, *, expected_type: TokenType
    ) -> Result[dict[str, Any], AuthenticationError]:
        """Validate a token and return its claims.

        Checks signature, expiry (``exp``), presence of ``sub``, and that the
        ``type`` claim equals ``expected_type``.

        Returns:
            Success(claims) if valid, Failure(AuthenticationError) otherwise.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "type"]},
            )
        except ExpiredSignatureError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Token has expired",
                )
            )
        except InvalidTokenError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Token is invalid",
                )
            )

        if payload.get("type") != expected_type.value:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_TYPE_MISMATCH,
                    message="Token type mismatch",
                    details={"expected": expected_type.value},
                )
            )
        return Success(value=payload)
