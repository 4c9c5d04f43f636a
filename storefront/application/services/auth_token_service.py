"""Auth token service.

Issues and verifies every token kind and keeps the token store in step:

- access: signed, stateless, never stored
- refresh, resetPassword, verifyEmail: signed and stored; a token is accepted
  only while its stored record exists, is not blacklisted and has not expired

Verification failures of any kind come back as one ``AuthenticationError``
so callers can collapse them into a single client-facing message.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from storefront.core.enums import ErrorCode
from storefront.core.errors import AuthenticationError, NotFoundError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import AuthTokenPair, IssuedToken, TokenRecord, User
from storefront.domain.enums import TokenType
from storefront.domain.protocols import (
    TokenRepository,
    TokenSigningProtocol,
    UserRepository,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenLifetimes:
    """Lifetime of each token kind."""

    access: timedelta = timedelta(minutes=30)
    refresh: timedelta = timedelta(days=30)
    reset_password: timedelta = timedelta(minutes=10)
    verify_email: timedelta = timedelta(minutes=10)


class AuthTokenService:
    """Generate and verify auth tokens.

    Dependencies (injected via constructor):
        - TokenSigningProtocol: signs and decodes token values
        - TokenRepository: stores refresh / reset / verify tokens
        - UserRepository: resolves the owner for reset-password tokens

    Example:
        >>> tokens = await service.generate_auth_tokens(user)
        >>> result = await service.verify_token(tokens.refresh.token, TokenType.REFRESH)
    """

    def __init__(
        self,
        *,
        signer: TokenSigningProtocol,
        token_repo: TokenRepository,
        user_repo: UserRepository,
        lifetimes: TokenLifetimes | None = None,
    ) -> None:
        self._signer = signer
        self._token_repo = token_repo
        self._user_repo = user_repo
        self._lifetimes = lifetimes or TokenLifetimes()

    async def generate_auth_tokens(self, user: User) -> AuthTokenPair:
        """Issue an access token and a stored refresh token for ``user``.

        Returns:
            AuthTokenPair with both values and their expiries.
        """
        now = datetime.now(UTC)

        access_expires = now + self._lifetimes.access
        access_token = self._signer.sign(
            user_id=user.id,
            token_type=TokenType.ACCESS,
            expires=access_expires,
            extra_claims={"email": user.email, "roles": [user.role.value]},
        )

        refresh_expires = now + self._lifetimes.refresh
        refresh_token = await self._issue_stored(
            user.id, TokenType.REFRESH, refresh_expires
        )

        return AuthTokenPair(
            access=IssuedToken(token=access_token, expires=access_expires),
            refresh=IssuedToken(token=refresh_token, expires=refresh_expires),
        )

    async def generate_reset_password_token(
        self, email: str
    ) -> Result[str, NotFoundError]:
        """Issue a reset-password token for the account owning ``email``.

        Returns:
            Success(token) or Failure(NotFoundError) when no user has the email.
        """
        user = await self._user_repo.find_by_email(email)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="No users found with this email",
                    resource_type="User",
                    resource_id=email,
                )
            )
        expires = datetime.now(UTC) + self._lifetimes.reset_password
        token = await self._issue_stored(user.id, TokenType.RESET_PASSWORD, expires)
        return Success(value=token)

    async def generate_verify_email_token(self, user: User) -> str:
        """Issue a verify-email token for ``user``."""
        expires = datetime.now(UTC) + self._lifetimes.verify_email
        return await self._issue_stored(user.id, TokenType.VERIFY_EMAIL, expires)

    async def verify_token(
        self, value: str, token_type: TokenType
    ) -> Result[TokenRecord, AuthenticationError]:
        """Verify a stored token.

        Checks, in order: signature and ``exp``, ``type`` claim, a stored
        non-blacklisted record owned by ``sub``, and that the record is still
        usable (not blacklisted, not past its stored expiry).

        Returns:
            Success(TokenRecord) or Failure(AuthenticationError).
        """
        match self._signer.decode(value, expected_type=token_type):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=claims):
                pass

        try:
            user_id = UUID(str(claims["sub"]))
        except ValueError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Token subject is not a user id",
                )
            )

        record = await self._token_repo.find_valid(value, token_type, user_id=user_id)
        if record is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_NOT_FOUND,
                    message="Token not found",
                )
            )
        if not record.is_usable():
            expired = record.is_expired()
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED if expired else ErrorCode.TOKEN_INVALID,
                    message="Token has expired" if expired else "Token is blacklisted",
                )
            )
        return Success(value=record)

    async def _issue_stored(
        self, user_id: UUID, token_type: TokenType, expires: datetime
    ) -> str:
        token = self._signer.sign(user_id=user_id, token_type=token_type, expires=expires)
        await self._token_repo.save(
            TokenRecord(
                id=uuid7(),
                token=token,
                user_id=user_id,
                type=token_type,
                expires_at=expires,
            )
        )
        return token
