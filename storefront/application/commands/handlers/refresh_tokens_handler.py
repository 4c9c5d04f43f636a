"""Refresh token rotation handler.

Flow:
1. Verify the refresh token (signature, expiry, type, stored record)
2. Resolve the owning user
3. Delete the consumed refresh token
4. Issue a new access + refresh pair

A refresh token works once. Replaying it after rotation fails because its
record is gone, and of two concurrent refreshes only the one whose delete
removes the row gets a new pair.
"""

from storefront.application.commands.auth_commands import RefreshTokens
from storefront.application.dtos import AuthenticatedUser
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.application.services import AuthTokenService
from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.enums import TokenType
from storefront.domain.protocols import LoggerProtocol, TokenRepository, UserRepository


class RefreshError:
    """Refresh-specific error messages."""

    PLEASE_AUTHENTICATE = "Please authenticate"


class RefreshTokensHandler:
    """Handler for RefreshTokens command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_repo: TokenRepository,
        token_service: AuthTokenService,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_repo = token_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(
        self, cmd: RefreshTokens
    ) -> Result[AuthenticatedUser, ApplicationError]:
        """Handle RefreshTokens command.

        Returns:
            Success(AuthenticatedUser) with the rotated pair.
            Failure(ApplicationError) with UNAUTHORIZED on any verification
            failure or when the user no longer exists.
        """
        verified = await self._token_service.verify_token(
            cmd.refresh_token, TokenType.REFRESH
        )
        if isinstance(verified, Failure):
            self._logger.warning("refresh_rejected", reason=verified.error.code.value)
            return self._unauthorized(verified.error)

        record = verified.value
        user = await self._user_repo.find_by_id(record.user_id)
        if user is None:
            self._logger.warning("refresh_rejected", reason="user_missing")
            return self._unauthorized()

        if not await self._token_repo.delete(record.id):
            self._logger.warning("refresh_rejected", reason="already_consumed")
            return self._unauthorized()

        tokens = await self._token_service.generate_auth_tokens(user)
        self._logger.info("tokens_refreshed", user_id=str(user.id))
        return Success(value=AuthenticatedUser(user=user, tokens=tokens))

    @staticmethod
    def _unauthorized(
        domain_error: DomainError | None = None,
    ) -> Failure[ApplicationError]:
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.UNAUTHORIZED,
                message=RefreshError.PLEASE_AUTHENTICATE,
                domain_error=domain_error,
            )
        )
