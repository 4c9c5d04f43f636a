"""Logout handler.

Deletes the presented refresh token. A token that is unknown, already used or
blacklisted is reported as NOT_FOUND.
"""

from storefront.application.commands.auth_commands import LogoutUser
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.domain.enums import TokenType
from storefront.domain.protocols import LoggerProtocol, TokenRepository


class LogoutError:
    """Logout-specific error messages."""

    TOKEN_NOT_FOUND = "Not found"


class LogoutUserHandler:
    """Handler for LogoutUser command."""

    def __init__(self, token_repo: TokenRepository, logger: LoggerProtocol) -> None:
        self._token_repo = token_repo
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[None, ApplicationError]:
        """Handle LogoutUser command.

        Returns:
            Success(None) once the token is deleted.
            Failure(ApplicationError) with NOT_FOUND if no live token matches.
        """
        record = await self._token_repo.find_valid(cmd.refresh_token, TokenType.REFRESH)
        if record is None or not await self._token_repo.delete(record.id):
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=LogoutError.TOKEN_NOT_FOUND,
                )
            )

        self._logger.info("logout_succeeded", user_id=str(record.user_id))
        return Success(value=None)
