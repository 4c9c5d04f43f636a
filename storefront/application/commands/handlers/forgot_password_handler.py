"""Forgot-password handler.

Issues a reset-password token and emails the reset link. An unknown email is
not an error: the caller gets the same response either way, so the endpoint
cannot be used to discover accounts.
"""

from urllib.parse import urlencode

from storefront.application.commands.auth_commands import ForgotPassword
from storefront.application.errors import ApplicationError
from storefront.application.services import AuthTokenService
from storefront.core.result import Failure, Result, Success
from storefront.domain.protocols import EmailProtocol, LoggerProtocol


class ForgotPasswordHandler:
    """Handler for ForgotPassword command.

    Args:
        token_service: Issues the reset-password token.
        email_service: Delivers the reset link.
        frontend_url: Client base URL; the link is
            ``{frontend_url}/reset-password?token=...``.
        logger: Structured logger.
    """

    def __init__(
        self,
        token_service: AuthTokenService,
        email_service: EmailProtocol,
        frontend_url: str,
        logger: LoggerProtocol,
    ) -> None:
        self._token_service = token_service
        self._email_service = email_service
        self._frontend_url = frontend_url.rstrip("/")
        self._logger = logger

    async def handle(self, cmd: ForgotPassword) -> Result[None, ApplicationError]:
        """Handle ForgotPassword command. Always succeeds."""
        result = await self._token_service.generate_reset_password_token(cmd.email)
        if isinstance(result, Failure):
            self._logger.info("password_reset_skipped", reason="unknown_email")
            return Success(value=None)

        query = urlencode({"token": result.value})
        reset_url = f"{self._frontend_url}/reset-password?{query}"
        await self._email_service.send_reset_password_email(cmd.email, reset_url)
        self._logger.info("password_reset_requested")
        return Success(value=None)
