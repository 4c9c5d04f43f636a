"""Send-OTP handler.

Generates a uniformly random six digit code (100000-999999), stores it for
the email with a fixed time to live (replacing any earlier code) and emails
it. Repeated requests simply restart the expiry window.
"""

import secrets
from collections.abc import Callable

from storefront.application.commands.auth_commands import SendOtp
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.domain.protocols import EmailProtocol, LoggerProtocol, OtpStoreProtocol

OTP_MIN = 100_000
OTP_MAX = 999_999


def generate_otp_code() -> str:
    """Return a cryptographically random code in [100000, 999999]."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


class SendOtpError:
    """Error messages."""

    STORE_FAILED = "Error sending email code"


class SendOtpHandler:
    """Handler for SendOtp command.

    Args:
        otp_store: Code store keyed by email.
        email_service: Delivers the code.
        logger: Structured logger.
        code_generator: Code source, replaceable in tests.
    """

    def __init__(
        self,
        otp_store: OtpStoreProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        code_generator: Callable[[], str] = generate_otp_code,
    ) -> None:
        self._otp_store = otp_store
        self._email_service = email_service
        self._logger = logger
        self._code_generator = code_generator

    async def handle(self, cmd: SendOtp) -> Result[None, ApplicationError]:
        """Handle SendOtp command.

        Returns:
            Success(None) once the code is stored and sent.
            Failure(ApplicationError) with INTERNAL_ERROR if the store fails.
        """
        code = self._code_generator()

        stored = await self._otp_store.issue(cmd.email, code)
        if isinstance(stored, Failure):
            self._logger.error("otp_store_failed", reason=stored.error.message)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.INTERNAL_ERROR,
                    message=SendOtpError.STORE_FAILED,
                    domain_error=stored.error,
                )
            )

        await self._email_service.send_otp_email(cmd.email, code)
        self._logger.info("otp_sent", ttl_seconds=self._otp_store.ttl_seconds)
        return Success(value=None)
