"""Confirm-OTP handler.

The stored code is compared and deleted in one atomic store operation, so two
concurrent confirmations of the same code cannot both succeed.

Outcomes are kept distinct:
- wrong, expired or already used code -> UNAUTHORIZED "Invalid or expired code"
- store unavailable -> INTERNAL_ERROR "Error confirming email code"
"""

from storefront.application.commands.auth_commands import ConfirmOtp
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.domain.protocols import LoggerProtocol, OtpStoreProtocol


class ConfirmOtpError:
    """Error messages."""

    INVALID_OR_EXPIRED = "Invalid or expired code"
    CONFIRMATION_FAILED = "Error confirming email code"


class ConfirmOtpHandler:
    """Handler for ConfirmOtp command."""

    def __init__(self, otp_store: OtpStoreProtocol, logger: LoggerProtocol) -> None:
        self._otp_store = otp_store
        self._logger = logger

    async def handle(self, cmd: ConfirmOtp) -> Result[None, ApplicationError]:
        """Handle ConfirmOtp command.

        Returns:
            Success(None) when the code matched (and is now consumed).
            Failure(ApplicationError) with UNAUTHORIZED or INTERNAL_ERROR.
        """
        result = await self._otp_store.consume(cmd.email, cmd.code)

        match result:
            case Success(value=True):
                self._logger.info("otp_confirmed")
                return Success(value=None)
            case Success(value=_):
                self._logger.warning("otp_rejected")
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.UNAUTHORIZED,
                        message=ConfirmOtpError.INVALID_OR_EXPIRED,
                    )
                )
            case Failure(error=error):
                self._logger.error("otp_confirm_failed", reason=error.message)
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.INTERNAL_ERROR,
                        message=ConfirmOtpError.CONFIRMATION_FAILED,
                        domain_error=error,
                    )
                )
