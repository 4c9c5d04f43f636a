"""Authentication handler dependency factories.

Request-scoped handler instances for authentication operations:
- Registration, login, logout
- Token refresh
- Password reset (request and confirm)
- Email verification (send and confirm)
- Email OTP (send and confirm)
"""

from fastapi import Depends

from storefront.application.commands.handlers import (
    ConfirmOtpHandler,
    ForgotPasswordHandler,
    LoginUserHandler,
    LogoutUserHandler,
    RefreshTokensHandler,
    RegisterUserHandler,
    ResetPasswordHandler,
    SendOtpHandler,
    SendVerificationEmailHandler,
    VerifyEmailHandler,
)
from storefront.application.services import AuthTokenService, TokenLifetimes
from storefront.core.config import get_settings
from storefront.core.container.infrastructure import (
    get_email_service,
    get_logger,
    get_otp_store,
    get_password_service,
    get_token_signer,
)
from storefront.core.container.repositories import (
    get_token_repository,
    get_user_repository,
)
from storefront.domain.protocols import TokenRepository, UserRepository


def get_token_lifetimes() -> TokenLifetimes:
    """Token lifetimes from settings."""
    from datetime import timedelta

    settings = get_settings()
    return TokenLifetimes(
        access=timedelta(minutes=settings.access_token_expire_minutes),
        refresh=timedelta(days=settings.refresh_token_expire_days),
        reset_password=timedelta(minutes=settings.reset_password_token_expire_minutes),
        verify_email=timedelta(minutes=settings.verify_email_token_expire_minutes),
    )


async def get_auth_token_service(
    token_repo: TokenRepository = Depends(get_token_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthTokenService:
    """Get token issuing/verifying service (request-scoped).

    Shares the request session with the handler that uses it.
    """
    return AuthTokenService(
        signer=get_token_signer(),
        token_repo=token_repo,
        user_repo=user_repo,
        lifetimes=get_token_lifetimes(),
    )


async def get_register_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    token_service: AuthTokenService = Depends(get_auth_token_service),
) -> RegisterUserHandler:
    """Get RegisterUser command handler (request-scoped).

    Usage:
        @router.post("/auth/register")
        async def register(
            handler: RegisterUserHandler = Depends(get_register_user_handler),
        ):
            result = await handler.handle(command)
    """
    return RegisterUserHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        token_service=token_service,
        logger=get_logger(),
    )


async def get_login_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    token_service: AuthTokenService = Depends(get_auth_token_service),
) -> LoginUserHandler:
    """Get LoginUser command handler (request-scoped)."""
    return LoginUserHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        token_service=token_service,
        logger=get_logger(),
    )


async def get_logout_user_handler(
    token_repo: TokenRepository = Depends(get_token_repository),
) -> LogoutUserHandler:
    """Get LogoutUser command handler (request-scoped)."""
    return LogoutUserHandler(token_repo=token_repo, logger=get_logger())


async def get_refresh_tokens_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    token_repo: TokenRepository = Depends(get_token_repository),
    token_service: AuthTokenService = Depends(get_auth_token_service),
) -> RefreshTokensHandler:
    """Get RefreshTokens command handler (request-scoped)."""
    return RefreshTokensHandler(
        user_repo=user_repo,
        token_repo=token_repo,
        token_service=token_service,
        logger=get_logger(),
    )


async def get_forgot_password_handler(
    token_service: AuthTokenService = Depends(get_auth_token_service),
) -> ForgotPasswordHandler:
    """Get ForgotPassword command handler (request-scoped)."""
    return ForgotPasswordHandler(
        token_service=token_service,
        email_service=get_email_service(),
        frontend_url=get_settings().frontend_url,
        logger=get_logger(),
    )


async def get_reset_password_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    token_repo: TokenRepository = Depends(get_token_repository),
    token_service: AuthTokenService = Depends(get_auth_token_service),
) -> ResetPasswordHandler:
    """Get ResetPassword command handler (request-scoped)."""
    return ResetPasswordHandler(
        user_repo=user_repo,
        token_repo=token_repo,
        token_service=token_service,
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_send_verification_email_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    token_service: AuthTokenService = Depends(get_auth_token_service),
) -> SendVerificationEmailHandler:
    """Get SendVerificationEmail command handler (request-scoped)."""
    return SendVerificationEmailHandler(
        user_repo=user_repo,
        token_service=token_service,
        email_service=get_email_service(),
        frontend_url=get_settings().frontend_url,
        logger=get_logger(),
    )


async def get_verify_email_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    token_repo: TokenRepository = Depends(get_token_repository),
    token_service: AuthTokenService = Depends(get_auth_token_service),
) -> VerifyEmailHandler:
    """Get VerifyEmail command handler (request-scoped)."""
    return VerifyEmailHandler(
        user_repo=user_repo,
        token_repo=token_repo,
        token_service=token_service,
        logger=get_logger(),
    )


def get_send_otp_handler() -> SendOtpHandler:
    """Get SendOtp command handler. Needs no database session."""
    return SendOtpHandler(
        otp_store=get_otp_store(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


def get_confirm_otp_handler() -> ConfirmOtpHandler:
    """Get ConfirmOtp command handler. Needs no database session."""
    return ConfirmOtpHandler(otp_store=get_otp_store(), logger=get_logger())
