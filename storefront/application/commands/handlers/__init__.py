"""Command handlers."""

from storefront.application.commands.handlers.brand_handlers import (
    CreateBrandHandler,
    DeleteBrandHandler,
    UpdateBrandHandler,
)
from storefront.application.commands.handlers.confirm_otp_handler import (
    ConfirmOtpHandler,
)
from storefront.application.commands.handlers.forgot_password_handler import (
    ForgotPasswordHandler,
)
from storefront.application.commands.handlers.login_user_handler import (
    LoginUserHandler,
)
from storefront.application.commands.handlers.logout_user_handler import (
    LogoutUserHandler,
)
from storefront.application.commands.handlers.product_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from storefront.application.commands.handlers.refresh_tokens_handler import (
    RefreshTokensHandler,
)
from storefront.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from storefront.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from storefront.application.commands.handlers.send_otp_handler import (
    SendOtpHandler,
    generate_otp_code,
)
from storefront.application.commands.handlers.send_verification_email_handler import (
    SendVerificationEmailHandler,
)
from storefront.application.commands.handlers.user_handlers import (
    CreateUserHandler,
    DeleteUserHandler,
    UpdateUserHandler,
)
from storefront.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)

__all__ = [
    "ConfirmOtpHandler",
    "CreateBrandHandler",
    "CreateProductHandler",
    "CreateUserHandler",
    "DeleteBrandHandler",
    "DeleteProductHandler",
    "DeleteUserHandler",
    "ForgotPasswordHandler",
    "LoginUserHandler",
    "LogoutUserHandler",
    "RefreshTokensHandler",
    "RegisterUserHandler",
    "ResetPasswordHandler",
    "SendOtpHandler",
    "SendVerificationEmailHandler",
    "UpdateBrandHandler",
    "UpdateProductHandler",
    "UpdateUserHandler",
    "VerifyEmailHandler",
    "generate_otp_code",
]
