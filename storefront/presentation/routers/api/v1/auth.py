"""Auth resource handlers.

Handlers:
    register                - POST /auth/register
    login                   - POST /auth/login
    logout                  - POST /auth/logout
    refresh_tokens          - POST /auth/refresh-tokens
    forgot_password         - POST /auth/forgot-password
    reset_password          - POST /auth/reset-password?token=
    send_verification_email - POST /auth/send-verification-email
    verify_email            - POST /auth/verify-email?token=
    send_otp                - POST /auth/send-otp
    confirm_otp             - POST /auth/confirm-otp
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from storefront.application.commands.auth_commands import (
    ConfirmOtp,
    ForgotPassword,
    LoginUser,
    LogoutUser,
    RefreshTokens,
    RegisterUser,
    ResetPassword,
    SendOtp,
    SendVerificationEmail,
    VerifyEmail,
)
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
from storefront.core.container import (
    get_confirm_otp_handler,
    get_forgot_password_handler,
    get_login_user_handler,
    get_logout_user_handler,
    get_refresh_tokens_handler,
    get_register_user_handler,
    get_reset_password_handler,
    get_send_otp_handler,
    get_send_verification_email_handler,
    get_verify_email_handler,
)
from storefront.core.result import Failure, Success
from storefront.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from storefront.presentation.routers.api.v1.errors import ErrorResponseBuilder
from storefront.schemas import (
    ApiResponse,
    AuthResponse,
    ConfirmOtpRequest,
    ForgotPasswordRequest,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    ResetPasswordRequest,
    SendOtpRequest,
)

auth_router = APIRouter(prefix="/auth", tags=["Auth"])


def _no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@auth_router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[AuthResponse],
)
async def register(
    request: Request,
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> ApiResponse[AuthResponse] | JSONResponse:
    """Register a user and return it with a fresh token pair.

    POST /v1/auth/register -> 201 Created, 400 if the email is taken.
    """
    result = await handler.handle(
        RegisterUser(email=data.email, password=data.password, name=data.name)
    )

    match result:
        case Success(value=authenticated):
            return ApiResponse(
                code=status.HTTP_201_CREATED,
                data=AuthResponse.build(authenticated.user, authenticated.tokens),
                message="User registered successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@auth_router.post("/login", response_model=ApiResponse[AuthResponse])
async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> ApiResponse[AuthResponse] | JSONResponse:
    """Log in with email and password.

    POST /v1/auth/login -> 200 OK, 401 "Incorrect email or password".
    """
    result = await handler.handle(LoginUser(email=data.email, password=data.password))

    match result:
        case Success(value=authenticated):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=AuthResponse.build(authenticated.user, authenticated.tokens),
                message="Login successful",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@auth_router.post(
    "/logout", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def logout(
    request: Request,
    data: RefreshTokenRequest,
    handler: LogoutUserHandler = Depends(get_logout_user_handler),
) -> Response:
    """Delete a refresh token. 404 if no live token matches."""
    result = await handler.handle(LogoutUser(refresh_token=data.refresh_token))

    match result:
        case Success():
            return _no_content()
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@auth_router.post("/refresh-tokens", response_model=ApiResponse[AuthResponse])
async def refresh_tokens(
    request: Request,
    data: RefreshTokenRequest,
    handler: RefreshTokensHandler = Depends(get_refresh_tokens_handler),
) -> ApiResponse[AuthResponse] | JSONResponse:
    """Exchange a refresh token for a new pair. The old one stops working."""
    result = await handler.handle(RefreshTokens(refresh_token=data.refresh_token))

    match result:
        case Success(value=authenticated):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=AuthResponse.build(authenticated.user, authenticated.tokens),
                message="Tokens refreshed",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@auth_router.post(
    "/forgot-password", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def forgot_password(
    request: Request,
    data: ForgotPasswordRequest,
    handler: ForgotPasswordHandler = Depends(get_forgot_password_handler),
) -> Response:
    """Email a reset link. Always 204, whether or not the email is registered."""
    result = await handler.handle(ForgotPassword(email=data.email))

    match result:
        case Success():
            return _no_content()
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@auth_router.post(
    "/reset-password", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def reset_password(
    request: Request,
    data: ResetPasswordRequest,
    token: str = Query(..., min_length=1, description="Reset password token"),
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> Response:
    """Set a new password using a reset token from the email link."""
    result = await handler.handle(ResetPassword(token=token, new_password=data.password))

    match result:
        case Success():
            return _no_content()
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@auth_router.post(
    "/send-verification-email",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def send_verification_email(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    handler: SendVerificationEmailHandler = Depends(
        get_send_verification_email_handler
    ),
) -> Response:
    """Email a verification link to the authenticated user."""
    result = await handler.handle(SendVerificationEmail(user_id=current_user.user_id))

    match result:
        case Success():
            return _no_content()
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@auth_router.post(
    "/verify-email", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def verify_email(
    request: Request,
    token: str = Query(..., min_length=1, description="Verify email token"),
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> Response:
    """Mark the token owner's email as verified."""
    result = await handler.handle(VerifyEmail(token=token))

    match result:
        case Success():
            return _no_content()
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@auth_router.post(
    "/send-otp", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def send_otp(
    request: Request,
    data: SendOtpRequest,
    handler: SendOtpHandler = Depends(get_send_otp_handler),
) -> Response:
    """Email a six digit one-time code."""
    result = await handler.handle(SendOtp(email=data.email))

    match result:
        case Success():
            return _no_content()
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@auth_router.post(
    "/confirm-otp", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def confirm_otp(
    request: Request,
    data: ConfirmOtpRequest,
    handler: ConfirmOtpHandler = Depends(get_confirm_otp_handler),
) -> Response:
    """Confirm a one-time code. A code can be confirmed once.

    401 "Invalid or expired code" on mismatch, 500 if the code store fails.
    """
    result = await handler.handle(ConfirmOtp(email=data.email, code=data.code))

    match result:
        case Success():
            return _no_content()
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
