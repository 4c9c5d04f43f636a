"""API tests for /v1/auth endpoints.

Tests cover:
- Envelope shape on success and failure
- 204 responses carry no body
- Request validation errors become 400 with joined messages
- Bearer authentication on send-verification-email
- OTP outcomes map to 401 (mismatch) and 500 (store failure)
"""

from datetime import UTC, datetime, timedelta

import pytest

from storefront.application.dtos import AuthenticatedUser
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.core.container import (
    get_confirm_otp_handler,
    get_forgot_password_handler,
    get_login_user_handler,
    get_logout_user_handler,
    get_register_user_handler,
    get_reset_password_handler,
    get_send_otp_handler,
    get_send_verification_email_handler,
)
from storefront.core.result import Failure, Success
from storefront.domain.entities import AuthTokenPair, IssuedToken
from tests.api.conftest import bearer
from tests.conftest import make_user


def _authenticated() -> AuthenticatedUser:
    expires = datetime(2026, 10, 19, 12, 30, tzinfo=UTC)
    return AuthenticatedUser(
        user=make_user(),
        tokens=AuthTokenPair(
            access=IssuedToken(token="access-token", expires=expires),
            refresh=IssuedToken(token="refresh-token", expires=expires + timedelta(days=30)),
        ),
    )


def _failure(code: ApplicationErrorCode, message: str) -> Failure:
    return Failure(error=ApplicationError(code=code, message=message))


@pytest.mark.api
class TestRegisterAndLogin:
    """Test register and login."""

    def test_register_returns_user_and_tokens(self, client, override):
        handler = override(get_register_user_handler, Success(value=_authenticated()))

        response = client.post(
            "/v1/auth/register",
            json={"email": "Jane@Example.com", "password": "password1", "name": "Jane"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["code"] == 201
        assert body["message"] == "User registered successfully"
        assert body["data"]["user"]["email"] == "jane@example.com"
        assert body["data"]["user"]["isEmailVerified"] is False
        assert "passwordHash" not in body["data"]["user"]
        assert body["data"]["tokens"]["access"]["token"] == "access-token"
        assert body["data"]["tokens"]["refresh"]["token"] == "refresh-token"
        command = handler.handle.await_args.args[0]
        assert command.email == "jane@example.com"

    def test_register_validation_errors_are_joined(self, client, override):
        handler = override(get_register_user_handler)

        response = client.post(
            "/v1/auth/register",
            json={"email": "not-an-email", "password": "short", "name": "Jane"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["data"] is None
        assert "Invalid email" in body["message"]
        assert "password must be at least 8 characters" in body["message"]
        handler.handle.assert_not_awaited()

    def test_register_duplicate_email(self, client, override):
        override(
            get_register_user_handler,
            _failure(ApplicationErrorCode.BAD_REQUEST, "Email already taken"),
        )

        response = client.post(
            "/v1/auth/register",
            json={"email": "jane@example.com", "password": "password1", "name": "Jane"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "code": 400,
            "data": None,
            "message": "Email already taken",
            "success": False,
        }

    def test_login_failure_is_401(self, client, override):
        override(
            get_login_user_handler,
            _failure(ApplicationErrorCode.UNAUTHORIZED, "Incorrect email or password"),
        )

        response = client.post(
            "/v1/auth/login", json={"email": "jane@example.com", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Incorrect email or password"

    def test_login_success(self, client, override):
        override(get_login_user_handler, Success(value=_authenticated()))

        response = client.post(
            "/v1/auth/login", json={"email": "jane@example.com", "password": "password1"}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Login successful"


@pytest.mark.api
class TestNoContentEndpoints:
    """Test endpoints that answer 204."""

    def test_logout_returns_empty_204(self, client, override):
        override(get_logout_user_handler, Success(value=None))

        response = client.post("/v1/auth/logout", json={"refreshToken": "refresh-token"})

        assert response.status_code == 204
        assert response.content == b""

    def test_logout_unknown_token_is_404(self, client, override):
        override(
            get_logout_user_handler,
            _failure(ApplicationErrorCode.NOT_FOUND, "Not found"),
        )

        response = client.post("/v1/auth/logout", json={"refreshToken": "gone"})

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_forgot_password_unknown_email_is_still_204(self, client, override):
        override(get_forgot_password_handler, Success(value=None))

        response = client.post(
            "/v1/auth/forgot-password", json={"email": "ghost@example.com"}
        )

        assert response.status_code == 204

    def test_reset_password_reads_token_from_query(self, client, override):
        handler = override(get_reset_password_handler, Success(value=None))

        response = client.post(
            "/v1/auth/reset-password",
            params={"token": "reset-token"},
            json={"password": "brandnew1"},
        )

        assert response.status_code == 204
        command = handler.handle.await_args.args[0]
        assert command.token == "reset-token"
        assert command.new_password == "brandnew1"

    def test_reset_password_without_token_is_400(self, client, override):
        override(get_reset_password_handler, Success(value=None))

        response = client.post("/v1/auth/reset-password", json={"password": "brandnew1"})

        assert response.status_code == 400


@pytest.mark.api
class TestSendVerificationEmail:
    """Test the authenticated verification endpoint."""

    def test_requires_bearer_token(self, client, override):
        override(get_send_verification_email_handler, Success(value=None))

        response = client.post("/v1/auth/send-verification-email")

        assert response.status_code == 401
        assert response.json()["message"] == "Please authenticate"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_rejects_garbage_token(self, client, override):
        override(get_send_verification_email_handler, Success(value=None))

        response = client.post(
            "/v1/auth/send-verification-email",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401

    def test_sends_for_current_user(self, client, override):
        user = make_user()
        handler = override(get_send_verification_email_handler, Success(value=None))

        response = client.post(
            "/v1/auth/send-verification-email", headers=bearer(user.id)
        )

        assert response.status_code == 204
        assert handler.handle.await_args.args[0].user_id == user.id


@pytest.mark.api
class TestOtpEndpoints:
    """Test send-otp and confirm-otp."""

    def test_send_otp(self, client, override):
        override(get_send_otp_handler, Success(value=None))

        response = client.post("/v1/auth/send-otp", json={"email": "jane@example.com"})

        assert response.status_code == 204

    def test_confirm_otp_rejects_malformed_code(self, client, override):
        handler = override(get_confirm_otp_handler, Success(value=None))

        response = client.post(
            "/v1/auth/confirm-otp", json={"email": "jane@example.com", "code": "12ab56"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "code must be a 6 digit number"
        handler.handle.assert_not_awaited()

    def test_confirm_otp_mismatch_is_401(self, client, override):
        override(
            get_confirm_otp_handler,
            _failure(ApplicationErrorCode.UNAUTHORIZED, "Invalid or expired code"),
        )

        response = client.post(
            "/v1/auth/confirm-otp", json={"email": "jane@example.com", "code": "482913"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired code"

    def test_confirm_otp_store_failure_is_500(self, client, override):
        override(
            get_confirm_otp_handler,
            _failure(ApplicationErrorCode.INTERNAL_ERROR, "Error confirming email code"),
        )

        response = client.post(
            "/v1/auth/confirm-otp", json={"email": "jane@example.com", "code": "482913"}
        )

        assert response.status_code == 500
        assert response.json()["message"] == "Error confirming email code"
