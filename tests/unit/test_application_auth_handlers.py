"""Unit tests for the credential lifecycle handlers.

Tests cover:
- RegisterUserHandler: success, duplicate email
- LoginUserHandler: success, unknown email, wrong password (same message)
- LogoutUserHandler: deletes the live refresh token, NOT_FOUND otherwise
- RefreshTokensHandler: rotation, replay of a consumed token
- Concurrent refresh / logout / reset with one token: exactly one wins
- ForgotPasswordHandler: known and unknown email both succeed
- ResetPasswordHandler: success removes sibling reset tokens
- SendVerificationEmailHandler / VerifyEmailHandler

Architecture:
- Handlers built with mocked protocols
- Token lifecycle tests use an in-memory token store with a real JWTService
"""

import asyncio
from datetime import timedelta
from unittest.mock import AsyncMock, Mock
from urllib.parse import parse_qs, urlparse
from uuid import UUID

import pytest

from storefront.application.commands.auth_commands import (
    ForgotPassword,
    LoginUser,
    LogoutUser,
    RefreshTokens,
    RegisterUser,
    ResetPassword,
    SendVerificationEmail,
    VerifyEmail,
)
from storefront.application.commands.handlers import (
    ForgotPasswordHandler,
    LoginUserHandler,
    LogoutUserHandler,
    RefreshTokensHandler,
    RegisterUserHandler,
    ResetPasswordHandler,
    SendVerificationEmailHandler,
    VerifyEmailHandler,
)
from storefront.application.errors import ApplicationErrorCode
from storefront.application.services import AuthTokenService, TokenLifetimes
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError
from storefront.core.result import Failure, Success
from storefront.domain.entities import TokenRecord
from storefront.domain.enums import TokenType
from storefront.infrastructure.security import JWTService
from tests.conftest import TEST_SECRET, make_user


class InMemoryTokenRepository:
    """Token store double keeping records in a dict.

    ``find_valid`` yields to the event loop after reading, like a database
    round-trip, so concurrent handlers interleave between read and delete.
    """

    def __init__(self) -> None:
        self.records: dict[UUID, TokenRecord] = {}

    async def save(self, record: TokenRecord) -> None:
        self.records[record.id] = record

    async def find_valid(self, token, token_type, *, user_id=None):
        found = next(
            (
                record
                for record in self.records.values()
                if record.token == token
                and record.type == token_type
                and not record.blacklisted
                and (user_id is None or record.user_id == user_id)
            ),
            None,
        )
        await asyncio.sleep(0)
        return found

    async def delete(self, token_id: UUID) -> bool:
        return self.records.pop(token_id, None) is not None

    async def delete_by_user_and_type(self, user_id, token_type) -> int:
        doomed = [
            record.id
            for record in self.records.values()
            if record.user_id == user_id and record.type == token_type
        ]
        for token_id in doomed:
            del self.records[token_id]
        return len(doomed)

    def of_type(self, token_type: TokenType) -> list[TokenRecord]:
        return [r for r in self.records.values() if r.type == token_type]


@pytest.fixture
def token_repo() -> InMemoryTokenRepository:
    return InMemoryTokenRepository()


@pytest.fixture
def user():
    return make_user()


@pytest.fixture
def user_repo(user) -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = user
    repo.find_by_email.return_value = user
    repo.exists_by_email.return_value = False
    repo.save.return_value = Success(value=None)
    repo.update.return_value = Success(value=None)
    return repo


@pytest.fixture
def token_service(token_repo, user_repo) -> AuthTokenService:
    return AuthTokenService(
        signer=JWTService(secret_key=TEST_SECRET),
        token_repo=token_repo,
        user_repo=user_repo,
    )


@pytest.fixture
def password_service() -> Mock:
    service = Mock()
    service.hash_password.return_value = "new_hash"
    service.verify_password.return_value = True
    return service


@pytest.mark.unit
class TestRegisterUserHandler:
    """Test registration."""

    @pytest.mark.asyncio
    async def test_register_creates_user_and_tokens(
        self, user_repo, password_service, token_service, token_repo, logger
    ):
        """Test a new account is saved with a hashed password and a token pair."""
        # Arrange
        handler = RegisterUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_service=token_service,
            logger=logger,
        )
        command = RegisterUser(email="new@example.com", password="password1", name="New")

        # Act
        result = await handler.handle(command)

        # Assert
        assert isinstance(result, Success)
        created = result.value.user
        assert created.email == "new@example.com"
        assert created.password_hash == "new_hash"
        assert created.is_email_verified is False
        password_service.hash_password.assert_called_once_with("password1")
        user_repo.save.assert_awaited_once_with(created)
        assert len(token_repo.of_type(TokenType.REFRESH)) == 1

    @pytest.mark.asyncio
    async def test_register_duplicate_email_fails(
        self, user_repo, password_service, token_service, logger
    ):
        """Test a taken email returns BAD_REQUEST and saves nothing."""
        user_repo.exists_by_email.return_value = True
        handler = RegisterUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_service=token_service,
            logger=logger,
        )

        result = await handler.handle(
            RegisterUser(email="jane@example.com", password="password1", name="Jane")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.BAD_REQUEST
        assert result.error.message == "Email already taken"
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_losing_a_race_on_save_fails(
        self, user_repo, password_service, token_service, token_repo, logger
    ):
        """Test a unique-index conflict on save maps to the duplicate-email error."""
        user_repo.save.return_value = Failure(
            error=ConflictError(
                code=ErrorCode.EMAIL_ALREADY_EXISTS,
                message="Email already taken",
                resource_type="User",
                conflicting_field="email",
            )
        )
        handler = RegisterUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_service=token_service,
            logger=logger,
        )

        result = await handler.handle(
            RegisterUser(email="jane@example.com", password="password1", name="Jane")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.BAD_REQUEST
        assert result.error.message == "Email already taken"
        assert token_repo.of_type(TokenType.REFRESH) == []


@pytest.mark.unit
class TestLoginUserHandler:
    """Test login."""

    @pytest.mark.asyncio
    async def test_login_success_returns_tokens(
        self, user, user_repo, password_service, token_service, logger
    ):
        """Test valid credentials return the user and a token pair."""
        handler = LoginUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_service=token_service,
            logger=logger,
        )

        result = await handler.handle(LoginUser(email=user.email, password="password1"))

        assert isinstance(result, Success)
        assert result.value.user is user
        assert result.value.tokens.access.token
        password_service.verify_password.assert_called_once_with(
            "password1", user.password_hash
        )

    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_look_the_same(
        self, user_repo, password_service, token_service, logger
    ):
        """Test both failure causes give the same UNAUTHORIZED message."""
        handler = LoginUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_service=token_service,
            logger=logger,
        )

        password_service.verify_password.return_value = False
        wrong_password = await handler.handle(
            LoginUser(email="jane@example.com", password="nope12345")
        )
        user_repo.find_by_email.return_value = None
        unknown_email = await handler.handle(
            LoginUser(email="ghost@example.com", password="nope12345")
        )

        for result in (wrong_password, unknown_email):
            assert isinstance(result, Failure)
            assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
            assert result.error.message == "Incorrect email or password"


@pytest.mark.unit
class TestLogoutUserHandler:
    """Test logout."""

    @pytest.mark.asyncio
    async def test_logout_deletes_refresh_token(
        self, user, token_service, token_repo, logger
    ):
        """Test the presented refresh token is removed from the store."""
        tokens = await token_service.generate_auth_tokens(user)
        handler = LogoutUserHandler(token_repo=token_repo, logger=logger)

        result = await handler.handle(LogoutUser(refresh_token=tokens.refresh.token))

        assert isinstance(result, Success)
        assert token_repo.of_type(TokenType.REFRESH) == []

    @pytest.mark.asyncio
    async def test_logout_unknown_token_is_not_found(self, token_repo, logger):
        """Test an unknown token returns NOT_FOUND."""
        handler = LogoutUserHandler(token_repo=token_repo, logger=logger)

        result = await handler.handle(LogoutUser(refresh_token="unknown"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.message == "Not found"

    @pytest.mark.asyncio
    async def test_concurrent_logouts_only_one_succeeds(
        self, user, token_service, token_repo, logger
    ):
        """Test two logouts racing on one token: the second delete finds nothing."""
        tokens = await token_service.generate_auth_tokens(user)
        handler = LogoutUserHandler(token_repo=token_repo, logger=logger)
        command = LogoutUser(refresh_token=tokens.refresh.token)

        results = await asyncio.gather(handler.handle(command), handler.handle(command))

        assert sum(isinstance(r, Success) for r in results) == 1
        failure = next(r for r in results if isinstance(r, Failure))
        assert failure.error.code == ApplicationErrorCode.NOT_FOUND


@pytest.mark.unit
class TestRefreshTokensHandler:
    """Test refresh token rotation."""

    @pytest.mark.asyncio
    async def test_refresh_rotates_the_token(
        self, user, user_repo, token_service, token_repo, logger
    ):
        """Test the old refresh record is replaced by a new one."""
        first = await token_service.generate_auth_tokens(user)
        handler = RefreshTokensHandler(
            user_repo=user_repo,
            token_repo=token_repo,
            token_service=token_service,
            logger=logger,
        )

        result = await handler.handle(RefreshTokens(refresh_token=first.refresh.token))

        assert isinstance(result, Success)
        stored = [r.token for r in token_repo.of_type(TokenType.REFRESH)]
        assert stored == [result.value.tokens.refresh.token]
        assert first.refresh.token not in stored

    @pytest.mark.asyncio
    async def test_replayed_refresh_token_is_rejected(
        self, user, user_repo, token_service, token_repo, logger
    ):
        """Test a refresh token works only once."""
        first = await token_service.generate_auth_tokens(user)
        handler = RefreshTokensHandler(
            user_repo=user_repo,
            token_repo=token_repo,
            token_service=token_service,
            logger=logger,
        )
        command = RefreshTokens(refresh_token=first.refresh.token)

        await handler.handle(command)
        replay = await handler.handle(command)

        assert isinstance(replay, Failure)
        assert replay.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert replay.error.message == "Please authenticate"

    @pytest.mark.asyncio
    async def test_concurrent_refreshes_issue_one_pair(
        self, user, user_repo, token_service, token_repo, logger
    ):
        """Test a refresh token raced by two callers rotates exactly once."""
        first = await token_service.generate_auth_tokens(user)
        handler = RefreshTokensHandler(
            user_repo=user_repo,
            token_repo=token_repo,
            token_service=token_service,
            logger=logger,
        )
        command = RefreshTokens(refresh_token=first.refresh.token)

        results = await asyncio.gather(handler.handle(command), handler.handle(command))

        winners = [r for r in results if isinstance(r, Success)]
        losers = [r for r in results if isinstance(r, Failure)]
        assert len(winners) == 1
        assert len(losers) == 1
        assert losers[0].error.code == ApplicationErrorCode.UNAUTHORIZED
        stored = [r.token for r in token_repo.of_type(TokenType.REFRESH)]
        assert stored == [winners[0].value.tokens.refresh.token]

    @pytest.mark.asyncio
    async def test_access_token_cannot_refresh(
        self, user, user_repo, token_service, token_repo, logger
    ):
        """Test presenting an access token fails with the same message."""
        tokens = await token_service.generate_auth_tokens(user)
        handler = RefreshTokensHandler(
            user_repo=user_repo,
            token_repo=token_repo,
            token_service=token_service,
            logger=logger,
        )

        result = await handler.handle(RefreshTokens(refresh_token=tokens.access.token))

        assert isinstance(result, Failure)
        assert result.error.message == "Please authenticate"

    @pytest.mark.asyncio
    async def test_deleted_user_cannot_refresh(
        self, user, user_repo, token_service, token_repo, logger
    ):
        """Test a token whose owner is gone is rejected."""
        tokens = await token_service.generate_auth_tokens(user)
        user_repo.find_by_id.return_value = None
        handler = RefreshTokensHandler(
            user_repo=user_repo,
            token_repo=token_repo,
            token_service=token_service,
            logger=logger,
        )

        result = await handler.handle(RefreshTokens(refresh_token=tokens.refresh.token))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED


@pytest.mark.unit
class TestForgotPasswordHandler:
    """Test forgot-password."""

    @pytest.mark.asyncio
    async def test_known_email_sends_reset_link(self, user, token_service, logger):
        """Test the emailed link points at the frontend with the stored token."""
        email_service = AsyncMock()
        handler = ForgotPasswordHandler(
            token_service=token_service,
            email_service=email_service,
            frontend_url="https://shop.example.com/",
            logger=logger,
        )

        result = await handler.handle(ForgotPassword(email=user.email))

        assert isinstance(result, Success)
        to, url = email_service.send_reset_password_email.await_args.args
        assert to == user.email
        parsed = urlparse(url)
        assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == (
            "https://shop.example.com/reset-password"
        )
        assert parse_qs(parsed.query)["token"][0]

    @pytest.mark.asyncio
    async def test_unknown_email_still_succeeds(
        self, user_repo, token_service, token_repo, logger
    ):
        """Test an unknown email succeeds without sending or storing anything."""
        user_repo.find_by_email.return_value = None
        email_service = AsyncMock()
        handler = ForgotPasswordHandler(
            token_service=token_service,
            email_service=email_service,
            frontend_url="https://shop.example.com",
            logger=logger,
        )

        result = await handler.handle(ForgotPassword(email="ghost@example.com"))

        assert isinstance(result, Success)
        email_service.send_reset_password_email.assert_not_awaited()
        assert token_repo.records == {}


@pytest.mark.unit
class TestResetPasswordHandler:
    """Test reset-password."""

    @pytest.mark.asyncio
    async def test_reset_replaces_hash_and_clears_reset_tokens(
        self, user, user_repo, token_service, token_repo, password_service, logger
    ):
        """Test the new hash is stored and every reset token of the user is gone."""
        first = await token_service.generate_reset_password_token(user.email)
        await token_service.generate_reset_password_token(user.email)
        handler = ResetPasswordHandler(
            user_repo=user_repo,
            token_repo=token_repo,
            token_service=token_service,
            password_service=password_service,
            logger=logger,
        )

        result = await handler.handle(
            ResetPassword(token=first.value, new_password="brandnew1")
        )

        assert isinstance(result, Success)
        assert user.password_hash == "new_hash"
        user_repo.update.assert_awaited_once_with(user)
        assert token_repo.of_type(TokenType.RESET_PASSWORD) == []

    @pytest.mark.asyncio
    async def test_reset_with_refresh_token_fails(
        self, user, user_repo, token_service, token_repo, password_service, logger
    ):
        """Test a token of another kind is rejected with UNAUTHORIZED."""
        tokens = await token_service.generate_auth_tokens(user)
        handler = ResetPasswordHandler(
            user_repo=user_repo,
            token_repo=token_repo,
            token_service=token_service,
            password_service=password_service,
            logger=logger,
        )

        result = await handler.handle(
            ResetPassword(token=tokens.refresh.token, new_password="brandnew1")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert result.error.message == "Password reset failed"
        user_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_resets_with_one_token_only_one_succeeds(
        self, user, user_repo, token_service, token_repo, password_service, logger
    ):
        """Test a reset token raced by two callers is consumed once."""
        issued = await token_service.generate_reset_password_token(user.email)
        handler = ResetPasswordHandler(
            user_repo=user_repo,
            token_repo=token_repo,
            token_service=token_service,
            password_service=password_service,
            logger=logger,
        )
        command = ResetPassword(token=issued.value, new_password="brandnew1")

        results = await asyncio.gather(handler.handle(command), handler.handle(command))

        assert sum(isinstance(r, Success) for r in results) == 1
        user_repo.update.assert_awaited_once_with(user)


@pytest.mark.unit
class TestEmailVerificationHandlers:
    """Test send-verification-email and verify-email."""

    @pytest.mark.asyncio
    async def test_send_then_verify_marks_user_verified(
        self, user, user_repo, token_service, token_repo, logger
    ):
        """Test the emailed token verifies the address and is consumed."""
        email_service = AsyncMock()
        sender = SendVerificationEmailHandler(
            user_repo=user_repo,
            token_service=token_service,
            email_service=email_service,
            frontend_url="https://shop.example.com",
            logger=logger,
        )
        verifier = VerifyEmailHandler(
            user_repo=user_repo,
            token_repo=token_repo,
            token_service=token_service,
            logger=logger,
        )

        sent = await sender.handle(SendVerificationEmail(user_id=user.id))
        to, name, url = email_service.send_verification_email.await_args.args
        token = parse_qs(urlparse(url).query)["token"][0]
        verified = await verifier.handle(VerifyEmail(token=token))

        assert isinstance(sent, Success)
        assert (to, name) == (user.email, user.name)
        assert isinstance(verified, Success)
        assert user.is_email_verified is True
        assert token_repo.of_type(TokenType.VERIFY_EMAIL) == []

    @pytest.mark.asyncio
    async def test_verify_with_unknown_token_fails(
        self, user_repo, token_service, token_repo, logger
    ):
        """Test an invalid token returns UNAUTHORIZED."""
        handler = VerifyEmailHandler(
            user_repo=user_repo,
            token_repo=token_repo,
            token_service=token_service,
            logger=logger,
        )

        result = await handler.handle(VerifyEmail(token="garbage"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert result.error.message == "Email verification failed"
        user_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_send_verification_for_missing_user_is_not_found(
        self, user_repo, token_service, logger
    ):
        """Test a deleted account behind a live access token gives NOT_FOUND."""
        user_repo.find_by_id.return_value = None
        handler = SendVerificationEmailHandler(
            user_repo=user_repo,
            token_service=token_service,
            email_service=AsyncMock(),
            frontend_url="https://shop.example.com",
            logger=logger,
        )

        result = await handler.handle(SendVerificationEmail(user_id=make_user().id))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND


def test_token_lifetime_defaults_are_short_for_email_tokens():
    """Test reset and verify tokens default to ten minutes."""
    lifetimes = TokenLifetimes()

    assert lifetimes.reset_password == timedelta(minutes=10)
    assert lifetimes.verify_email == timedelta(minutes=10)
