"""Unit tests for AuthTokenService.

Tests cover:
- Access + refresh issuance (only refresh is stored)
- Reset-password token for known and unknown emails
- verify_token: type mismatch, missing record, stored expiry, expired JWT

Architecture:
- Real JWTService (pure, no I/O), mocked repositories
- freezegun controls "now" for expiry checks
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from storefront.application.services import AuthTokenService, TokenLifetimes
from storefront.core.enums import ErrorCode
from storefront.core.errors import AuthenticationError, NotFoundError
from storefront.core.result import Failure, Success
from storefront.domain.entities import TokenRecord
from storefront.domain.enums import TokenType
from storefront.infrastructure.security import JWTService
from tests.conftest import TEST_SECRET, make_user


def _service(token_repo=None, user_repo=None, lifetimes=None) -> AuthTokenService:
    return AuthTokenService(
        signer=JWTService(secret_key=TEST_SECRET),
        token_repo=token_repo or AsyncMock(),
        user_repo=user_repo or AsyncMock(),
        lifetimes=lifetimes,
    )


@pytest.mark.unit
class TestGenerateAuthTokens:
    """Test issuing the access + refresh pair."""

    @pytest.mark.asyncio
    async def test_stores_only_refresh_token(self):
        """Test that exactly one record (the refresh token) is saved."""
        # Arrange
        token_repo = AsyncMock()
        service = _service(token_repo=token_repo)
        user = make_user()

        # Act
        tokens = await service.generate_auth_tokens(user)

        # Assert
        token_repo.save.assert_awaited_once()
        saved: TokenRecord = token_repo.save.await_args.args[0]
        assert saved.type == TokenType.REFRESH
        assert saved.token == tokens.refresh.token
        assert saved.user_id == user.id
        assert tokens.access.token != tokens.refresh.token

    @pytest.mark.asyncio
    async def test_expiries_follow_lifetimes(self):
        """Test access and refresh expiries use the configured lifetimes."""
        lifetimes = TokenLifetimes(access=timedelta(minutes=5), refresh=timedelta(days=2))
        service = _service(lifetimes=lifetimes)

        with freeze_time("2026-10-19 12:00:00"):
            tokens = await service.generate_auth_tokens(make_user())

        assert tokens.access.expires == datetime(2026, 10, 19, 12, 5, tzinfo=UTC)
        assert tokens.refresh.expires == datetime(2026, 10, 21, 12, 0, tzinfo=UTC)

    @pytest.mark.asyncio
    async def test_access_token_carries_email_and_role(self):
        """Test the access token decodes with the user's email and role."""
        user = make_user(email="owner@example.com")
        service = _service()

        tokens = await service.generate_auth_tokens(user)
        decoded = JWTService(secret_key=TEST_SECRET).decode(
            tokens.access.token, expected_type=TokenType.ACCESS
        )

        assert isinstance(decoded, Success)
        assert decoded.value["sub"] == str(user.id)
        assert decoded.value["email"] == "owner@example.com"
        assert decoded.value["roles"] == ["user"]


@pytest.mark.unit
class TestGenerateResetPasswordToken:
    """Test reset-password token issuance."""

    @pytest.mark.asyncio
    async def test_unknown_email_returns_not_found(self):
        """Test that no token is stored when the email has no account."""
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = None
        token_repo = AsyncMock()
        service = _service(token_repo=token_repo, user_repo=user_repo)

        result = await service.generate_reset_password_token("ghost@example.com")

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.message == "No users found with this email"
        token_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_known_email_stores_reset_token(self):
        """Test a reset-password record is stored for the owner."""
        user = make_user()
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = user
        token_repo = AsyncMock()
        service = _service(token_repo=token_repo, user_repo=user_repo)

        result = await service.generate_reset_password_token(user.email)

        assert isinstance(result, Success)
        saved: TokenRecord = token_repo.save.await_args.args[0]
        assert saved.type == TokenType.RESET_PASSWORD
        assert saved.token == result.value


@pytest.mark.unit
class TestVerifyToken:
    """Test stored token verification."""

    @pytest.mark.asyncio
    async def test_valid_stored_token_returns_record(self):
        """Test a signed token with a live record verifies."""
        user = make_user()
        token_repo = AsyncMock()
        service = _service(token_repo=token_repo)
        token = await service.generate_verify_email_token(user)
        record = token_repo.save.await_args.args[0]
        token_repo.find_valid.return_value = record

        result = await service.verify_token(token, TokenType.VERIFY_EMAIL)

        assert isinstance(result, Success)
        assert result.value is record
        token_repo.find_valid.assert_awaited_once_with(
            token, TokenType.VERIFY_EMAIL, user_id=user.id
        )

    @pytest.mark.asyncio
    async def test_wrong_type_fails_before_store_lookup(self):
        """Test a refresh token is rejected where a reset token is expected."""
        token_repo = AsyncMock()
        service = _service(token_repo=token_repo)
        tokens = await service.generate_auth_tokens(make_user())

        result = await service.verify_token(tokens.refresh.token, TokenType.RESET_PASSWORD)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_TYPE_MISMATCH
        token_repo.find_valid.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_record_fails(self):
        """Test a well-signed token whose record was deleted is rejected."""
        token_repo = AsyncMock()
        service = _service(token_repo=token_repo)
        tokens = await service.generate_auth_tokens(make_user())
        token_repo.find_valid.return_value = None

        result = await service.verify_token(tokens.refresh.token, TokenType.REFRESH)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.TOKEN_NOT_FOUND

    @pytest.mark.asyncio
    async def test_stored_expiry_is_enforced(self):
        """Test a record expired in the store fails even if the JWT is live."""
        user = make_user()
        token_repo = AsyncMock()
        service = _service(token_repo=token_repo)
        tokens = await service.generate_auth_tokens(user)
        token_repo.find_valid.return_value = TokenRecord(
            id=uuid7(),
            token=tokens.refresh.token,
            user_id=user.id,
            type=TokenType.REFRESH,
            expires_at=datetime.now(UTC) - timedelta(seconds=1),
        )

        result = await service.verify_token(tokens.refresh.token, TokenType.REFRESH)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_EXPIRED

    @pytest.mark.asyncio
    async def test_blacklisted_record_fails(self):
        """Test a record flagged as blacklisted is not usable."""
        user = make_user()
        token_repo = AsyncMock()
        service = _service(token_repo=token_repo)
        tokens = await service.generate_auth_tokens(user)
        token_repo.find_valid.return_value = TokenRecord(
            id=uuid7(),
            token=tokens.refresh.token,
            user_id=user.id,
            type=TokenType.REFRESH,
            expires_at=datetime.now(UTC) + timedelta(days=1),
            blacklisted=True,
        )

        result = await service.verify_token(tokens.refresh.token, TokenType.REFRESH)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID
        assert result.error.message == "Token is blacklisted"

    @pytest.mark.asyncio
    async def test_expired_jwt_fails(self):
        """Test a token used after its exp claim is rejected."""
        token_repo = AsyncMock()
        service = _service(
            token_repo=token_repo,
            lifetimes=TokenLifetimes(refresh=timedelta(minutes=1)),
        )
        with freeze_time("2026-10-19 12:00:00"):
            tokens = await service.generate_auth_tokens(make_user())

        with freeze_time("2026-10-19 12:05:00"):
            result = await service.verify_token(tokens.refresh.token, TokenType.REFRESH)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_EXPIRED
        token_repo.find_valid.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_garbage_token_fails(self):
        """Test an unparseable token is rejected as invalid."""
        service = _service()

        result = await service.verify_token("not-a-jwt", TokenType.REFRESH)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID
