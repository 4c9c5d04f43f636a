"""Integration tests for UserRepository and TokenRepository against PostgreSQL.

Tests cover:
- Case-insensitive email lookup and the exclude_user_id existence check
- Unique email index surfacing as Failure(ConflictError) on save and update
- Token lookup by value, type and owner; blacklisted rows are hidden
- delete reports whether a row was removed (single consumption)
- delete_by_user_and_type only removes the given type

Architecture:
- Uses test_database fixture (schema created per test, skipped without PostgreSQL)
- Every test creates its own users with unique emails
"""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError
from storefront.core.result import Failure, Success
from storefront.domain.entities import TokenRecord
from storefront.domain.enums import TokenType
from storefront.infrastructure.persistence.repositories import (
    TokenRepository,
    UserRepository,
)
from tests.conftest import make_user


def _email() -> str:
    return f"user_{uuid7().hex}@example.com"


def _token(user_id, token_type=TokenType.REFRESH, **kwargs) -> TokenRecord:
    return TokenRecord(
        id=uuid7(),
        token=kwargs.pop("token", f"token-{uuid7()}"),
        user_id=user_id,
        type=token_type,
        expires_at=datetime.now(UTC) + timedelta(days=1),
        **kwargs,
    )


@pytest.mark.integration
class TestUserRepository:
    """Test UserRepository with a real database."""

    @pytest.mark.asyncio
    async def test_save_then_find_by_email_ignores_case(self, test_database):
        # Arrange
        user = make_user(email=_email())

        # Act
        async with test_database.get_session() as session:
            saved = await UserRepository(session).save(user)
        async with test_database.get_session() as session:
            found = await UserRepository(session).find_by_email(user.email.upper())

        # Assert
        assert saved == Success(value=None)
        assert found is not None
        assert found.id == user.id
        assert found.email == user.email

    @pytest.mark.asyncio
    async def test_exists_by_email_excludes_given_user(self, test_database):
        user = make_user(email=_email())

        async with test_database.get_session() as session:
            repo = UserRepository(session)
            await repo.save(user)

            assert await repo.exists_by_email(user.email) is True
            assert await repo.exists_by_email(user.email, exclude_user_id=user.id) is False

    @pytest.mark.asyncio
    async def test_duplicate_email_on_save_is_conflict(self, test_database):
        email = _email()

        async with test_database.get_session() as session:
            repo = UserRepository(session)
            await repo.save(make_user(email=email))

            result = await repo.save(make_user(email=email))

            assert isinstance(result, Failure)
            assert isinstance(result.error, ConflictError)
            assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
            # Session is usable after the rollback.
            assert await repo.exists_by_email(email) is True

    @pytest.mark.asyncio
    async def test_update_to_taken_email_is_conflict(self, test_database):
        first = make_user(email=_email())
        second = make_user(email=_email())
        async with test_database.get_session() as session:
            repo = UserRepository(session)
            await repo.save(first)
            await repo.save(second)

        async with test_database.get_session() as session:
            repo = UserRepository(session)
            result = await repo.update(
                make_user(user_id=second.id, email=first.email, name="Renamed")
            )

            assert isinstance(result, Failure)
            assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
            unchanged = await repo.find_by_id(second.id)
            assert unchanged.email == second.email


@pytest.mark.integration
class TestTokenRepository:
    """Test TokenRepository with a real database."""

    @pytest.mark.asyncio
    async def test_find_valid_matches_value_type_and_owner(self, test_database):
        # Arrange
        owner = make_user(email=_email())
        other = make_user(email=_email())
        record = _token(owner.id)
        async with test_database.get_session() as session:
            await UserRepository(session).save(owner)
            await UserRepository(session).save(other)
            await TokenRepository(session).save(record)

        # Act
        async with test_database.get_session() as session:
            repo = TokenRepository(session)
            found = await repo.find_valid(record.token, TokenType.REFRESH, user_id=owner.id)
            wrong_type = await repo.find_valid(record.token, TokenType.RESET_PASSWORD)
            wrong_owner = await repo.find_valid(
                record.token, TokenType.REFRESH, user_id=other.id
            )

        # Assert
        assert found is not None
        assert found.id == record.id
        assert found.type == TokenType.REFRESH
        assert wrong_type is None
        assert wrong_owner is None

    @pytest.mark.asyncio
    async def test_blacklisted_token_is_not_found(self, test_database):
        owner = make_user(email=_email())
        record = _token(owner.id, blacklisted=True)
        async with test_database.get_session() as session:
            await UserRepository(session).save(owner)
            await TokenRepository(session).save(record)

            found = await TokenRepository(session).find_valid(
                record.token, TokenType.REFRESH
            )

        assert found is None

    @pytest.mark.asyncio
    async def test_delete_succeeds_only_once(self, test_database):
        owner = make_user(email=_email())
        record = _token(owner.id)
        async with test_database.get_session() as session:
            await UserRepository(session).save(owner)
            await TokenRepository(session).save(record)

        async with test_database.get_session() as session:
            first = await TokenRepository(session).delete(record.id)
        async with test_database.get_session() as session:
            second = await TokenRepository(session).delete(record.id)

        assert first is True
        assert second is False

    @pytest.mark.asyncio
    async def test_delete_by_user_and_type_keeps_other_types(self, test_database):
        owner = make_user(email=_email())
        resets = [_token(owner.id, TokenType.RESET_PASSWORD) for _ in range(2)]
        refresh = _token(owner.id, TokenType.REFRESH)
        async with test_database.get_session() as session:
            await UserRepository(session).save(owner)
            repo = TokenRepository(session)
            for record in [*resets, refresh]:
                await repo.save(record)

        async with test_database.get_session() as session:
            repo = TokenRepository(session)
            removed = await repo.delete_by_user_and_type(owner.id, TokenType.RESET_PASSWORD)
            again = await repo.delete_by_user_and_type(owner.id, TokenType.RESET_PASSWORD)
            kept = await repo.find_valid(refresh.token, TokenType.REFRESH)

        assert removed == 2
        assert again == 0
        assert kept is not None
