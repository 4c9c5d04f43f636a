"""Unit tests for the one-time email code flow.

Tests cover:
- generate_otp_code range and format
- SendOtpHandler: stores then emails, store failure
- ConfirmOtpHandler: match, mismatch / expired, store failure
- OtpStore over a dict-backed cache: single use, overwrite, key casing
"""

from unittest.mock import AsyncMock, Mock

import pytest

from storefront.application.commands.auth_commands import ConfirmOtp, SendOtp
from storefront.application.commands.handlers import (
    ConfirmOtpHandler,
    SendOtpHandler,
    generate_otp_code,
)
from storefront.application.errors import ApplicationErrorCode
from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Success
from storefront.infrastructure.cache import CacheKeys, OtpStore
from storefront.infrastructure.enums import InfrastructureErrorCode
from storefront.infrastructure.errors import CacheError

CACHE_DOWN = CacheError(
    code=ErrorCode.CACHE_ERROR,
    infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
    message="Failed to connect to cache",
)


class DictCache:
    """Cache double with the two operations OtpStore uses."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}

    async def set(self, key, value, ttl=None):
        self.values[key] = value
        self.ttls[key] = ttl
        return Success(value=None)

    async def compare_and_delete(self, key, expected):
        if self.values.get(key) == expected:
            del self.values[key]
            return Success(value=True)
        return Success(value=False)


@pytest.fixture
def otp_store() -> OtpStore:
    return OtpStore(cache=DictCache(), keys=CacheKeys("test"), ttl_seconds=60)


@pytest.mark.unit
class TestGenerateOtpCode:
    """Test code generation."""

    def test_codes_are_six_digits_in_range(self):
        """Test every generated code lies in [100000, 999999]."""
        for _ in range(500):
            code = generate_otp_code()
            assert len(code) == 6
            assert code.isdigit()
            assert 100_000 <= int(code) <= 999_999


@pytest.mark.unit
class TestSendOtpHandler:
    """Test sending a code."""

    @pytest.mark.asyncio
    async def test_send_stores_and_emails_the_same_code(self, otp_store, logger):
        """Test the stored code is the one emailed."""
        email_service = AsyncMock()
        handler = SendOtpHandler(
            otp_store=otp_store,
            email_service=email_service,
            logger=logger,
            code_generator=lambda: "482913",
        )

        result = await handler.handle(SendOtp(email="jane@example.com"))

        assert isinstance(result, Success)
        email_service.send_otp_email.assert_awaited_once_with("jane@example.com", "482913")
        assert await otp_store.consume("jane@example.com", "482913") == Success(value=True)

    @pytest.mark.asyncio
    async def test_store_failure_is_internal_error(self, logger):
        """Test a cache outage returns INTERNAL_ERROR and sends nothing."""
        otp_store = AsyncMock()
        otp_store.issue.return_value = Failure(error=CACHE_DOWN)
        email_service = AsyncMock()
        handler = SendOtpHandler(
            otp_store=otp_store, email_service=email_service, logger=logger
        )

        result = await handler.handle(SendOtp(email="jane@example.com"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.INTERNAL_ERROR
        email_service.send_otp_email.assert_not_awaited()


@pytest.mark.unit
class TestConfirmOtpHandler:
    """Test confirming a code."""

    @pytest.mark.asyncio
    async def test_matching_code_succeeds_once(self, otp_store, logger):
        """Test a correct code confirms and cannot be reused."""
        await otp_store.issue("jane@example.com", "482913")
        handler = ConfirmOtpHandler(otp_store=otp_store, logger=logger)
        command = ConfirmOtp(email="jane@example.com", code="482913")

        first = await handler.handle(command)
        second = await handler.handle(command)

        assert isinstance(first, Success)
        assert isinstance(second, Failure)
        assert second.error.code == ApplicationErrorCode.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_wrong_code_is_unauthorized(self, otp_store, logger):
        """Test a mismatch is UNAUTHORIZED, not an internal error."""
        await otp_store.issue("jane@example.com", "482913")
        handler = ConfirmOtpHandler(otp_store=otp_store, logger=logger)

        result = await handler.handle(ConfirmOtp(email="jane@example.com", code="111111"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert result.error.message == "Invalid or expired code"

    @pytest.mark.asyncio
    async def test_missing_code_is_unauthorized(self, otp_store, logger):
        """Test confirming with nothing stored (expired) is UNAUTHORIZED."""
        handler = ConfirmOtpHandler(otp_store=otp_store, logger=logger)

        result = await handler.handle(ConfirmOtp(email="nobody@example.com", code="482913"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_store_failure_is_internal_error(self, logger):
        """Test only a system failure maps to INTERNAL_ERROR."""
        otp_store = AsyncMock()
        otp_store.consume.return_value = Failure(error=CACHE_DOWN)
        handler = ConfirmOtpHandler(otp_store=otp_store, logger=logger)

        result = await handler.handle(ConfirmOtp(email="jane@example.com", code="482913"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.INTERNAL_ERROR
        assert result.error.message == "Error confirming email code"
        assert result.error.domain_error is CACHE_DOWN


@pytest.mark.unit
class TestOtpStore:
    """Test the code store on top of the cache protocol."""

    @pytest.mark.asyncio
    async def test_issue_uses_ttl_and_lowercased_key(self):
        """Test the key is namespaced and the ttl is forwarded."""
        cache = DictCache()
        store = OtpStore(cache=cache, keys=CacheKeys("shop"), ttl_seconds=90)

        await store.issue("Jane@Example.com", "482913")

        assert cache.values == {"shop:otp:jane@example.com": "482913"}
        assert cache.ttls["shop:otp:jane@example.com"] == 90
        assert store.ttl_seconds == 90

    @pytest.mark.asyncio
    async def test_reissue_replaces_previous_code(self, otp_store):
        """Test only the latest code is accepted."""
        await otp_store.issue("jane@example.com", "111111")
        await otp_store.issue("jane@example.com", "222222")

        assert await otp_store.consume("jane@example.com", "111111") == Success(value=False)
        assert await otp_store.consume("jane@example.com", "222222") == Success(value=True)

    @pytest.mark.asyncio
    async def test_consume_propagates_cache_failure(self):
        """Test a cache error surfaces as Failure."""
        cache = Mock()
        cache.compare_and_delete = AsyncMock(return_value=Failure(error=CACHE_DOWN))
        store = OtpStore(cache=cache, keys=CacheKeys("shop"), ttl_seconds=60)

        result = await store.consume("jane@example.com", "482913")

        assert result == Failure(error=CACHE_DOWN)
