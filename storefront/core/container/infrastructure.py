"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Cache (Redis) and the OTP store built on it
- Database (PostgreSQL)
- Password hashing (bcrypt)
- Token signing (JWT)
- Email (stub/AWS SES)
- Authorization (Casbin)
- Upload storage (local disk)
- Logging (console)

Request-scoped: ``get_db_session``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import get_settings
from storefront.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from storefront.domain.protocols import (
        EmailProtocol,
        FileStorageProtocol,
        LoggerProtocol,
        OtpStoreProtocol,
        PasswordHashingProtocol,
        TokenSigningProtocol,
    )
    from storefront.infrastructure.authorization import CasbinAdapter
    from storefront.infrastructure.cache import RedisAdapter


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_cache() -> "RedisAdapter":
    """Get cache client singleton (app-scoped).

    The connection pool is shared across the application and closed by the
    application lifespan.

    Usage:
        cache = get_cache()
        await cache.set("key", "value", ttl=60)
    """
    from storefront.infrastructure.cache import RedisAdapter

    return RedisAdapter.from_url(get_settings().redis_url)


@lru_cache()
def get_otp_store() -> "OtpStoreProtocol":
    """Get OTP store singleton (app-scoped)."""
    from storefront.infrastructure.cache import CacheKeys, OtpStore

    settings = get_settings()
    return OtpStore(
        cache=get_cache(),
        keys=CacheKeys(prefix=settings.cache_key_prefix),
        ttl_seconds=settings.otp_ttl_seconds,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Usage:
        @router.get("/brands")
        async def list_brands(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Cost factor comes from ``BCRYPT_ROUNDS`` (12 by default, 4 in tests).
    """
    from storefront.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_signer() -> "TokenSigningProtocol":
    """Get JWT signer singleton (app-scoped, HMAC-SHA256)."""
    from storefront.infrastructure.security import JWTService

    return JWTService(secret_key=get_settings().secret_key)


@lru_cache()
def get_authorization() -> "CasbinAdapter":
    """Get role/right enforcer singleton (app-scoped).

    Loads the bundled Casbin model and policy files once.
    """
    from storefront.infrastructure.authorization import CasbinAdapter

    return CasbinAdapter.from_files()


# ============================================================================
# Email Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Adapter selection follows ``EMAIL_BACKEND``:
        - 'stub': StubEmailService (structured log output)
        - 'ses': SESEmailService (AWS SES)

    Raises:
        ValueError: If EMAIL_BACKEND is not supported.
    """
    settings = get_settings()

    if settings.email_backend == "ses":
        from storefront.infrastructure.email import SESEmailService

        return SESEmailService(
            sender=settings.email_from,
            region=settings.aws_region,
            logger=get_logger(),
            otp_ttl_seconds=settings.otp_ttl_seconds,
        )
    elif settings.email_backend == "stub":
        from storefront.infrastructure.email import StubEmailService

        return StubEmailService(
            logger=get_logger(),
            reveal_secrets=settings.is_development,
            otp_ttl_seconds=settings.otp_ttl_seconds,
        )
    else:
        raise ValueError(
            f"Unsupported EMAIL_BACKEND: {settings.email_backend}. "
            "Supported: 'stub', 'ses'"
        )


# ============================================================================
# Upload Storage (Application-Scoped)
# ============================================================================


@lru_cache()
def get_file_storage() -> "FileStorageProtocol":
    """Get upload storage singleton (app-scoped)."""
    from storefront.infrastructure.storage import LocalFileStorage

    settings = get_settings()
    return LocalFileStorage(
        upload_dir=settings.upload_dir,
        url_base=settings.upload_url_base,
        max_bytes=settings.max_upload_bytes,
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from storefront.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
