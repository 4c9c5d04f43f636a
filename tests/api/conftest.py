"""Fixtures for HTTP tests.

Handler factories are replaced through ``app.dependency_overrides`` so no
request reaches a database or Redis. Access tokens are signed with the
application's own signer, so the real bearer and casbin checks run.
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from storefront.core.container import get_token_signer
from storefront.domain.enums import TokenType, UserRole
from storefront.main import app


@pytest.fixture
def client():
    """TestClient without lifespan, so startup never touches infrastructure."""
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def override():
    """Register a stub handler for a handler factory.

    Usage:
        handler = override(get_login_user_handler, Success(value=...))
    """

    def _override(factory, result=None) -> AsyncMock:
        handler = AsyncMock()
        handler.handle.return_value = result
        app.dependency_overrides[factory] = lambda: handler
        return handler

    return _override


def bearer(user_id=None, role: UserRole = UserRole.USER) -> dict[str, str]:
    """Authorization header with a freshly signed access token."""
    token = get_token_signer().sign(
        user_id=user_id or uuid7(),
        token_type=TokenType.ACCESS,
        expires=datetime.now(UTC) + timedelta(minutes=5),
        extra_claims={"email": "jane@example.com", "roles": [role.value]},
    )
    return {"Authorization": f"Bearer {token}"}
