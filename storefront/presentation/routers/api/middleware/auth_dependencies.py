"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating access tokens.

Usage:
    @router.get("/protected")
    async def protected_route(
        current_user: CurrentUser = Depends(get_current_user),
    ):
        return {"user_id": str(current_user.user_id)}
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.core.container import get_token_signer
from storefront.core.result import Failure, Success
from storefront.domain.enums import TokenType
from storefront.domain.protocols import TokenSigningProtocol

AUTHENTICATE_MESSAGE = "Please authenticate"

# auto_error=False so a missing header gets the same 401 envelope as a bad token
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user information from the access token.

    Attributes:
        user_id: From the ``sub`` claim.
        email: From the ``email`` claim.
        roles: From the ``roles`` claim.
    """

    user_id: UUID
    email: str
    roles: list[str]


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=AUTHENTICATE_MESSAGE,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    signer: Annotated[TokenSigningProtocol, Depends(get_token_signer)],
) -> CurrentUser:
    """Get current authenticated user from the bearer access token.

    Raises:
        HTTPException 401: If the token is missing, invalid, expired or not an
            access token.
    """
    if credentials is None:
        raise _unauthorized()

    result = signer.decode(credentials.credentials, expected_type=TokenType.ACCESS)

    match result:
        case Success(value=payload):
            try:
                roles_raw = payload.get("roles", ["user"])
                return CurrentUser(
                    user_id=UUID(str(payload["sub"])),
                    email=str(payload.get("email", "")),
                    roles=[str(r) for r in roles_raw]
                    if isinstance(roles_raw, list)
                    else ["user"],
                )
            except (KeyError, ValueError) as e:
                raise _unauthorized() from e
        case Failure():
            raise _unauthorized()
