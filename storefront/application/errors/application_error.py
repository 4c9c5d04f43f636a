"""Application layer error types.

Handlers return ``Failure(ApplicationError)``. The code is the failure kind
the HTTP layer maps to a status; the message is shown to the client as is.

Exports:
    ApplicationErrorCode: Failure kind
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from storefront.core.errors import DomainError


class ApplicationErrorCode(Enum):
    """Failure kinds surfaced by handlers.

    Examples:
        >>> ApplicationError(
        ...     code=ApplicationErrorCode.UNAUTHORIZED,
        ...     message="Incorrect email or password",
        ... )
    """

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Failure kind.
        message: Client-facing message. Deliberately generic where detail
            would leak account existence (login, token verification).
        domain_error: Underlying domain or infrastructure error, for logs.
        details: Additional context as key-value pairs.
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
