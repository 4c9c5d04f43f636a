"""Machine-readable error codes shared by domain and infrastructure errors."""

from enum import Enum


class ErrorCode(Enum):
    """Error codes carried by ``DomainError`` instances.

    Application handlers translate these into the coarser
    ``ApplicationErrorCode`` that the HTTP layer maps to status codes.
    """

    # Validation
    VALIDATION_FAILED = "validation_failed"

    # Authentication
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_TYPE_MISMATCH = "token_type_mismatch"

    # Resources
    USER_NOT_FOUND = "user_not_found"
    TOKEN_NOT_FOUND = "token_not_found"

    # Conflicts
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    BRAND_NAME_ALREADY_EXISTS = "brand_name_already_exists"

    # Infrastructure
    CACHE_ERROR = "cache_error"
    STORAGE_ERROR = "storage_error"
