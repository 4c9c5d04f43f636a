"""Infrastructure error codes.

Internal codes for tracking which backend operation failed. The coarser
domain ``ErrorCode`` travels alongside them.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Backend operation that failed."""

    # Cache
    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
    CACHE_SCRIPT_ERROR = "cache_script_error"

    # Storage
    STORAGE_WRITE_ERROR = "storage_write_error"
    STORAGE_FILE_TOO_LARGE = "storage_file_too_large"
    STORAGE_UNSUPPORTED_TYPE = "storage_unsupported_type"
    STORAGE_DELETE_ERROR = "storage_delete_error"
    STORAGE_UNKNOWN_URL = "storage_unknown_url"
