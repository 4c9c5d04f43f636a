"""Core enums."""

from storefront.core.enums.environment import Environment
from storefront.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
