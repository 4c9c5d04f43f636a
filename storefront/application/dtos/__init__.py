"""Application DTOs."""

from storefront.application.dtos.auth_dtos import AuthenticatedUser
from storefront.application.dtos.upload_dtos import UploadedFile

__all__ = ["AuthenticatedUser", "UploadedFile"]
