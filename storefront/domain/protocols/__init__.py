"""Domain ports (``typing.Protocol``).

Infrastructure adapters satisfy these structurally; nothing inherits from them.
"""

from storefront.domain.protocols.brand_repository import BrandRepository
from storefront.domain.protocols.cache_protocol import CacheProtocol
from storefront.domain.protocols.email_protocol import EmailProtocol
from storefront.domain.protocols.file_storage_protocol import FileStorageProtocol
from storefront.domain.protocols.logger_protocol import LoggerProtocol
from storefront.domain.protocols.otp_store_protocol import OtpStoreProtocol
from storefront.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from storefront.domain.protocols.product_repository import (
    ProductFilter,
    ProductRepository,
)
from storefront.domain.protocols.token_repository import TokenRepository
from storefront.domain.protocols.token_signing_protocol import TokenSigningProtocol
from storefront.domain.protocols.user_repository import UserFilter, UserRepository

__all__ = [
    "BrandRepository",
    "CacheProtocol",
    "EmailProtocol",
    "FileStorageProtocol",
    "LoggerProtocol",
    "OtpStoreProtocol",
    "PasswordHashingProtocol",
    "ProductFilter",
    "ProductRepository",
    "TokenRepository",
    "TokenSigningProtocol",
    "UserFilter",
    "UserRepository",
]
