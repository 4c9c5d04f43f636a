"""Upload storage adapters."""

from storefront.infrastructure.storage.local_file_storage import LocalFileStorage

__all__ = ["LocalFileStorage"]
