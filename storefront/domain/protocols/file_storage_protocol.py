"""File storage port for uploaded product images."""

from typing import Protocol

from storefront.core.errors import DomainError
from storefront.core.result import Result


class FileStorageProtocol(Protocol):
    """Store uploaded files and hand back their public URL."""

    async def save(
        self, *, filename: str, content: bytes, content_type: str | None = None
    ) -> Result[str, DomainError]:
        """Persist ``content`` under a generated name derived from ``filename``.

        Returns:
            Success(url) with the public URL of the stored file, or
            Failure(StorageError) if the file could not be written or is
            rejected (size, content type).
        """
        ...

    async def delete(self, url: str) -> Result[None, DomainError]:
        """Remove a file previously returned by ``save``.

        A file that is already gone counts as deleted.

        Returns:
            Success(None), or Failure(StorageError) if ``url`` is not one of
            ours or the file could not be removed.
        """
        ...
