"""Local disk storage for uploaded product images.

Implements FileStorageProtocol. Files are written under ``upload_dir`` with a
generated name and served by the application under ``url_base``.
"""

from pathlib import Path

from starlette.concurrency import run_in_threadpool
from uuid_extensions import uuid7

from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.infrastructure.enums import InfrastructureErrorCode
from storefront.infrastructure.errors import StorageError

ALLOWED_CONTENT_TYPES = frozenset(
    {"image/jpeg", "image/png", "image/gif", "image/webp"}
)


class LocalFileStorage:
    """Write uploads to a local directory.

    Args:
        upload_dir: Target directory, created on first write.
        url_base: Public URL prefix, e.g. ``/uploads``.
        max_bytes: Largest accepted file.
    """

    def __init__(self, *, upload_dir: str | Path, url_base: str, max_bytes: int) -> None:
        self._upload_dir = Path(upload_dir)
        self._url_base = url_base.rstrip("/")
        self._max_bytes = max_bytes

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    async def save(
        self, *, filename: str, content: bytes, content_type: str | None = None
    ) -> Result[str, StorageError]:
        """Store ``content`` and return its public URL.

        The stored name is ``<uuid7><suffix>`` so user supplied names never
        reach the filesystem.
        """
        if content_type is not None and content_type not in ALLOWED_CONTENT_TYPES:
            return Failure(
                error=StorageError(
                    code=ErrorCode.VALIDATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.STORAGE_UNSUPPORTED_TYPE,
                    message=f"Unsupported file type: {content_type}",
                    details={"filename": filename},
                )
            )
        if len(content) > self._max_bytes:
            return Failure(
                error=StorageError(
                    code=ErrorCode.VALIDATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.STORAGE_FILE_TOO_LARGE,
                    message=f"File too large: {filename}",
                    details={"filename": filename, "max_bytes": str(self._max_bytes)},
                )
            )

        suffix = Path(filename).suffix.lower()[:10]
        stored_name = f"{uuid7()}{suffix}"
        target = self._upload_dir / stored_name
        try:
            await run_in_threadpool(self._write, target, content)
        except OSError as e:
            return Failure(
                error=StorageError(
                    code=ErrorCode.STORAGE_ERROR,
                    infrastructure_code=InfrastructureErrorCode.STORAGE_WRITE_ERROR,
                    message="Failed to store uploaded file",
                    details={"filename": filename, "error": str(e)},
                )
            )
        return Success(value=f"{self._url_base}/{stored_name}")

    async def delete(self, url: str) -> Result[None, StorageError]:
        """Remove the file behind a URL returned by ``save``."""
        prefix = f"{self._url_base}/"
        name = url.removeprefix(prefix)
        if not url.startswith(prefix) or name in {"", ".."} or Path(name).name != name:
            return Failure(
                error=StorageError(
                    code=ErrorCode.STORAGE_ERROR,
                    infrastructure_code=InfrastructureErrorCode.STORAGE_UNKNOWN_URL,
                    message="Not a stored upload",
                    details={"url": url},
                )
            )
        try:
            await run_in_threadpool((self._upload_dir / name).unlink, missing_ok=True)
        except OSError as e:
            return Failure(
                error=StorageError(
                    code=ErrorCode.STORAGE_ERROR,
                    infrastructure_code=InfrastructureErrorCode.STORAGE_DELETE_ERROR,
                    message="Failed to delete stored file",
                    details={"url": url, "error": str(e)},
                )
            )
        return Success(value=None)

    @staticmethod
    def _write(target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
