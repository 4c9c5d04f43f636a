"""Integration tests for LocalFileStorage on a temporary directory.

Tests cover:
- Stored file name and public URL
- Content type and size rejections (VALIDATION_FAILED)
- Write errors (STORAGE_ERROR)
- Deleting stored files, refusing foreign URLs
"""

import pytest

from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Success
from storefront.infrastructure.enums import InfrastructureErrorCode
from storefront.infrastructure.storage import LocalFileStorage


@pytest.fixture
def storage(tmp_path) -> LocalFileStorage:
    return LocalFileStorage(upload_dir=tmp_path / "uploads", url_base="/uploads/", max_bytes=1024)


@pytest.mark.integration
class TestLocalFileStorage:
    """Test writing uploads to disk."""

    @pytest.mark.asyncio
    async def test_save_writes_file_and_returns_url(self, storage):
        result = await storage.save(
            filename="../../etc/Photo.PNG", content=b"\x89PNG", content_type="image/png"
        )

        assert isinstance(result, Success)
        assert result.value.startswith("/uploads/")
        assert result.value.endswith(".png")
        stored_name = result.value.rsplit("/", 1)[1]
        stored = storage.upload_dir / stored_name
        assert stored.read_bytes() == b"\x89PNG"
        assert ".." not in stored_name

    @pytest.mark.asyncio
    async def test_unsupported_type_is_validation_failure(self, storage):
        result = await storage.save(
            filename="run.exe", content=b"MZ", content_type="application/octet-stream"
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert not storage.upload_dir.exists()

    @pytest.mark.asyncio
    async def test_too_large_is_validation_failure(self, storage):
        result = await storage.save(
            filename="big.png", content=b"x" * 1025, content_type="image/png"
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED

    @pytest.mark.asyncio
    async def test_write_error_is_storage_error(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file in the way")
        storage = LocalFileStorage(upload_dir=blocker, url_base="/uploads", max_bytes=1024)

        result = await storage.save(
            filename="a.png", content=b"\x89PNG", content_type="image/png"
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORAGE_ERROR

    @pytest.mark.asyncio
    async def test_delete_removes_stored_file(self, storage):
        saved = await storage.save(
            filename="a.png", content=b"\x89PNG", content_type="image/png"
        )
        stored = storage.upload_dir / saved.value.rsplit("/", 1)[1]

        result = await storage.delete(saved.value)
        again = await storage.delete(saved.value)

        assert result == Success(value=None)
        assert again == Success(value=None)
        assert not stored.exists()

    @pytest.mark.parametrize(
        "url", ["/elsewhere/a.png", "/uploads/", "/uploads/../secret.txt", "/uploads/.."]
    )
    @pytest.mark.asyncio
    async def test_delete_refuses_urls_outside_upload_dir(self, storage, url):
        result = await storage.delete(url)

        assert isinstance(result, Failure)
        assert result.error.infrastructure_code == InfrastructureErrorCode.STORAGE_UNKNOWN_URL
