"""Unit tests for ImageService."""

import pytest

from folio.adapter.cloudinary import MockCloudinaryBlobStore
from folio.adapter.error import CloudinaryError
from folio.domain.error import UpstreamError, ValidationError
from folio.domain.service import MAX_IMAGE_BYTES, BlobStore, ImageService
from tests.conftest import make_image
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestValidate:
    """Tests for image validation."""

    @pytest.mark.asyncio
    async def test_missing_image(self, unit_env):
        """An absent image is rejected."""
        image_service = await unit_env.get(ImageService)

        with pytest.raises(ValidationError, match="Image is required"):
            image_service.validate(None)

    @pytest.mark.asyncio
    async def test_non_image_media_type(self, unit_env):
        """Only image/* media types are accepted."""
        image_service = await unit_env.get(ImageService)

        with pytest.raises(ValidationError, match="Only image files are allowed"):
            image_service.validate(make_image(media_type="application/pdf"))

    @pytest.mark.asyncio
    async def test_size_limit_is_inclusive(self, unit_env):
        """Exactly 5 MiB is accepted, one byte more is not."""
        image_service = await unit_env.get(ImageService)

        assert image_service.validate(make_image(size=MAX_IMAGE_BYTES))
        with pytest.raises(ValidationError, match="less than 5MB"):
            image_service.validate(make_image(size=MAX_IMAGE_BYTES + 1))


class TestUploadAndDelete:
    """Tests for upload and delete against the mock store."""

    @pytest.mark.asyncio
    async def test_upload_returns_public_url(self, unit_env):
        """Upload stores the blob and returns its URL."""
        # Arrange
        image_service = await unit_env.get(ImageService)
        store = await unit_env.get(BlobStore)

        # Act
        url = await image_service.upload(make_image())

        # Assert
        assert store.uploaded == [url]
        assert url.startswith("https://res.cloudinary.com/")
        assert "/posts-api/" in url

    @pytest.mark.asyncio
    async def test_upload_failure_is_upstream_error(self, unit_env):
        """Store failures surface as UpstreamError."""
        # Arrange
        image_service = await unit_env.get(ImageService)
        store = await unit_env.get(BlobStore)
        store.upload_error = CloudinaryError("service unavailable")

        # Act & Assert
        with pytest.raises(UpstreamError):
            await image_service.upload(make_image())

    @pytest.mark.asyncio
    async def test_unexpected_store_error_is_wrapped(self):
        """Errors outside the UpstreamError family are wrapped."""
        # Arrange
        store = MockCloudinaryBlobStore()
        store.upload_error = RuntimeError("boom")
        image_service = ImageService(blob_store=store)

        # Act & Assert
        with pytest.raises(UpstreamError, match="boom"):
            await image_service.upload(make_image())

    @pytest.mark.asyncio
    async def test_delete_removes_blob(self, unit_env):
        """Delete forgets the uploaded blob."""
        # Arrange
        image_service = await unit_env.get(ImageService)
        store = await unit_env.get(BlobStore)
        url = await image_service.upload(make_image())

        # Act
        await image_service.delete(url)

        # Assert
        assert url not in store.blobs
        assert store.deleted == [url]

    @pytest.mark.asyncio
    async def test_delete_unknown_url_fails(self, unit_env):
        """Deleting a blob the store doesn't have is an upstream error."""
        image_service = await unit_env.get(ImageService)

        with pytest.raises(UpstreamError):
            await image_service.delete("https://res.cloudinary.com/mock/image/upload/v1/x.png")
