"""Unit tests for the Cloudinary blob store."""

import hashlib
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from folio.adapter.cloudinary import MockCloudinaryBlobStore, RealCloudinaryBlobStore
from folio.adapter.cloudinary.client import public_id_from_url
from folio.adapter.error import CloudinaryError
from folio.config import StorageSettings
from tests.conftest import make_image


@pytest.fixture
def store():
    """Real store with dummy credentials."""
    return RealCloudinaryBlobStore(
        StorageSettings(cloud_name="demo", api_key="key", api_secret="secret")
    )


class TestRequestSigning:
    """Tests for signed request parameters."""

    @pytest.mark.asyncio
    async def test_destroy_signature(self, store):
        """Signed params are sorted, joined with & and hashed with the secret."""
        with (
            patch("httpx.AsyncClient") as mock_client_class,
            patch("folio.adapter.cloudinary.client.time") as mock_time,
        ):
            mock_time.time.return_value = 1315060510
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200, json={"result": "ok"})

            # Act
            await store.delete(
                "https://res.cloudinary.com/demo/image/upload/v1/posts-api/sample.png"
            )

            # Assert
            _, kwargs = mock_client.post.call_args
            expected = hashlib.sha1(
                b"public_id=posts-api/sample&timestamp=1315060510secret"
            ).hexdigest()
            assert kwargs["data"]["timestamp"] == "1315060510"
            assert kwargs["data"]["signature"] == expected

    @pytest.mark.asyncio
    async def test_destroy_form_fields(self, store):
        """Destroy posts the public ID, timestamp, API key and signature only."""
        with (
            patch("httpx.AsyncClient") as mock_client_class,
            patch("folio.adapter.cloudinary.client.time") as mock_time,
        ):
            mock_time.time.return_value = 1315060510
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200, json={"result": "ok"})

            await store.delete(
                "https://res.cloudinary.com/demo/image/upload/v1/posts-api/sample.png"
            )

            _, kwargs = mock_client.post.call_args
            assert kwargs["data"]["api_key"] == "key"
            assert set(kwargs["data"]) == {"public_id", "timestamp", "api_key", "signature"}


class TestPublicIdFromUrl:
    """Tests for recovering public IDs."""

    def test_versioned_url(self):
        """Version segment and extension are dropped."""
        url = "https://res.cloudinary.com/demo/image/upload/v1712/posts-api/abc.jpg"

        assert public_id_from_url(url, "posts-api") == "posts-api/abc"

    def test_unversioned_url(self):
        """URLs without a version still resolve."""
        url = "https://res.cloudinary.com/demo/image/upload/posts-api/abc.png"

        assert public_id_from_url(url, "posts-api") == "posts-api/abc"

    def test_url_without_upload_segment(self):
        """Other URLs fall back to folder plus filename."""
        assert public_id_from_url("https://cdn.example.com/x/abc.png", "posts-api") == (
            "posts-api/abc"
        )


class TestRealCloudinaryBlobStore:
    """Tests for the HTTP-backed store with httpx mocked out."""

    @pytest.mark.asyncio
    async def test_upload(self, store):
        """A 200 response yields the secure URL and public ID."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(
                200,
                json={
                    "secure_url": "https://res.cloudinary.com/demo/image/upload/v1/posts-api/a.png",
                    "public_id": "posts-api/a",
                    "bytes": 32,
                },
            )

            # Act
            blob = await store.upload(make_image())

            # Assert
            assert blob.public_id == "posts-api/a"
            assert blob.url.endswith("/posts-api/a.png")
            args, kwargs = mock_client.post.call_args
            assert args[0] == "https://api.cloudinary.com/v1_1/demo/image/upload"
            assert kwargs["data"]["folder"] == "posts-api"
            assert kwargs["data"]["api_key"] == "key"
            assert "signature" in kwargs["data"]
            assert kwargs["files"]["file"][2] == "image/png"

    @pytest.mark.asyncio
    async def test_upload_error_status(self, store):
        """Non-200 responses raise CloudinaryError."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(400, text="Invalid image file")

            with pytest.raises(CloudinaryError):
                await store.upload(make_image())

    @pytest.mark.asyncio
    async def test_upload_network_error(self, store):
        """Transport errors raise CloudinaryError."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.side_effect = httpx.ConnectError("connection refused")

            with pytest.raises(CloudinaryError, match="HTTP error during upload"):
                await store.upload(make_image())

    @pytest.mark.asyncio
    async def test_delete(self, store):
        """Destroy is called with the public ID recovered from the URL."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200, json={"result": "ok"})

            await store.delete(
                "https://res.cloudinary.com/demo/image/upload/v99/posts-api/abc.png"
            )

            args, kwargs = mock_client.post.call_args
            assert args[0] == "https://api.cloudinary.com/v1_1/demo/image/destroy"
            assert kwargs["data"]["public_id"] == "posts-api/abc"

    @pytest.mark.asyncio
    async def test_delete_not_confirmed(self, store):
        """A result other than "ok" is a failure."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200, json={"result": "not found"})

            with pytest.raises(CloudinaryError):
                await store.delete(
                    "https://res.cloudinary.com/demo/image/upload/v1/posts-api/abc.png"
                )


class TestMockCloudinaryBlobStore:
    """Tests for the in-memory store used by tests."""

    @pytest.mark.asyncio
    async def test_upload_then_delete(self):
        """Uploaded URLs can be deleted once."""
        # Arrange
        mock_store = MockCloudinaryBlobStore()

        # Act
        blob = await mock_store.upload(make_image(media_type="image/webp"))
        await mock_store.delete(blob.url)

        # Assert
        assert blob.url.endswith(".webp")
        assert public_id_from_url(blob.url, "posts-api") == blob.public_id
        with pytest.raises(CloudinaryError):
            await mock_store.delete(blob.url)
