"""Cloudinary blob store.

Uses Cloudinary's signed REST upload API over httpx; request signatures
come from the Cloudinary SDK.
"""

import re
import time
from uuid import uuid4

import httpx
import logfire
from cloudinary.utils import api_sign_request

from folio.adapter.error import CloudinaryError
from folio.config import StorageSettings
from folio.domain.service.image_service import BlobStore
from folio.domain.value import ImageUpload, StoredBlob

API_BASE_URL = "https://api.cloudinary.com/v1_1"

# Resize for web display, then let Cloudinary pick the quality
INCOMING_TRANSFORMATION = "c_limit,w_1200,h_630/q_auto:good"
ALLOWED_FORMATS = "jpg,jpeg,png,gif,webp"

_VERSION_PREFIX = re.compile(r"^v\d+/")


def public_id_from_url(url: str, folder: str) -> str:
    """Recover the public ID of an uploaded image from its delivery URL.

    ``https://res.cloudinary.com/demo/image/upload/v1712/posts-api/abc.jpg``
    maps to ``posts-api/abc``.

    Args:
        url: Delivery URL returned by the upload
        folder: Upload folder, used when the URL has no ``/upload/`` segment

    Returns:
        Public ID
    """
    path = url.split("?", 1)[0]
    if "/upload/" in path:
        path = _VERSION_PREFIX.sub("", path.split("/upload/", 1)[1])
        return path.rsplit(".", 1)[0]

    filename = path.rsplit("/", 1)[-1]
    return f"{folder}/{filename.split('.')[0]}"


class CloudinaryBlobStore(BlobStore):
    """Base class for Cloudinary blob stores.

    Provides type distinction for dependency injection.
    """

    pass


class RealCloudinaryBlobStore(CloudinaryBlobStore):
    """Blob store backed by Cloudinary's image API."""

    def __init__(self, settings: StorageSettings) -> None:
        """Initialize Cloudinary client.

        Args:
            settings: Cloudinary credentials and upload options
        """
        self.cloud_name = settings.cloud_name
        self.api_key = settings.api_key
        self.api_secret = settings.api_secret
        self.folder = settings.folder
        self.timeout = settings.upload_timeout

        self.upload_url = f"{API_BASE_URL}/{self.cloud_name}/image/upload"
        self.destroy_url = f"{API_BASE_URL}/{self.cloud_name}/image/destroy"

    def _signed(self, params: dict[str, str]) -> dict[str, str]:
        params = {**params, "timestamp": str(int(time.time()))}
        return {
            **params,
            "api_key": self.api_key,
            "signature": api_sign_request(params, self.api_secret),
        }

    async def upload(self, image: ImageUpload) -> StoredBlob:
        """Upload an image to the configured folder.

        Args:
            image: Validated image payload

        Returns:
            Secure URL and public ID

        Raises:
            CloudinaryError: If the upload fails
        """
        data = self._signed(
            {
                "folder": self.folder,
                "allowed_formats": ALLOWED_FORMATS,
                "transformation": INCOMING_TRANSFORMATION,
            }
        )
        filename = image.filename or f"upload.{image.extension}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.upload_url,
                    data=data,
                    files={"file": (filename, image.content, image.media_type)},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Cloudinary upload failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise CloudinaryError(
                        f"Failed to upload image: {response.status_code}"
                    )

                result = response.json()

        except httpx.HTTPError as e:
            logfire.error("Cloudinary upload HTTP error", error=str(e))
            raise CloudinaryError(f"HTTP error during upload: {e}")

        logfire.info(
            "Cloudinary upload successful",
            public_id=result["public_id"],
            bytes=result.get("bytes"),
        )
        return StoredBlob(url=result["secure_url"], public_id=result["public_id"])

    async def delete(self, url: str) -> None:
        """Destroy the image behind a delivery URL.

        Args:
            url: Secure URL returned by ``upload``

        Raises:
            CloudinaryError: If Cloudinary doesn't confirm the deletion
        """
        public_id = public_id_from_url(url, self.folder)
        data = self._signed({"public_id": public_id})

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.destroy_url, data=data, timeout=self.timeout
                )

                if response.status_code != 200:
                    logfire.error(
                        "Cloudinary destroy failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise CloudinaryError(
                        f"Failed to delete image: {response.status_code}"
                    )

                result = response.json()

        except httpx.HTTPError as e:
            logfire.error("Cloudinary destroy HTTP error", error=str(e))
            raise CloudinaryError(f"HTTP error during delete: {e}")

        if result.get("result") != "ok":
            logfire.warn(
                "Cloudinary destroy not confirmed",
                public_id=public_id,
                result=result.get("result"),
            )
            raise CloudinaryError("Failed to delete image from Cloudinary")

        logfire.info("Cloudinary destroy successful", public_id=public_id)


class MockCloudinaryBlobStore(CloudinaryBlobStore):
    """Mock Cloudinary blob store for testing.

    Keeps blobs in memory and records every call. Set ``upload_error`` or
    ``delete_error`` to make the next calls fail.
    """

    def __init__(self, folder: str = "posts-api") -> None:
        """Initialize empty in-memory store."""
        self.folder = folder
        self.blobs: dict[str, ImageUpload] = {}
        self.uploaded: list[str] = []
        self.deleted: list[str] = []
        self.upload_error: Exception | None = None
        self.delete_error: Exception | None = None

    async def upload(self, image: ImageUpload) -> StoredBlob:
        """Store the image in memory and return a Cloudinary-shaped URL."""
        if self.upload_error is not None:
            raise self.upload_error

        public_id = f"{self.folder}/{uuid4().hex}"
        url = (
            f"https://res.cloudinary.com/mock/image/upload/v1/"
            f"{public_id}.{image.extension}"
        )
        self.blobs[url] = image
        self.uploaded.append(url)
        return StoredBlob(url=url, public_id=public_id)

    async def delete(self, url: str) -> None:
        """Forget the image behind ``url``.

        Raises:
            CloudinaryError: If the URL is unknown or ``delete_error`` is set
        """
        if self.delete_error is not None:
            raise self.delete_error
        if url not in self.blobs:
            raise CloudinaryError(f"Failed to delete image: not found: {url}")

        del self.blobs[url]
        self.deleted.append(url)
