"""Image domain service."""

import logfire

from folio.domain.error import UpstreamError, ValidationError
from folio.domain.value import ImageUpload, StoredBlob

from .base import Service

MAX_IMAGE_BYTES = 5 * 1024 * 1024


class BlobStore:
    """Generic blob store interface for post images."""

    async def upload(self, image: ImageUpload) -> StoredBlob:
        """Store an image.

        Args:
            image: Validated image payload

        Returns:
            Public URL and store-side identifier of the stored blob

        Raises:
            UpstreamError: If the store rejects or fails the upload
        """
        raise NotImplementedError

    async def delete(self, url: str) -> None:
        """Delete a previously stored image.

        Args:
            url: Public URL returned by ``upload``

        Raises:
            UpstreamError: If the store fails to delete the blob
        """
        raise NotImplementedError


class ImageService(Service):
    """Domain service for post images."""

    def __init__(self, blob_store: BlobStore) -> None:
        """Initialize image service.

        Args:
            blob_store: Blob store implementation
        """
        self.blob_store = blob_store

    def validate(self, image: ImageUpload | None) -> ImageUpload:
        """Check that an image is present, is an image, and fits the size limit.

        Args:
            image: Uploaded image or None

        Returns:
            The same image

        Raises:
            ValidationError: If the image is missing, not an image, or too large
        """
        if image is None:
            raise ValidationError("Image is required")

        if not image.media_type.startswith("image/"):
            logfire.warn("Rejected non-image upload", media_type=image.media_type)
            raise ValidationError("Only image files are allowed")

        if image.size > MAX_IMAGE_BYTES:
            logfire.warn("Rejected oversized image", size=image.size)
            raise ValidationError("Image size must be less than 5MB")

        return image

    async def upload(self, image: ImageUpload) -> str:
        """Upload an image and return its public URL.

        Args:
            image: Validated image

        Returns:
            Public URL of the stored image

        Raises:
            UpstreamError: If the upload fails
        """
        with logfire.span(
            "image_service.upload", media_type=image.media_type, size=image.size
        ):
            try:
                blob = await self.blob_store.upload(image)
            except UpstreamError:
                raise
            except Exception as e:
                logfire.error("Image upload failed", error=str(e))
                raise UpstreamError(f"Failed to upload image: {e}") from e

            logfire.info("Image uploaded", url=blob.url, public_id=blob.public_id)
            return blob.url

    async def delete(self, url: str) -> None:
        """Delete a stored image.

        Args:
            url: Public URL of the image

        Raises:
            UpstreamError: If the deletion fails
        """
        with logfire.span("image_service.delete", url=url):
            try:
                await self.blob_store.delete(url)
            except UpstreamError:
                raise
            except Exception as e:
                logfire.error("Image deletion failed", url=url, error=str(e))
                raise UpstreamError(f"Failed to delete image: {e}") from e

            logfire.info("Image deleted", url=url)
