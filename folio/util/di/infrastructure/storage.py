"""Blob storage infrastructure providers."""

from dishka import Scope, provide

from folio.adapter.cloudinary import RealCloudinaryBlobStore
from folio.config import StorageSettings
from folio.domain.service import BlobStore
from folio.util.di.base import ProviderBase
from folio.util.error import ConfigurationError
from folio.util.observability import instrument_httpx


class StorageProvider(ProviderBase):
    """Blob storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production blob storage provider using Cloudinary."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_blob_store(self, storage_settings: StorageSettings) -> BlobStore:
        """Provide Cloudinary blob store.

        Returns:
            Cloudinary-backed blob store

        Raises:
            ConfigurationError: If Cloudinary credentials are not configured
        """
        if not storage_settings.is_configured:
            raise ConfigurationError(
                "Cloudinary cloud name, API key and API secret must be configured"
            )

        instrument_httpx()
        return RealCloudinaryBlobStore(settings=storage_settings)
