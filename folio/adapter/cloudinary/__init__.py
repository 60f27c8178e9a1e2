"""Cloudinary blob store adapter."""

from .client import (
    CloudinaryBlobStore,
    MockCloudinaryBlobStore,
    RealCloudinaryBlobStore,
)

__all__ = ["CloudinaryBlobStore", "MockCloudinaryBlobStore", "RealCloudinaryBlobStore"]
