"""Infrastructure layer errors."""

from folio.domain.error import UpstreamError


class AdapterError(UpstreamError):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class CloudinaryError(ProviderError):
    """Cloudinary rejected or failed a request."""

    pass
