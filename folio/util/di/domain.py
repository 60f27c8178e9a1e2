"""Domain layer DI providers."""

from dishka import Scope, provide

from folio.domain.repository import PostRepository, TagRepository
from folio.domain.service import (
    BlobStore,
    ImageService,
    PostQueryService,
    PostService,
    TagService,
)
from folio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_query_service(self, tag_repository: TagRepository) -> PostQueryService:
        """Provide post query builder."""
        return PostQueryService(tag_repository=tag_repository)

    @provide
    def get_image_service(self, blob_store: BlobStore) -> ImageService:
        """Provide image domain service."""
        return ImageService(blob_store=blob_store)
