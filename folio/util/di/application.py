"""Application layer DI providers."""

from dishka import Scope, provide

from folio.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from folio.application.usecase.search import SearchPostsUseCase
from folio.application.usecase.tag import CreateTagUseCase, ListTagsUseCase
from folio.domain.service import (
    ImageService,
    PostQueryService,
    PostService,
    TagService,
)
from folio.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        image_service: ImageService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            tag_service=tag_service,
            image_service=image_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, tag_service: TagService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        query_service: PostQueryService,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            tag_service=tag_service,
            query_service=query_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        image_service: ImageService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            tag_service=tag_service,
            image_service=image_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, post_service: PostService, image_service: ImageService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service, image_service=image_service
        )

    # Search use cases
    @provide(scope=Scope.REQUEST)
    def get_search_posts_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        query_service: PostQueryService,
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(
            post_service=post_service,
            tag_service=tag_service,
            query_service=query_service,
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_create_tag_use_case(self, tag_service: TagService) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_service=tag_service)
