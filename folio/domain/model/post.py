"""Post aggregate root."""

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import PostId, TagId

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 5000


class Post(DomainModel):
    """Post aggregate root.

    A post always carries an image: ``image_url`` points at a blob that was
    uploaded before the post was persisted. Tags are referenced by id in the
    order they were supplied; the list may repeat an id.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    image_url: str = Field(min_length=1)
    tag_ids: list[TagId] = Field(default_factory=list)
