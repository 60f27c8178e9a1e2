"""Tag entity for categorizing posts."""

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import Slug, TagId

TAG_NAME_MAX_LENGTH = 50


class Tag(DomainModel):
    """Tag entity for categorizing posts.

    Tags are created on first use and never deleted. The slug is derived from
    the name when the tag is created and is unique across all tags.
    """

    id: TagId
    name: str = Field(max_length=TAG_NAME_MAX_LENGTH)
    slug: Slug
