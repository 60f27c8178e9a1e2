"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

import math
import re
from enum import Enum

from pydantic import Field, field_validator

from folio.domain.value.common import RootValueObject, ValueObject

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]")


def slugify(name: str) -> str:
    """Convert a tag name to its URL-safe slug.

    Lower-cases the name and replaces every character outside ``[a-z0-9]``
    with a hyphen, one hyphen per character. Runs of hyphens are kept so the
    mapping stays a pure per-character transform.

    Args:
        name: Display name

    Returns:
        Slug string (empty for an empty name)
    """
    return _NON_SLUG_CHARS.sub("-", name.lower())


class Slug(RootValueObject[str]):
    """URL-safe tag slug.

    Lowercase alphanumerics and hyphens only.
    Examples: 'technology', 'machine-learning', 'c--'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.fullmatch(r"[a-z0-9-]*", v):
            raise ValueError("Slug must contain only lowercase letters, digits and hyphens")
        return v

    @classmethod
    def from_name(cls, name: str) -> "Slug":
        """Derive the slug for a tag name."""
        return cls(slugify(name))


class SortDirection(str, Enum):
    """Sort direction for post listings."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortDirection":
        """Only the literal "asc" sorts ascending; everything else is descending."""
        return cls.ASC if value == "asc" else cls.DESC


class ImageUpload(ValueObject):
    """An image payload received from a client, not yet stored."""

    content: bytes = Field(repr=False)
    media_type: str
    size: int = Field(ge=0)  # Declared byte size
    filename: str | None = None

    @property
    def extension(self) -> str:
        """File extension derived from the media type (``image/png`` -> ``png``)."""
        _, _, subtype = self.media_type.partition("/")
        return subtype.split("+")[0] or "bin"


class StoredBlob(ValueObject):
    """Result of a successful blob-store upload."""

    url: str
    public_id: str


class Pagination(ValueObject):
    """Pagination metadata for list responses."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def from_total(cls, page: int, limit: int, total: int) -> "Pagination":
        """Build pagination info, with ``pages = ceil(total / limit)``."""
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit))
