"""Immutable value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable record compared field by field, e.g. a query or an upload."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, e.g. a slug.

    ``model_dump()`` yields the primitive itself.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
