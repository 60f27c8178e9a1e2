"""Base model for domain entities."""

from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Immutable entity with creation and last-update timestamps.

    Entities are never mutated in place; changes produce a new instance.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def touched(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied and ``updated_at`` set to now."""
        return self.model_copy(update={**changes, "updated_at": datetime.now()})
