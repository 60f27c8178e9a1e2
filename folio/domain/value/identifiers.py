"""Strongly typed identifiers for domain entities."""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
TagId = NewType("TagId", UUID)
