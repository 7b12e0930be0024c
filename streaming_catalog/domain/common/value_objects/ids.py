from dataclasses import dataclass
from uuid import UUID

from ..entity import EntityId


@dataclass(frozen=True)
class CategoryId(EntityId):
    """Strongly-typed category identifier."""

    value: UUID
