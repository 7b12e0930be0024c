"""
Base class for Domain Events.

Aggregates record events as they change; the application layer collects
them after each command and logs them as flat dictionaries.
"""

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from uuid import UUID, uuid4

from .entity import EntityId


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for Domain Events.

    Subclasses are frozen, keyword-only dataclasses named in past tense
    (CategoryCreated, not CreateCategory).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Flatten the event into log-friendly primitives."""
        payload: dict[str, object] = {"event_type": self.event_type}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, EntityId):
                value = value.to_primitive()
            elif isinstance(value, UUID):
                value = str(value)
            elif isinstance(value, datetime):
                value = value.isoformat()
            payload[f.name] = value
        return payload
