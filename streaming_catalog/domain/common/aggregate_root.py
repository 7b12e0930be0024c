"""
Base class for Aggregate Roots.

Aggregate Roots are the entry point to an aggregate - a cluster of domain
objects that are treated as a single unit. All external references should
go through the aggregate root, and all invariants are enforced here.

Example:
    class Category(AggregateRoot[CategoryId]):
        def __init__(self, name: str) -> None:
            super().__init__()
            self._id = CategoryId.generate()
            self._name = name

        def rename(self, name: str) -> None:
            self._name = name
            self._record_event(CategoryUpdated(category_id=self._id))
"""

from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots are:
    - Entry point to an aggregate (cluster of related entities)
    - Responsible for maintaining invariants
    - The only entity referenced from outside the aggregate
    - Can record domain events for later dispatch

    Subclasses must call ``super().__init__()`` before recording events.
    """

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []

    def _record_event(self, event: DomainEvent) -> None:
        """Record a domain event to be dispatched later."""
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """
        Collect and clear all recorded domain events.

        This is called by the application layer after the aggregate
        has been handed to its repository.
        """
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()
