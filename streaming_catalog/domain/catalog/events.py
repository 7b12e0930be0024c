"""Domain events recorded by the Category aggregate."""

from dataclasses import dataclass

from streaming_catalog.domain.common.domain_event import DomainEvent
from streaming_catalog.domain.common.value_objects.ids import CategoryId


@dataclass(frozen=True, kw_only=True)
class CategoryCreated(DomainEvent):
    category_id: CategoryId
    name: str


@dataclass(frozen=True, kw_only=True)
class CategoryUpdated(DomainEvent):
    category_id: CategoryId
    name: str
    description_changed: bool


@dataclass(frozen=True, kw_only=True)
class CategoryActivated(DomainEvent):
    category_id: CategoryId


@dataclass(frozen=True, kw_only=True)
class CategoryDeactivated(DomainEvent):
    category_id: CategoryId
