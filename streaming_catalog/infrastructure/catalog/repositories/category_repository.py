"""In-memory repository for Category domain entity."""

from uuid import UUID

import structlog

from streaming_catalog.domain.catalog.entities.category import Category
from streaming_catalog.domain.common.value_objects.ids import CategoryId
from streaming_catalog.infrastructure.catalog.mappers.category_mapper import CategoryMapper
from streaming_catalog.infrastructure.catalog.schemas.category_schemas import CategorySnapshot

logger = structlog.get_logger(__name__)


class InMemoryCategoryRepository:
    """
    Repository keeping category snapshots in a dict.

    Entities are converted to snapshots on save and rebuilt on every read,
    so callers always get their own copy and unsaved changes stay out of
    the store.
    """

    def __init__(self) -> None:
        self._snapshots: dict[UUID, CategorySnapshot] = {}
        self.mapper = CategoryMapper()

    def save(self, category: Category) -> Category:
        snapshot = self.mapper.to_snapshot(category)
        is_new = snapshot.id not in self._snapshots
        self._snapshots[snapshot.id] = snapshot

        logger.debug("stored_category", category_id=str(snapshot.id), is_new=is_new)
        return self.mapper.to_domain(snapshot)

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        snapshot = self._snapshots.get(category_id.value)
        if snapshot is None:
            return None
        return self.mapper.to_domain(snapshot)

    def find_all(self, active_only: bool = False) -> list[Category]:
        """
        Get all stored categories ordered by creation time, then name.

        Args:
            active_only: Only return active categories

        Returns:
            List of category entities
        """
        snapshots = sorted(self._snapshots.values(), key=lambda s: (s.created_at, s.name))
        if active_only:
            snapshots = [s for s in snapshots if s.is_active]
        return [self.mapper.to_domain(s) for s in snapshots]

    def delete(self, category_id: CategoryId) -> bool:
        removed = self._snapshots.pop(category_id.value, None)
        if removed is not None:
            logger.debug("removed_category", category_id=str(category_id))
        return removed is not None
