"""Mapper for CategorySnapshot ↔ Domain conversion."""

from streaming_catalog.domain.catalog.entities.category import Category
from streaming_catalog.domain.common.value_objects.ids import CategoryId
from streaming_catalog.infrastructure.catalog.schemas.category_schemas import CategorySnapshot


class CategoryMapper:
    """Mapper for CategorySnapshot ↔ Domain conversion."""

    def to_domain(self, snapshot: CategorySnapshot) -> Category:
        """Convert a stored snapshot to a domain entity."""
        return Category.create_with_id(
            id=CategoryId(snapshot.id),
            name=snapshot.name,
            description=snapshot.description,
            is_active=snapshot.is_active,
            created_at=snapshot.created_at,
        )

    def to_snapshot(self, entity: Category) -> CategorySnapshot:
        """Convert a domain entity to a snapshot."""
        return CategorySnapshot(
            id=entity.id.value,
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )
