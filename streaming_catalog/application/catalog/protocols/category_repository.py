"""Protocol for Category repository."""

from typing import Protocol

from streaming_catalog.domain.catalog.entities.category import Category
from streaming_catalog.domain.common.value_objects.ids import CategoryId


class CategoryRepositoryProtocol(Protocol):
    """Protocol for Category repository operations."""

    def save(self, category: Category) -> Category:
        """
        Store the current state of a category.

        Args:
            category: The category to store (new or existing)

        Returns:
            The category as it now exists in the store
        """
        ...

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        """
        Get a category by its ID.

        Args:
            category_id: The category ID

        Returns:
            The category, or None if not found
        """
        ...

    def find_all(self, active_only: bool = False) -> list[Category]:
        """
        Get all stored categories.

        Args:
            active_only: Only return active categories

        Returns:
            List of category entities
        """
        ...

    def delete(self, category_id: CategoryId) -> bool:
        """
        Remove a category.

        Args:
            category_id: The category ID

        Returns:
            True if a category was removed, False if none existed
        """
        ...
