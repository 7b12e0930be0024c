"""
Use case for managing catalog categories.

Wraps the Category aggregate for callers: every outcome is returned as a
Result so validation failures and unknown ids never escape as exceptions.
"""

import structlog

from streaming_catalog.application.catalog.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from streaming_catalog.application.catalog.use_cases.dtos import (
    CreateCategoryCommand,
    UpdateCategoryCommand,
)
from streaming_catalog.application.common.result import Failure, Result, Success
from streaming_catalog.domain.catalog.entities.category import Category
from streaming_catalog.domain.catalog.exceptions import CategoryNotFoundError
from streaming_catalog.domain.common.exceptions import DomainError, EntityValidationError
from streaming_catalog.domain.common.value_objects.ids import CategoryId

logger = structlog.get_logger(__name__)


class CategoryUseCase:
    """Use case for creating, updating and toggling categories."""

    def __init__(self, category_repository: CategoryRepositoryProtocol) -> None:
        """
        Initialize use case with dependencies.

        Args:
            category_repository: Category repository protocol implementation
        """
        self.category_repository = category_repository

    def create_category(self, command: CreateCategoryCommand) -> Result[Category, DomainError]:
        """
        Create and store a new category.

        Args:
            command: Name, description and initial active flag

        Returns:
            Success with the stored category, or Failure with the
            EntityValidationError explaining the rejected value
        """
        try:
            category = Category(command.name, command.description, command.is_active)
        except EntityValidationError as e:
            logger.info(
                "category_validation_failed",
                operation="create",
                field=e.field,
                reason=e.message,
            )
            return Failure(e)

        saved = self._store(category)

        logger.info("created_category", category_id=str(saved.id), is_active=saved.is_active)
        return Success(saved)

    def update_category(self, command: UpdateCategoryCommand) -> Result[Category, DomainError]:
        """
        Update a category's name and, optionally, its description.

        Args:
            command: Target id, new name and optional new description

        Returns:
            Success with the stored category, or Failure with
            CategoryNotFoundError / EntityValidationError
        """
        lookup = self._load(command.category_id)
        if lookup.is_failure:
            return lookup
        category = lookup.unwrap()

        try:
            category.update(command.name, command.description)
        except EntityValidationError as e:
            logger.info(
                "category_validation_failed",
                operation="update",
                category_id=command.category_id,
                field=e.field,
                reason=e.message,
            )
            return Failure(e)

        saved = self._store(category)

        logger.info("updated_category", category_id=command.category_id, name=saved.name)
        return Success(saved)

    def activate_category(self, category_id: str) -> Result[Category, DomainError]:
        """Mark a category as active."""
        lookup = self._load(category_id)
        if lookup.is_failure:
            return lookup
        category = lookup.unwrap()

        category.activate()
        saved = self._store(category)

        logger.info("activated_category", category_id=category_id)
        return Success(saved)

    def deactivate_category(self, category_id: str) -> Result[Category, DomainError]:
        """Mark a category as inactive."""
        lookup = self._load(category_id)
        if lookup.is_failure:
            return lookup
        category = lookup.unwrap()

        category.deactivate()
        saved = self._store(category)

        logger.info("deactivated_category", category_id=category_id)
        return Success(saved)

    def get_category(self, category_id: str) -> Result[Category, DomainError]:
        """Get a single category by id."""
        return self._load(category_id)

    def list_categories(self, active_only: bool = False) -> list[Category]:
        """
        List stored categories.

        Args:
            active_only: Only return active categories

        Returns:
            Categories ordered by creation time
        """
        return self.category_repository.find_all(active_only=active_only)

    def delete_category(self, category_id: str) -> Result[None, DomainError]:
        """Remove a category from the store."""
        lookup = self._load(category_id)
        if lookup.is_failure:
            return Failure(lookup.unwrap_error())

        self.category_repository.delete(lookup.unwrap().id)

        logger.info("deleted_category", category_id=category_id)
        return Success(None)

    def _store(self, category: Category) -> Category:
        """Save a category and log the events it recorded since the last save."""
        events = category.collect_events()
        saved = self.category_repository.save(category)
        for event in events:
            logger.info("recorded_category_event", **event.to_dict())
        return saved

    def _load(self, category_id: str) -> Result[Category, DomainError]:
        try:
            category_id_vo = CategoryId.from_string(category_id)
        except ValueError:
            # Malformed and nil ids can never match a stored category
            return Failure(CategoryNotFoundError(category_id))

        category = self.category_repository.find_by_id(category_id_vo)
        if category is None:
            logger.info("category_not_found", category_id=category_id)
            return Failure(CategoryNotFoundError(category_id))
        return Success(category)
