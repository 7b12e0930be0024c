"""
Category aggregate root.

A named, described classification record in the content catalog that can
be switched between active and inactive.
"""

from datetime import UTC, datetime

from streaming_catalog.domain.catalog.events import (
    CategoryActivated,
    CategoryCreated,
    CategoryDeactivated,
    CategoryUpdated,
)
from streaming_catalog.domain.common.aggregate_root import AggregateRoot
from streaming_catalog.domain.common.exceptions import EntityValidationError
from streaming_catalog.domain.common.value_objects.ids import CategoryId

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


class Category(AggregateRoot[CategoryId]):
    """
    Category aggregate root.

    Business Rules:
    - Name cannot be empty or whitespace-only
    - Name must be between 3 and 255 characters long
    - Description cannot be None (empty is allowed)
    - Description cannot exceed 10,000 characters
    - Identity and creation time never change after construction

    Lengths are counted in code points, as returned by ``len()``.
    Leading and trailing whitespace is kept as given.
    """

    def __init__(
        self,
        name: str | None,
        description: str | None,
        is_active: bool = True,
    ) -> None:
        """
        Create a new category.

        Raises:
            EntityValidationError: If name or description break an invariant
        """
        super().__init__()
        self.validate(name, description)

        self._id = CategoryId.generate()
        self._name: str = name  # type: ignore[assignment]
        self._description: str = description  # type: ignore[assignment]
        self._is_active = is_active
        self._created_at = datetime.now(UTC)

        self._record_event(CategoryCreated(category_id=self._id, name=self._name))

    # Accessors

    @property
    def id(self) -> CategoryId:  # type: ignore[override]
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    # Command methods (state changes)

    def activate(self) -> None:
        """Mark the category as active. Safe to call when already active."""
        self._is_active = True
        self._record_event(CategoryActivated(category_id=self._id))

    def deactivate(self) -> None:
        """Mark the category as inactive. Safe to call when already inactive."""
        self._is_active = False
        self._record_event(CategoryDeactivated(category_id=self._id))

    def update(self, name: str | None, description: str | None = None) -> None:
        """
        Replace the name and, optionally, the description.

        Both values are validated before either is assigned, so a failed
        update leaves the category untouched.

        Args:
            name: New name
            description: New description, or None to keep the current one

        Raises:
            EntityValidationError: If the resulting values break an invariant
        """
        new_description = self._description if description is None else description
        self.validate(name, new_description)

        description_changed = new_description != self._description
        self._name = name  # type: ignore[assignment]
        self._description = new_description

        self._record_event(
            CategoryUpdated(
                category_id=self._id,
                name=self._name,
                description_changed=description_changed,
            )
        )

    # Validation

    @staticmethod
    def validate(name: str | None, description: str | None) -> None:
        """
        Run the category validation pipeline.

        Description checks run before name checks and only the first
        violation is reported.

        Raises:
            EntityValidationError: On the first broken invariant
        """
        if description is None:
            raise EntityValidationError("Description should not be null", field="description")
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise EntityValidationError(
                "Description should be less or equal 10.000 characters long",
                field="description",
            )
        if not name or not name.strip():
            raise EntityValidationError("Name should not be empty or null", field="name")
        if len(name) < NAME_MIN_LENGTH:
            raise EntityValidationError(
                "Name should be at leats 3 characters long", field="name"
            )
        if len(name) > NAME_MAX_LENGTH:
            raise EntityValidationError(
                "Name should be less or equal 255 characters long", field="name"
            )

    # Factory methods

    @classmethod
    def create_with_id(
        cls,
        id: CategoryId,
        name: str,
        description: str,
        is_active: bool,
        created_at: datetime,
    ) -> "Category":
        """
        Reconstitute a category from persistence.

        The stored values go through the same validation as new ones.
        No events are recorded.

        Raises:
            EntityValidationError: If name or description break an invariant
            ValueError: If created_at has no timezone
        """
        if created_at.tzinfo is None or created_at.utcoffset() is None:
            raise ValueError("Category created_at must be timezone-aware")

        category = cls(name, description, is_active)
        category._id = id
        category._created_at = created_at
        category._events.clear()
        return category
