"""Catalog domain exceptions."""

from streaming_catalog.domain.common.exceptions import EntityNotFoundError


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category cannot be found."""

    def __init__(self, category_id: object) -> None:
        super().__init__("Category", category_id)
