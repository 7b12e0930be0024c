"""Pytest configuration and fixtures."""

import pytest

from streaming_catalog.application.catalog.use_cases.category_use_case import CategoryUseCase
from streaming_catalog.domain.catalog.entities.category import Category
from streaming_catalog.infrastructure.catalog.repositories.category_repository import (
    InMemoryCategoryRepository,
)


@pytest.fixture
def valid_category() -> Category:
    """A freshly built category with valid values."""
    return Category("Category Name", "Category Description")


@pytest.fixture
def category_repository() -> InMemoryCategoryRepository:
    """An empty in-memory category repository."""
    return InMemoryCategoryRepository()


@pytest.fixture
def category_use_case(category_repository: InMemoryCategoryRepository) -> CategoryUseCase:
    """Category use case backed by the in-memory repository."""
    return CategoryUseCase(category_repository=category_repository)
