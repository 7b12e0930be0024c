"""Tests for CategoryUseCase."""

from uuid import uuid4

import pytest
import structlog
from structlog.testing import capture_logs

from streaming_catalog.application.catalog.use_cases import (
    category_use_case as category_use_case_module,
)
from streaming_catalog.application.catalog.use_cases.category_use_case import CategoryUseCase
from streaming_catalog.application.catalog.use_cases.dtos import (
    CreateCategoryCommand,
    UpdateCategoryCommand,
)
from streaming_catalog.domain.catalog.exceptions import CategoryNotFoundError
from streaming_catalog.domain.common.exceptions import EntityValidationError
from streaming_catalog.infrastructure.catalog.repositories.category_repository import (
    InMemoryCategoryRepository,
)


def _create(use_case: CategoryUseCase, name: str = "Category Name", is_active: bool = True) -> str:
    command = CreateCategoryCommand(
        name=name, description="Category Description", is_active=is_active
    )
    return str(use_case.create_category(command).unwrap().id)


class TestCreateCategory:
    def test_create_stores_category(
        self,
        category_use_case: CategoryUseCase,
        category_repository: InMemoryCategoryRepository,
    ) -> None:
        result = category_use_case.create_category(
            CreateCategoryCommand(name="Drama", description="Scripted drama")
        )

        assert result.is_success
        category = result.unwrap()
        assert category.name == "Drama"
        assert category.is_active is True
        assert category_repository.find_by_id(category.id) == category

    def test_create_inactive(self, category_use_case: CategoryUseCase) -> None:
        result = category_use_case.create_category(
            CreateCategoryCommand(name="Drama", description="", is_active=False)
        )

        assert result.unwrap().is_active is False

    def test_create_invalid_returns_failure(
        self,
        category_use_case: CategoryUseCase,
        category_repository: InMemoryCategoryRepository,
    ) -> None:
        result = category_use_case.create_category(
            CreateCategoryCommand(name="ab", description="Category Description")
        )

        assert result.is_failure
        error = result.unwrap_error()
        assert isinstance(error, EntityValidationError)
        assert error.message == "Name should be at leats 3 characters long"
        assert category_repository.find_all() == []

    def test_create_null_description_returns_failure(
        self, category_use_case: CategoryUseCase
    ) -> None:
        result = category_use_case.create_category(
            CreateCategoryCommand(name="Category Name", description=None)
        )

        assert str(result.unwrap_error()) == "Description should not be null"


class TestUpdateCategory:
    def test_update_name_and_description(self, category_use_case: CategoryUseCase) -> None:
        category_id = _create(category_use_case)

        result = category_use_case.update_category(
            UpdateCategoryCommand(
                category_id=category_id, name="New Name", description="New Description"
            )
        )

        stored = category_use_case.get_category(category_id).unwrap()
        assert result.unwrap().name == "New Name"
        assert (stored.name, stored.description) == ("New Name", "New Description")

    def test_update_only_name(self, category_use_case: CategoryUseCase) -> None:
        category_id = _create(category_use_case)

        category_use_case.update_category(
            UpdateCategoryCommand(category_id=category_id, name="New Name")
        )

        stored = category_use_case.get_category(category_id).unwrap()
        assert (stored.name, stored.description) == ("New Name", "Category Description")

    def test_invalid_update_leaves_stored_category_unchanged(
        self, category_use_case: CategoryUseCase
    ) -> None:
        category_id = _create(category_use_case)

        result = category_use_case.update_category(
            UpdateCategoryCommand(category_id=category_id, name="a", description="Valid")
        )

        assert isinstance(result.unwrap_error(), EntityValidationError)
        stored = category_use_case.get_category(category_id).unwrap()
        assert (stored.name, stored.description) == ("Category Name", "Category Description")

    def test_update_unknown_category(self, category_use_case: CategoryUseCase) -> None:
        result = category_use_case.update_category(
            UpdateCategoryCommand(category_id=str(uuid4()), name="New Name")
        )

        assert isinstance(result.unwrap_error(), CategoryNotFoundError)


class TestActivation:
    def test_deactivate_then_activate(self, category_use_case: CategoryUseCase) -> None:
        category_id = _create(category_use_case)

        assert category_use_case.deactivate_category(category_id).unwrap().is_active is False
        assert category_use_case.get_category(category_id).unwrap().is_active is False

        assert category_use_case.activate_category(category_id).unwrap().is_active is True
        assert category_use_case.get_category(category_id).unwrap().is_active is True

    def test_activate_unknown_category(self, category_use_case: CategoryUseCase) -> None:
        result = category_use_case.activate_category(str(uuid4()))

        assert isinstance(result.unwrap_error(), CategoryNotFoundError)

    def test_deactivate_unknown_category(self, category_use_case: CategoryUseCase) -> None:
        result = category_use_case.deactivate_category(str(uuid4()))

        assert result.is_failure


class TestQueries:
    def test_get_malformed_id(self, category_use_case: CategoryUseCase) -> None:
        result = category_use_case.get_category("not-a-uuid")

        assert isinstance(result.unwrap_error(), CategoryNotFoundError)

    def test_get_nil_id(self, category_use_case: CategoryUseCase) -> None:
        result = category_use_case.get_category("00000000-0000-0000-0000-000000000000")

        assert result.is_failure

    def test_list_categories(self, category_use_case: CategoryUseCase) -> None:
        _create(category_use_case, name="Action")
        _create(category_use_case, name="Comedy", is_active=False)

        all_names = [c.name for c in category_use_case.list_categories()]
        active_names = [c.name for c in category_use_case.list_categories(active_only=True)]

        assert sorted(all_names) == ["Action", "Comedy"]
        assert active_names == ["Action"]


class TestDeleteCategory:
    def test_delete(self, category_use_case: CategoryUseCase) -> None:
        category_id = _create(category_use_case)

        result = category_use_case.delete_category(category_id)

        assert result.is_success
        assert category_use_case.get_category(category_id).is_failure

    def test_delete_unknown_category(self, category_use_case: CategoryUseCase) -> None:
        result = category_use_case.delete_category(str(uuid4()))

        assert isinstance(result.unwrap_error(), CategoryNotFoundError)


class TestEventLogging:
    @pytest.fixture(autouse=True)
    def uncached_logger(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Use a fresh logger so captured output does not depend on earlier configuration."""
        monkeypatch.setattr(category_use_case_module, "logger", structlog.get_logger())

    @staticmethod
    def _recorded(logs: list[dict[str, object]]) -> list[dict[str, object]]:
        return [entry for entry in logs if entry["event"] == "recorded_category_event"]

    def test_create_logs_created_event(self, category_use_case: CategoryUseCase) -> None:
        with capture_logs() as logs:
            category_id = _create(category_use_case)

        (entry,) = self._recorded(logs)
        assert entry["event_type"] == "CategoryCreated"
        assert entry["category_id"] == category_id
        assert entry["name"] == "Category Name"
        assert isinstance(entry["event_id"], str)
        assert isinstance(entry["occurred_at"], str)

    def test_every_command_logs_its_event(self, category_use_case: CategoryUseCase) -> None:
        category_id = _create(category_use_case)

        with capture_logs() as logs:
            category_use_case.update_category(
                UpdateCategoryCommand(category_id=category_id, name="New Name")
            )
            category_use_case.deactivate_category(category_id)
            category_use_case.activate_category(category_id)

        assert [entry["event_type"] for entry in self._recorded(logs)] == [
            "CategoryUpdated",
            "CategoryDeactivated",
            "CategoryActivated",
        ]
        assert all(entry["category_id"] == category_id for entry in self._recorded(logs))

    def test_failed_update_logs_no_event(self, category_use_case: CategoryUseCase) -> None:
        category_id = _create(category_use_case)

        with capture_logs() as logs:
            category_use_case.update_category(
                UpdateCategoryCommand(category_id=category_id, name="a")
            )

        assert self._recorded(logs) == []
        assert any(entry["event"] == "category_validation_failed" for entry in logs)
