"""Tests for entity identifiers and domain exceptions."""

from uuid import UUID, uuid4

import pytest

from streaming_catalog.domain.common.exceptions import (
    DomainError,
    EntityValidationError,
    ValidationError,
)
from streaming_catalog.domain.common.value_objects.ids import CategoryId


class TestCategoryId:
    """Test suite for CategoryId value object."""

    def test_generate_is_unique(self) -> None:
        assert CategoryId.generate() != CategoryId.generate()

    def test_equality_by_value(self) -> None:
        raw = uuid4()
        assert CategoryId(raw) == CategoryId(raw)
        assert hash(CategoryId(raw)) == hash(CategoryId(raw))

    def test_nil_uuid_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            CategoryId(UUID(int=0))

    def test_non_uuid_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            CategoryId("not-a-uuid")  # type: ignore[arg-type]

    def test_from_string_round_trip(self) -> None:
        category_id = CategoryId.generate()

        assert CategoryId.from_string(str(category_id)) == category_id
        assert category_id.to_primitive() == str(category_id.value)

    def test_from_string_invalid(self) -> None:
        with pytest.raises(ValueError):
            CategoryId.from_string("not-a-uuid")

    def test_is_frozen(self) -> None:
        category_id = CategoryId.generate()
        with pytest.raises(AttributeError):
            category_id.value = uuid4()  # type: ignore[misc]


class TestEntityValidationError:
    """The validation error surfaces its message verbatim."""

    def test_message_has_no_details(self) -> None:
        error = EntityValidationError("Name should not be empty or null", field="name")

        assert str(error) == "Name should not be empty or null"
        assert error.message == "Name should not be empty or null"
        assert error.details == {}
        assert error.field == "name"

    def test_is_a_domain_validation_error(self) -> None:
        error = EntityValidationError("Description should not be null")

        assert isinstance(error, ValidationError)
        assert isinstance(error, DomainError)

    def test_plain_validation_error_includes_details(self) -> None:
        error = ValidationError("Bad value", field="name", value="x")

        assert str(error) == "Bad value - {'field': 'name', 'value': 'x'}"
