"""
Result type for use case outcomes.

Use cases hand back either a Success carrying the value or a Failure
carrying the domain error, so callers branch on the outcome instead of
catching exceptions.

Example:
    result = use_case.create_category(CreateCategoryCommand(name="Drama", description=""))
    if result.is_success:
        category = result.unwrap()
    else:
        error = result.unwrap_error()
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped value type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome holding a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        raise ValueError("Cannot get error from Success result")

    def value_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        """Apply a function to the success value."""
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain a step that can itself fail."""
        return fn(self.value)

    def map_error(self, fn: Callable[[E], U]) -> "Success[T]":
        return self

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome holding an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        raise ValueError(f"Cannot get value from Failure result: {self.error}")

    def unwrap_error(self) -> E:
        return self.error

    def value_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[T], U]) -> "Failure[E]":
        """Failures pass through unchanged."""
        return self

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Failure[E]":
        return self

    def map_error(self, fn: Callable[[E], U]) -> "Failure[U]":
        """Translate the error, e.g. into a caller-facing type."""
        return Failure(fn(self.error))

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Success[T] | Failure[E]
