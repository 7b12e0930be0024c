"""Catalog module domain layer."""

from .entities import Category
from .exceptions import CategoryNotFoundError

__all__ = [
    "Category",
    "CategoryNotFoundError",
]
