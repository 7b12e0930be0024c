"""Shared value objects."""

from .ids import CategoryId

__all__ = [
    "CategoryId",
]
