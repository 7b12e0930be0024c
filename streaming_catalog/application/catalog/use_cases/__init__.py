from .category_use_case import CategoryUseCase
from .dtos import CreateCategoryCommand, UpdateCategoryCommand

__all__ = [
    "CategoryUseCase",
    "CreateCategoryCommand",
    "UpdateCategoryCommand",
]
