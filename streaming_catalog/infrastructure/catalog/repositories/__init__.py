from .category_repository import InMemoryCategoryRepository

__all__ = ["InMemoryCategoryRepository"]
