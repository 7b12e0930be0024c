from .category_mapper import CategoryMapper

__all__ = ["CategoryMapper"]
