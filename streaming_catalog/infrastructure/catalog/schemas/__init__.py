from .category_schemas import CategorySnapshot

__all__ = ["CategorySnapshot"]
