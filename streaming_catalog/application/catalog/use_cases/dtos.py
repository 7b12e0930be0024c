"""Commands accepted by the category use case."""

from dataclasses import dataclass

from streaming_catalog.application.common.command import Command


@dataclass(frozen=True)
class CreateCategoryCommand(Command):
    name: str | None
    description: str | None
    is_active: bool = True


@dataclass(frozen=True)
class UpdateCategoryCommand(Command):
    """Rename a category. A None description keeps the current one."""

    category_id: str
    name: str | None
    description: str | None = None
