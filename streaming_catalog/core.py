from dependency_injector import containers, providers

from streaming_catalog.application.catalog.use_cases.category_use_case import CategoryUseCase
from streaming_catalog.infrastructure.catalog.repositories.category_repository import (
    InMemoryCategoryRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Repositories
    category_repository = providers.Singleton(InMemoryCategoryRepository)

    # Catalog module, application use cases
    category_use_case = providers.Factory(
        CategoryUseCase,
        category_repository=category_repository,
    )


# Initialize container
container = Container()
