"""
Domain layer.

The domain layer contains the core business logic of the catalog.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects defined by attributes
- Aggregate Roots: Consistency boundaries
- Domain Events: Records of state changes
"""
