"""
Domain layer.

The domain layer contains the core business rules of the catalog.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Objects with identity and lifecycle (Serie)
- Value Objects: Immutable objects defined by attributes (Expansion, SerieId)
- Validation: Ordered business-rule checks run before mutations
"""
