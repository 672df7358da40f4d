"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- DomainError and its kinds: the error taxonomy shared by every module
"""

from .entity import Entity, EntityId
from .exceptions import (
    DomainError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityAlreadyExistsError",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
    "ValueObject",
]
