"""
Base classes for entities and their identifiers.

An entity that has not been stored yet carries ``id = None``; identity is
assigned by the persistence layer.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar
from uuid import UUID

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed, UUID-backed entity identifiers.

    Example:
        @dataclass(frozen=True)
        class SerieId(EntityId):
            pass

        serie_id = SerieId(uuid4())
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type ``IdType | None``.
    """

    id: IdType | None

    @property
    def is_persisted(self) -> bool:
        """Whether the persistence layer has assigned an identity."""
        return self.id is not None
