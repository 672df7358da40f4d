from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class SerieId(EntityId):
    """Strongly-typed serie identifier."""
