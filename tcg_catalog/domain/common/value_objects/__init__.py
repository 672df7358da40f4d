"""Common value objects shared across all domain modules."""

from .ids import SerieId

__all__ = [
    "SerieId",
]
