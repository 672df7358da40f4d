"""Base type for read-only requests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    """Marker base for lookups (``FindSerieByIdQuery``); handling one never writes."""
