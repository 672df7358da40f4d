"""Base type for requests that change stored series."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """
    Marker base for write requests handed to a use case.

    Subclasses are frozen dataclasses named after the operation they ask
    for (``CreateSerieCommand``). They only carry input; the entity and the
    operation's validation pipeline decide whether it is acceptable.
    """
