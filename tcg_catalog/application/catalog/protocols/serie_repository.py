"""Protocol for the Serie repository port in catalog context."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from tcg_catalog.application.common.pagination import Page
from tcg_catalog.domain.common.value_objects.ids import SerieId


@dataclass(frozen=True)
class SerieRecord:
    """
    Persistence-shaped serie, as exchanged with the repository port.

    Expansions are flattened into a single delimited string (or None when
    the serie has none). Use SerieRecordMapper to convert to and from the
    domain Serie; the delimited form never reaches the domain.
    """

    id: UUID | None
    code: str
    name: str
    release_year: int
    image_url: str | None
    expansions: str | None
    created_at: datetime
    updated_at: datetime | None


class SerieRepositoryProtocol(Protocol):
    """
    Protocol for Serie repository operations in catalog context.

    Each method is a single logical unit of work; no transaction spans
    more than one call.
    """

    def find_all_series(self, page: int, page_size: int) -> Page[SerieRecord]:
        """
        Get one page of series.

        Args:
            page: Zero-based page index
            page_size: Number of records per page

        Returns:
            Page of records with its metadata
        """
        ...

    def find_serie_by_id(self, serie_id: SerieId) -> SerieRecord | None:
        """
        Find a serie by ID.

        Returns:
            The record if found, None otherwise
        """
        ...

    def find_serie_by_code(self, code: str) -> SerieRecord | None:
        """
        Find a serie by its exact, case-sensitive code.

        Returns:
            The record if found, None otherwise
        """
        ...

    def create_serie(self, record: SerieRecord) -> SerieRecord:
        """
        Store a new serie.

        Returns:
            The stored record, with its assigned id

        Raises:
            SerieAlreadyExistsError: If storage rejects a duplicate code or name
        """
        ...

    def update_serie(self, record: SerieRecord) -> SerieRecord:
        """
        Overwrite a stored serie.

        Returns:
            The stored record after the update

        Raises:
            SerieNotFoundError: If the record no longer exists
            SerieAlreadyExistsError: If storage rejects a duplicate code or name
        """
        ...

    def delete_serie_by_id(self, serie_id: SerieId) -> None:
        """Delete a serie. Does nothing if it does not exist."""
        ...

    def exists_serie_by_id(self, serie_id: SerieId) -> bool:
        """Check whether a serie with this id is stored."""
        ...

    def exists_serie_by_code(self, code: str, exclude_id: SerieId | None = None) -> bool:
        """
        Check whether a serie uses this code.

        Args:
            code: Code to look for
            exclude_id: A serie to ignore (the one being updated)
        """
        ...

    def exists_serie_by_name(self, name: str, exclude_id: SerieId | None = None) -> bool:
        """
        Check whether a serie uses this name.

        Args:
            name: Name to look for
            exclude_id: A serie to ignore (the one being updated)
        """
        ...
