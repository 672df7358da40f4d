"""Validator strategies for serie mutations."""

from dataclasses import dataclass

from tcg_catalog.domain.catalog.entities.serie import Serie
from tcg_catalog.domain.catalog.exceptions import (
    InvalidSerieDataError,
    SerieAlreadyExistsError,
    SerieNotFoundError,
)
from tcg_catalog.domain.catalog.validation.validator_strategy import SerieExistenceReader
from tcg_catalog.domain.common.value_objects.ids import SerieId


@dataclass(frozen=True)
class IdExistsCheck:
    """The candidate must carry an id, and that id must be stored."""

    repository: SerieExistenceReader

    def execute(self, candidate: Serie) -> None:
        if candidate.id is None:
            raise InvalidSerieDataError("Invalid serie id", field="id")
        if not self.repository.exists_serie_by_id(candidate.id):
            raise SerieNotFoundError(candidate.id)


@dataclass(frozen=True)
class SerieIdExistsCheck:
    """A bare serie id must be stored."""

    repository: SerieExistenceReader

    def execute(self, candidate: SerieId) -> None:
        if not self.repository.exists_serie_by_id(candidate):
            raise SerieNotFoundError(candidate)


@dataclass(frozen=True)
class CodeExistsCheck:
    """
    No stored serie may already use the candidate's code.

    With ``exclude_self`` the candidate's own record is ignored, so an
    update that keeps its code is not reported as a conflict.
    """

    repository: SerieExistenceReader
    exclude_self: bool = False

    def execute(self, candidate: Serie) -> None:
        exclude_id = candidate.id if self.exclude_self else None
        if self.repository.exists_serie_by_code(candidate.code, exclude_id=exclude_id):
            raise SerieAlreadyExistsError("code", candidate.code)


@dataclass(frozen=True)
class NameExistsCheck:
    """No stored serie may already use the candidate's name."""

    repository: SerieExistenceReader
    exclude_self: bool = False

    def execute(self, candidate: Serie) -> None:
        exclude_id = candidate.id if self.exclude_self else None
        if self.repository.exists_serie_by_name(candidate.name, exclude_id=exclude_id):
            raise SerieAlreadyExistsError("name", candidate.name)
