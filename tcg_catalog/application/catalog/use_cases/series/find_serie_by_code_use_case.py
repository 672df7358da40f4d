"""Use case for looking up a serie by code."""

from tcg_catalog.application.catalog.mappers.serie_record_mapper import SerieRecordMapper
from tcg_catalog.application.catalog.protocols.serie_repository import SerieRepositoryProtocol
from tcg_catalog.application.catalog.use_cases.dtos.serie_dtos import FindSerieByCodeQuery
from tcg_catalog.domain.catalog.entities.serie import Serie


class FindSerieByCodeUseCase:
    """Use case for looking up a serie by code."""

    def __init__(self, serie_repository: SerieRepositoryProtocol) -> None:
        self.serie_repository = serie_repository
        self.mapper = SerieRecordMapper()

    def execute(self, query: FindSerieByCodeQuery) -> Serie | None:
        """
        Find a serie by its code.

        The match is exact and case-sensitive. Absence is a normal result,
        not an error; callers decide what a missing serie means.

        Args:
            query: Code to look up

        Returns:
            The serie if found, None otherwise
        """
        record = self.serie_repository.find_serie_by_code(query.code)
        return self.mapper.to_domain(record) if record else None
