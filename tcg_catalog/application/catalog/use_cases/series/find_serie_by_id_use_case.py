"""Use case for looking up a serie by id."""

from tcg_catalog.application.catalog.mappers.serie_record_mapper import SerieRecordMapper
from tcg_catalog.application.catalog.protocols.serie_repository import SerieRepositoryProtocol
from tcg_catalog.application.catalog.use_cases.dtos.serie_dtos import FindSerieByIdQuery
from tcg_catalog.domain.catalog.entities.serie import Serie


class FindSerieByIdUseCase:
    """Use case for looking up a serie by id."""

    def __init__(self, serie_repository: SerieRepositoryProtocol) -> None:
        self.serie_repository = serie_repository
        self.mapper = SerieRecordMapper()

    def execute(self, query: FindSerieByIdQuery) -> Serie | None:
        """Return the serie, or None when no serie has this id."""
        record = self.serie_repository.find_serie_by_id(query.id)
        return self.mapper.to_domain(record) if record else None
