"""Use case for listing series page by page."""

from tcg_catalog.application.catalog.mappers.serie_record_mapper import SerieRecordMapper
from tcg_catalog.application.catalog.protocols.serie_repository import SerieRepositoryProtocol
from tcg_catalog.application.catalog.use_cases.dtos.serie_dtos import FindAllSerieQuery
from tcg_catalog.application.common.pagination import Page
from tcg_catalog.domain.catalog.entities.serie import Serie


class FindAllSeriesUseCase:
    """Use case for listing series page by page."""

    def __init__(self, serie_repository: SerieRepositoryProtocol) -> None:
        self.serie_repository = serie_repository
        self.mapper = SerieRecordMapper()

    def execute(self, query: FindAllSerieQuery) -> Page[Serie]:
        """
        Get one page of series.

        Page metadata is passed through exactly as the repository computed it;
        only the content is mapped to domain series.
        """
        records = self.serie_repository.find_all_series(query.page, query.page_size)
        return records.map(self.mapper.to_domain)
