"""Use case for creating series."""

import structlog

from tcg_catalog.application.catalog.mappers.serie_record_mapper import SerieRecordMapper
from tcg_catalog.application.catalog.protocols.serie_repository import SerieRepositoryProtocol
from tcg_catalog.application.catalog.use_cases.dtos.serie_dtos import CreateSerieCommand
from tcg_catalog.domain.catalog.entities.serie import Serie
from tcg_catalog.domain.catalog.validation.pipeline import ValidationPipeline

logger = structlog.get_logger(__name__)


class CreateSerieUseCase:
    """Use case for creating series."""

    def __init__(
        self,
        serie_repository: SerieRepositoryProtocol,
        validation_pipeline: ValidationPipeline[Serie],
    ) -> None:
        self.serie_repository = serie_repository
        self.validation_pipeline = validation_pipeline
        self.mapper = SerieRecordMapper()

    def execute(self, command: CreateSerieCommand) -> Serie:
        """
        Create a new serie.

        Args:
            command: Details of the serie to create

        Returns:
            The stored serie, with its assigned id

        Raises:
            InvalidSerieDataError: If a field breaks a serie rule
            SerieAlreadyExistsError: If the code or name is already taken
        """
        candidate = Serie.create(
            code=command.code,
            name=command.name,
            release_year=command.release_year,
            image_url=command.image_url,
            expansions=command.expansions,
        )

        self.validation_pipeline.execute_validation(candidate)

        record = self.serie_repository.create_serie(self.mapper.to_record(candidate))
        serie = self.mapper.to_domain(record)

        logger.info("created_serie", serie_id=str(serie.id), code=serie.code)
        return serie
