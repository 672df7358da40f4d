"""Use case for deleting series."""

import structlog

from tcg_catalog.application.catalog.protocols.serie_repository import SerieRepositoryProtocol
from tcg_catalog.application.catalog.use_cases.dtos.serie_dtos import DeleteSerieByIdCommand
from tcg_catalog.domain.catalog.validation.pipeline import ValidationPipeline
from tcg_catalog.domain.common.value_objects.ids import SerieId

logger = structlog.get_logger(__name__)


class DeleteSerieByIdUseCase:
    """Use case for deleting series."""

    def __init__(
        self,
        serie_repository: SerieRepositoryProtocol,
        validation_pipeline: ValidationPipeline[SerieId],
    ) -> None:
        self.serie_repository = serie_repository
        self.validation_pipeline = validation_pipeline

    def execute(self, command: DeleteSerieByIdCommand) -> None:
        """
        Delete a serie.

        Raises:
            SerieNotFoundError: If no serie has this id (nothing is deleted)
        """
        self.validation_pipeline.execute_validation(command.id)
        self.serie_repository.delete_serie_by_id(command.id)

        logger.info("deleted_serie", serie_id=str(command.id))
