"""Use case for updating series."""

from datetime import UTC, datetime

import structlog

from tcg_catalog.application.catalog.mappers.serie_record_mapper import SerieRecordMapper
from tcg_catalog.application.catalog.protocols.serie_repository import SerieRepositoryProtocol
from tcg_catalog.application.catalog.use_cases.dtos.serie_dtos import UpdateSerieCommand
from tcg_catalog.domain.catalog.entities.serie import Serie
from tcg_catalog.domain.catalog.exceptions import InvalidSerieDataError
from tcg_catalog.domain.catalog.validation.pipeline import ValidationPipeline
from tcg_catalog.domain.common.value_objects.ids import SerieId

logger = structlog.get_logger(__name__)


class UpdateSerieByIdUseCase:
    """Use case for updating series."""

    def __init__(
        self,
        serie_repository: SerieRepositoryProtocol,
        validation_pipeline: ValidationPipeline[Serie],
    ) -> None:
        self.serie_repository = serie_repository
        self.validation_pipeline = validation_pipeline
        self.mapper = SerieRecordMapper()

    def execute(self, serie_id: SerieId | None, command: UpdateSerieCommand) -> Serie:
        """
        Replace the details of a stored serie.

        The target is ``serie_id``, or ``command.id`` when ``serie_id`` is None.
        ``created_at`` is kept from the stored serie and ``updated_at`` is set
        to now. Nothing is written if validation fails.

        Args:
            serie_id: ID of the serie to update
            command: New details for the serie

        Returns:
            The stored serie after the update

        Raises:
            InvalidSerieDataError: If no target id is given, the ids disagree,
                or a field breaks a serie rule
            SerieNotFoundError: If no serie has the target id
            SerieAlreadyExistsError: If another serie uses the code or name
        """
        target_id = self._resolve_target_id(serie_id, command)

        now = datetime.now(UTC)
        existing = (
            self.serie_repository.find_serie_by_id(target_id) if target_id is not None else None
        )

        candidate = Serie.create_with_id(
            id=target_id,
            code=command.code,
            name=command.name,
            release_year=command.release_year,
            image_url=command.image_url,
            expansions=command.expansions,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )

        self.validation_pipeline.execute_validation(candidate)

        record = self.serie_repository.update_serie(self.mapper.to_record(candidate))
        serie = self.mapper.to_domain(record)

        logger.info("updated_serie", serie_id=str(serie.id), code=serie.code)
        return serie

    @staticmethod
    def _resolve_target_id(
        serie_id: SerieId | None, command: UpdateSerieCommand
    ) -> SerieId | None:
        if serie_id is None:
            return command.id
        if command.id is not None and command.id != serie_id:
            raise InvalidSerieDataError(
                f"Serie id {command.id} in the body does not match target {serie_id}",
                field="id",
            )
        return serie_id
