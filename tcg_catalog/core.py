from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from tcg_catalog.application.catalog.use_cases.series import (
    CreateSerieUseCase,
    DeleteSerieByIdUseCase,
    FindAllSeriesUseCase,
    FindSerieByCodeUseCase,
    FindSerieByIdUseCase,
    UpdateSerieByIdUseCase,
)
from tcg_catalog.domain.catalog.validation import (
    create_serie_pipeline,
    delete_serie_pipeline,
    update_serie_pipeline,
)
from tcg_catalog.infrastructure.catalog.repositories.serie_repository import SerieRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    serie_repository = providers.Factory(SerieRepository, db=db)

    # Validation pipelines, one per write operation
    create_serie_validation = providers.Factory(create_serie_pipeline, repository=serie_repository)
    update_serie_validation = providers.Factory(update_serie_pipeline, repository=serie_repository)
    delete_serie_validation = providers.Factory(delete_serie_pipeline, repository=serie_repository)

    # Catalog module, application use cases
    find_all_series_use_case = providers.Factory(
        FindAllSeriesUseCase,
        serie_repository=serie_repository,
    )
    find_serie_by_id_use_case = providers.Factory(
        FindSerieByIdUseCase,
        serie_repository=serie_repository,
    )
    find_serie_by_code_use_case = providers.Factory(
        FindSerieByCodeUseCase,
        serie_repository=serie_repository,
    )
    create_serie_use_case = providers.Factory(
        CreateSerieUseCase,
        serie_repository=serie_repository,
        validation_pipeline=create_serie_validation,
    )
    update_serie_by_id_use_case = providers.Factory(
        UpdateSerieByIdUseCase,
        serie_repository=serie_repository,
        validation_pipeline=update_serie_validation,
    )
    delete_serie_by_id_use_case = providers.Factory(
        DeleteSerieByIdUseCase,
        serie_repository=serie_repository,
        validation_pipeline=delete_serie_validation,
    )


container = Container()
