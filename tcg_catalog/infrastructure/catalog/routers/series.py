from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from starlette import status

from tcg_catalog.application.catalog.use_cases.dtos import (
    CreateSerieCommand,
    DeleteSerieByIdCommand,
    FindAllSerieQuery,
    FindSerieByCodeQuery,
    FindSerieByIdQuery,
    UpdateSerieCommand,
)
from tcg_catalog.application.catalog.use_cases.series import (
    CreateSerieUseCase,
    DeleteSerieByIdUseCase,
    FindAllSeriesUseCase,
    FindSerieByCodeUseCase,
    FindSerieByIdUseCase,
    UpdateSerieByIdUseCase,
)
from tcg_catalog.application.common.pagination import MAX_PAGE_SIZE
from tcg_catalog.config import get_settings
from tcg_catalog.core import container
from tcg_catalog.domain.catalog.exceptions import SerieNotFoundError
from tcg_catalog.domain.common.value_objects import SerieId
from tcg_catalog.infrastructure.catalog.schemas.serie_schemas import (
    CreateSerieRequest,
    SerieResponse,
    UpdateSerieRequest,
)
from tcg_catalog.infrastructure.common.di import inject_use_case
from tcg_catalog.infrastructure.common.schemas.response_wrappers import (
    PageResponse,
    SuccessResponse,
)
from tcg_catalog.infrastructure.identity.dependencies import get_current_principal

router = APIRouter(
    prefix="/series",
    tags=["series"],
    dependencies=[Depends(get_current_principal)],
)


@router.get("", response_model=PageResponse[SerieResponse], status_code=status.HTTP_200_OK)
def list_series(
    use_case: Annotated[
        FindAllSeriesUseCase, Depends(inject_use_case(container.find_all_series_use_case))
    ],
    page: Annotated[int, Query(description="1-based page number")] = 1,
    page_size: Annotated[
        int | None, Query(alias="pageSize", ge=1, le=MAX_PAGE_SIZE, description="Page size")
    ] = None,
) -> PageResponse[SerieResponse]:
    """
    Get one page of series ordered by code.

    Pages are numbered from 1 on the way in; anything below 1 is treated as
    the first page. The returned ``page`` is zero-based.
    """
    size = page_size or get_settings().DEFAULT_PAGE_SIZE
    result = use_case.execute(FindAllSerieQuery(page=page - 1 if page > 0 else 0, page_size=size))
    return PageResponse[SerieResponse].from_page(result, SerieResponse.from_domain)


@router.get("/code/{code}", response_model=SerieResponse, status_code=status.HTTP_200_OK)
def get_serie_by_code(
    code: str,
    use_case: Annotated[
        FindSerieByCodeUseCase, Depends(inject_use_case(container.find_serie_by_code_use_case))
    ],
) -> SerieResponse:
    """
    Get a serie by its code.

    Raises:
        SerieNotFoundError: If no serie uses the code
    """
    serie = use_case.execute(FindSerieByCodeQuery(code=code))
    if serie is None:
        raise SerieNotFoundError(code)
    return SerieResponse.from_domain(serie)


@router.get("/{serie_id}", response_model=SerieResponse, status_code=status.HTTP_200_OK)
def get_serie(
    serie_id: UUID,
    use_case: Annotated[
        FindSerieByIdUseCase, Depends(inject_use_case(container.find_serie_by_id_use_case))
    ],
) -> SerieResponse:
    """
    Get a serie by its id.

    Raises:
        SerieNotFoundError: If no serie has the id
    """
    serie = use_case.execute(FindSerieByIdQuery(id=SerieId(serie_id)))
    if serie is None:
        raise SerieNotFoundError(serie_id)
    return SerieResponse.from_domain(serie)


@router.post("", response_model=SerieResponse, status_code=status.HTTP_201_CREATED)
def create_serie(
    request: CreateSerieRequest,
    response: Response,
    use_case: Annotated[
        CreateSerieUseCase, Depends(inject_use_case(container.create_serie_use_case))
    ],
) -> SerieResponse:
    """
    Create a new serie.

    The response carries a ``Location`` header pointing at the stored serie.

    Raises:
        SerieAlreadyExistsError: If the code or name is already taken
    """
    serie = use_case.execute(
        CreateSerieCommand(
            code=request.code,
            name=request.name,
            release_year=request.release_year,
            image_url=request.image_url,
            expansions=request.domain_expansions(),
        )
    )
    response.headers["Location"] = f"{get_settings().API_V1_PREFIX}{router.prefix}/{serie.id}"
    return SerieResponse.from_domain(serie)


@router.patch("/{serie_id}", response_model=SerieResponse, status_code=status.HTTP_200_OK)
def update_serie(
    serie_id: UUID,
    request: UpdateSerieRequest,
    use_case: Annotated[
        UpdateSerieByIdUseCase, Depends(inject_use_case(container.update_serie_by_id_use_case))
    ],
) -> SerieResponse:
    """
    Replace the details of a serie.

    Raises:
        InvalidSerieDataError: If the body id does not match the path id
        SerieNotFoundError: If no serie has the id
        SerieAlreadyExistsError: If another serie uses the code or name
    """
    serie = use_case.execute(
        SerieId(serie_id),
        UpdateSerieCommand(
            id=SerieId(request.id) if request.id is not None else None,
            code=request.code,
            name=request.name,
            release_year=request.release_year,
            image_url=request.image_url,
            expansions=request.domain_expansions(),
        ),
    )
    return SerieResponse.from_domain(serie)


@router.delete("/{serie_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def delete_serie(
    serie_id: UUID,
    use_case: Annotated[
        DeleteSerieByIdUseCase, Depends(inject_use_case(container.delete_serie_by_id_use_case))
    ],
) -> SuccessResponse:
    """
    Delete a serie.

    Raises:
        SerieNotFoundError: If no serie has the id
    """
    use_case.execute(DeleteSerieByIdCommand(id=SerieId(serie_id)))
    return SuccessResponse(
        title="Serie deleted",
        message=f"Serie with id {serie_id} deleted successfully",
    )
