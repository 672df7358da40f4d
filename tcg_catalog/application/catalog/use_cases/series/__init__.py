"""Serie use cases, one class per operation."""

from .create_serie_use_case import CreateSerieUseCase
from .delete_serie_by_id_use_case import DeleteSerieByIdUseCase
from .find_all_series_use_case import FindAllSeriesUseCase
from .find_serie_by_code_use_case import FindSerieByCodeUseCase
from .find_serie_by_id_use_case import FindSerieByIdUseCase
from .update_serie_by_id_use_case import UpdateSerieByIdUseCase

__all__ = [
    "CreateSerieUseCase",
    "DeleteSerieByIdUseCase",
    "FindAllSeriesUseCase",
    "FindSerieByCodeUseCase",
    "FindSerieByIdUseCase",
    "UpdateSerieByIdUseCase",
]
