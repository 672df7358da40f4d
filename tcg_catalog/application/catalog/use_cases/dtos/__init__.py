"""Commands and queries for catalog use cases."""

from tcg_catalog.application.catalog.use_cases.dtos.serie_dtos import (
    CreateSerieCommand,
    DeleteSerieByIdCommand,
    FindAllSerieQuery,
    FindSerieByCodeQuery,
    FindSerieByIdQuery,
    UpdateSerieCommand,
)

__all__ = [
    "CreateSerieCommand",
    "DeleteSerieByIdCommand",
    "FindAllSerieQuery",
    "FindSerieByCodeQuery",
    "FindSerieByIdQuery",
    "UpdateSerieCommand",
]
