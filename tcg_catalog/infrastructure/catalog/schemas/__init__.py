from .serie_schemas import (
    CreateSerieRequest,
    ExpansionRequest,
    ExpansionResponse,
    SerieResponse,
    UpdateSerieRequest,
)

__all__ = [
    "CreateSerieRequest",
    "ExpansionRequest",
    "ExpansionResponse",
    "SerieResponse",
    "UpdateSerieRequest",
]
