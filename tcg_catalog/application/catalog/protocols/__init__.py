from .serie_repository import SerieRecord, SerieRepositoryProtocol

__all__ = [
    "SerieRecord",
    "SerieRepositoryProtocol",
]
