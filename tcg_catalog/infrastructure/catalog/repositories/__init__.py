from .serie_repository import SerieRepository

__all__ = ["SerieRepository"]
