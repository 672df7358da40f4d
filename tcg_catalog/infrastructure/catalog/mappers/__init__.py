from .serie_mapper import SerieMapper

__all__ = ["SerieMapper"]
