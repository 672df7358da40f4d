"""Business-rule validation for serie mutations."""

from .pipeline import (
    ValidationPipeline,
    create_serie_pipeline,
    delete_serie_pipeline,
    update_serie_pipeline,
)
from .serie_validators import CodeExistsCheck, IdExistsCheck, NameExistsCheck, SerieIdExistsCheck
from .validator_strategy import SerieExistenceReader, ValidatorStrategy

__all__ = [
    "CodeExistsCheck",
    "IdExistsCheck",
    "NameExistsCheck",
    "SerieExistenceReader",
    "SerieIdExistsCheck",
    "ValidationPipeline",
    "ValidatorStrategy",
    "create_serie_pipeline",
    "delete_serie_pipeline",
    "update_serie_pipeline",
]
