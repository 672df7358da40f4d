"""Catalog module domain exceptions."""

from tcg_catalog.domain.common.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)


class InvalidSerieDataError(ValidationError):
    """Raised when a serie is missing required data or breaks a field rule."""


class SerieNotFoundError(EntityNotFoundError):
    """Raised when a serie cannot be found."""

    def __init__(self, serie_id: object) -> None:
        super().__init__(
            "Serie",
            serie_id,
            message=f"The series '{serie_id}' was not found in the system.",
        )


class SerieAlreadyExistsError(EntityAlreadyExistsError):
    """Raised when another serie already uses the same code or name."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(
            "Serie",
            field,
            value,
            message=f"The series '{value}' already exists in the system.",
        )
