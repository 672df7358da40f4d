"""Expansion value object owned by a serie."""

from dataclasses import dataclass
from uuid import UUID

from tcg_catalog.domain.catalog.exceptions import InvalidSerieDataError
from tcg_catalog.domain.common.value_object import ValueObject

# Separator used when a serie's expansions are flattened into one column.
EXPANSION_DELIMITER = ","


@dataclass(frozen=True)
class Expansion(ValueObject):
    """
    A named sub-release belonging to one serie.

    Expansions have no lifecycle of their own: they are created and
    destroyed together with the serie that owns them.
    """

    code: str
    name: str = ""
    id: UUID | None = None

    def __post_init__(self) -> None:
        if not self.code or not self.code.strip():
            raise InvalidSerieDataError("Expansion code cannot be blank", field="expansions")
        # Codes are kept trimmed
        object.__setattr__(self, "code", self.code.strip())
        if EXPANSION_DELIMITER in self.code:
            raise InvalidSerieDataError(
                f"Expansion code cannot contain '{EXPANSION_DELIMITER}'",
                field="expansions",
                value=self.code,
            )
