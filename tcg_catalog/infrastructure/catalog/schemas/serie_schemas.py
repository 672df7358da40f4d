"""Pydantic schemas for Serie API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from tcg_catalog.domain.catalog.entities.expansion import Expansion
from tcg_catalog.domain.catalog.entities.serie import (
    CODE_MAX_LENGTH,
    FIRST_RELEASE_YEAR,
    IMAGE_URL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    Serie,
)
from tcg_catalog.infrastructure.common.schemas.response_wrappers import CamelModel


class ExpansionRequest(CamelModel):
    """
    Schema for an expansion sent with a serie.

    Only the code is stored, so any other field is rejected rather than
    silently dropped.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(..., min_length=1, description="Expansion code")

    def to_domain(self) -> Expansion:
        return Expansion(code=self.code)


class ExpansionResponse(CamelModel):
    """Schema for an expansion returned with a serie."""

    id: UUID | None = None
    code: str
    name: str = ""

    @classmethod
    def from_domain(cls, expansion: Expansion) -> "ExpansionResponse":
        return cls(id=expansion.id, code=expansion.code, name=expansion.name)


class SerieBase(CamelModel):
    """Base schema for Serie."""

    code: str = Field(
        ..., min_length=1, max_length=CODE_MAX_LENGTH, description="Unique serie code"
    )
    name: str = Field(
        ..., min_length=1, max_length=NAME_MAX_LENGTH, description="Unique serie name"
    )
    release_year: int = Field(..., gt=FIRST_RELEASE_YEAR, description="Year of release")
    image_url: str | None = Field(
        None, max_length=IMAGE_URL_MAX_LENGTH, description="Cover image URL"
    )
    expansions: list[ExpansionRequest] = Field(
        default_factory=list, description="Expansions of the serie, in order"
    )

    @field_validator("code", "name")
    @classmethod
    def must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def domain_expansions(self) -> tuple[Expansion, ...]:
        return tuple(expansion.to_domain() for expansion in self.expansions)


class CreateSerieRequest(SerieBase):
    """Schema for creating a serie."""


class UpdateSerieRequest(SerieBase):
    """Schema for updating a serie. ``id``, when sent, must match the path."""

    id: UUID | None = Field(None, description="Serie identifier")


class SerieResponse(CamelModel):
    """Schema for Serie response."""

    id: UUID | None
    code: str
    name: str
    release_year: int
    image_url: str | None = None
    expansions: list[ExpansionResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, serie: Serie) -> "SerieResponse":
        return cls(
            id=serie.id.value if serie.id is not None else None,
            code=serie.code,
            name=serie.name,
            release_year=serie.release_year,
            image_url=serie.image_url,
            expansions=[ExpansionResponse.from_domain(e) for e in serie.expansions],
            created_at=serie.created_at,
            updated_at=serie.updated_at,
        )
