"""Commands and queries for serie use cases."""

from dataclasses import dataclass, field

from tcg_catalog.application.common.command import Command
from tcg_catalog.application.common.query import Query
from tcg_catalog.domain.catalog.entities.expansion import Expansion
from tcg_catalog.domain.common.value_objects.ids import SerieId


@dataclass(frozen=True)
class CreateSerieCommand(Command):
    """Create a serie."""

    code: str
    name: str
    release_year: int
    image_url: str | None = None
    expansions: tuple[Expansion, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class UpdateSerieCommand(Command):
    """Replace the details of a stored serie."""

    id: SerieId | None
    code: str
    name: str
    release_year: int
    image_url: str | None = None
    expansions: tuple[Expansion, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DeleteSerieByIdCommand(Command):
    """Delete a stored serie."""

    id: SerieId


@dataclass(frozen=True)
class FindSerieByIdQuery(Query):
    id: SerieId


@dataclass(frozen=True)
class FindSerieByCodeQuery(Query):
    code: str


@dataclass(frozen=True)
class FindAllSerieQuery(Query):
    """One zero-based page of series."""

    page: int
    page_size: int
