"""Serie entity: a Pokémon TCG release series."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from tcg_catalog.domain.catalog.entities.expansion import Expansion
from tcg_catalog.domain.catalog.exceptions import InvalidSerieDataError
from tcg_catalog.domain.common.entity import Entity
from tcg_catalog.domain.common.value_objects.ids import SerieId

CODE_MAX_LENGTH = 10
NAME_MAX_LENGTH = 100
IMAGE_URL_MAX_LENGTH = 255
# Release years must be strictly greater than this one.
FIRST_RELEASE_YEAR = 1998


@dataclass(frozen=True)
class Serie(Entity[SerieId]):
    """
    Serie entity.

    A serie groups expansions released together. ``id`` stays ``None``
    until the serie has been stored; ``updated_at`` stays ``None`` until
    the first update.
    """

    # Identity
    id: SerieId | None

    # Content
    code: str
    name: str
    release_year: int
    image_url: str | None = None
    expansions: tuple[Expansion, ...] = field(default_factory=tuple)

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.code or not self.code.strip():
            raise InvalidSerieDataError("Code must not be blank", field="code")
        if len(self.code) > CODE_MAX_LENGTH:
            raise InvalidSerieDataError(
                f"Code must be at most {CODE_MAX_LENGTH} characters",
                field="code",
                value=self.code,
            )
        if not self.name or not self.name.strip():
            raise InvalidSerieDataError("Name must not be blank", field="name")
        if len(self.name) > NAME_MAX_LENGTH:
            raise InvalidSerieDataError(
                f"Name must be at most {NAME_MAX_LENGTH} characters",
                field="name",
                value=self.name,
            )
        if self.release_year <= FIRST_RELEASE_YEAR:
            raise InvalidSerieDataError(
                f"Release year must be greater than {FIRST_RELEASE_YEAR}",
                field="release_year",
                value=self.release_year,
            )
        if self.image_url is not None and len(self.image_url) > IMAGE_URL_MAX_LENGTH:
            raise InvalidSerieDataError(
                f"Image url must be at most {IMAGE_URL_MAX_LENGTH} characters",
                field="image_url",
            )
        # Accept any iterable but always hold an immutable, ordered tuple
        object.__setattr__(self, "expansions", tuple(self.expansions))

    # Query methods
    @property
    def expansion_codes(self) -> list[str]:
        """Codes of the owned expansions, in order."""
        return [expansion.code for expansion in self.expansions]

    # Factory methods
    @classmethod
    def create(
        cls,
        code: str,
        name: str,
        release_year: int,
        image_url: str | None = None,
        expansions: Iterable[Expansion] = (),
    ) -> "Serie":
        """Factory for a new, not yet stored serie."""
        return cls(
            id=None,
            code=code,
            name=name,
            release_year=release_year,
            image_url=image_url,
            expansions=tuple(expansions),
            created_at=datetime.now(UTC),
            updated_at=None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: SerieId | None,
        code: str,
        name: str,
        release_year: int,
        image_url: str | None,
        expansions: Iterable[Expansion],
        created_at: datetime,
        updated_at: datetime | None,
    ) -> "Serie":
        """Factory for reconstituting a serie from persistence or for an update candidate."""
        return cls(
            id=id,
            code=code,
            name=name,
            release_year=release_year,
            image_url=image_url,
            expansions=tuple(expansions),
            created_at=created_at,
            updated_at=updated_at,
        )
