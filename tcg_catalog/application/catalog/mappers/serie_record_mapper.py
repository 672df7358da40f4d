"""Mapper for SerieRecord ↔ Domain conversion."""

from collections.abc import Iterable

from tcg_catalog.application.catalog.protocols.serie_repository import SerieRecord
from tcg_catalog.domain.catalog.entities.expansion import EXPANSION_DELIMITER, Expansion
from tcg_catalog.domain.catalog.entities.serie import Serie
from tcg_catalog.domain.common.value_objects.ids import SerieId


def encode_expansions(expansions: Iterable[Expansion]) -> str | None:
    """Join expansion codes, in order, into the stored column value."""
    codes = [expansion.code for expansion in expansions]
    if not codes:
        return None
    return EXPANSION_DELIMITER.join(codes)


def decode_expansions(raw: str | None) -> tuple[Expansion, ...]:
    """Split the stored column value back into expansions, in order."""
    if not raw:
        return ()
    codes = (segment.strip() for segment in raw.split(EXPANSION_DELIMITER))
    return tuple(Expansion(code=code) for code in codes if code)


class SerieRecordMapper:
    """Mapper for SerieRecord ↔ Domain conversion."""

    def to_domain(self, record: SerieRecord) -> Serie:
        """Convert persistence record to domain entity."""
        return Serie.create_with_id(
            id=SerieId(record.id) if record.id is not None else None,
            code=record.code,
            name=record.name,
            release_year=record.release_year,
            image_url=record.image_url,
            expansions=decode_expansions(record.expansions),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def to_record(self, serie: Serie) -> SerieRecord:
        """Convert domain entity to persistence record."""
        return SerieRecord(
            id=serie.id.value if serie.id is not None else None,
            code=serie.code,
            name=serie.name,
            release_year=serie.release_year,
            image_url=serie.image_url,
            expansions=encode_expansions(serie.expansions),
            created_at=serie.created_at,
            updated_at=serie.updated_at,
        )
