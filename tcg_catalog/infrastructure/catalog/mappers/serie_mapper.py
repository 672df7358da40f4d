"""Mapper for Serie ORM ↔ SerieRecord conversion."""

import uuid
from datetime import UTC, datetime

from tcg_catalog.application.catalog.protocols.serie_repository import SerieRecord
from tcg_catalog.models import Serie as SerieORM


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


class SerieMapper:
    """Mapper for Serie ORM ↔ SerieRecord conversion."""

    def to_record(self, orm_model: SerieORM) -> SerieRecord:
        """Convert ORM model to persistence record."""
        created_at = _as_utc(orm_model.created_at)
        if created_at is None:
            raise ValueError(f"Serie {orm_model.id} has no created_at")
        return SerieRecord(
            id=orm_model.id,
            code=orm_model.code,
            name=orm_model.name,
            release_year=orm_model.release_year,
            image_url=orm_model.image_url,
            expansions=orm_model.expansions,
            created_at=created_at,
            updated_at=_as_utc(orm_model.updated_at),
        )

    def to_orm(self, record: SerieRecord, orm_model: SerieORM | None = None) -> SerieORM:
        """Convert persistence record to ORM model."""
        if orm_model:
            # Update existing; created_at is never rewritten
            orm_model.code = record.code
            orm_model.name = record.name
            orm_model.release_year = record.release_year
            orm_model.image_url = record.image_url
            orm_model.expansions = record.expansions
            orm_model.updated_at = record.updated_at
            return orm_model

        # Create new
        return SerieORM(
            id=record.id if record.id is not None else uuid.uuid4(),
            code=record.code,
            name=record.name,
            release_year=record.release_year,
            image_url=record.image_url,
            expansions=record.expansions,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
