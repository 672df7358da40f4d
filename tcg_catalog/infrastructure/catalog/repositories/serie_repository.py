"""Repository for Serie records."""

import structlog
from sqlalchemy import and_, exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tcg_catalog.application.catalog.protocols.serie_repository import SerieRecord
from tcg_catalog.application.common.pagination import Page, Pagination
from tcg_catalog.domain.catalog.exceptions import SerieAlreadyExistsError, SerieNotFoundError
from tcg_catalog.domain.common.value_objects.ids import SerieId
from tcg_catalog.infrastructure.catalog.mappers.serie_mapper import SerieMapper
from tcg_catalog.models import Serie as SerieORM

logger = structlog.get_logger(__name__)


class SerieRepository:
    """SQLAlchemy implementation of the serie repository port."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = SerieMapper()

    def find_all_series(self, page: int, page_size: int) -> Page[SerieRecord]:
        """
        Get one page of series ordered by code.

        Args:
            page: Zero-based page index
            page_size: Number of records per page

        Returns:
            Page of records with its metadata
        """
        pagination = Pagination(page=page, page_size=page_size)

        total = self.db.execute(select(func.count()).select_from(SerieORM)).scalar_one()

        stmt = (
            select(SerieORM)
            .order_by(SerieORM.code, SerieORM.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()

        return Page.from_query_result(
            [self.mapper.to_record(orm) for orm in orm_models],
            page=pagination.page,
            page_size=pagination.page_size,
            total_elements=total,
        )

    def find_serie_by_id(self, serie_id: SerieId) -> SerieRecord | None:
        """Find a serie by ID."""
        orm_model = self.db.get(SerieORM, serie_id.value)
        return self.mapper.to_record(orm_model) if orm_model else None

    def find_serie_by_code(self, code: str) -> SerieRecord | None:
        """Find a serie by its exact code."""
        stmt = select(SerieORM).where(SerieORM.code == code)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_record(orm_model) if orm_model else None

    def create_serie(self, record: SerieRecord) -> SerieRecord:
        """
        Store a new serie.

        Raises:
            SerieAlreadyExistsError: If the unique constraint on code or name fires
        """
        orm_model = self.mapper.to_orm(record)
        self.db.add(orm_model)
        self._commit(record)
        self.db.refresh(orm_model)
        return self.mapper.to_record(orm_model)

    def update_serie(self, record: SerieRecord) -> SerieRecord:
        """
        Overwrite a stored serie. ``created_at`` is left untouched.

        Raises:
            SerieNotFoundError: If the record no longer exists
            SerieAlreadyExistsError: If the unique constraint on code or name fires
        """
        if record.id is None:
            raise SerieNotFoundError(None)

        existing_orm = self.db.get(SerieORM, record.id)
        if existing_orm is None:
            raise SerieNotFoundError(record.id)

        self.mapper.to_orm(record, existing_orm)
        self._commit(record)
        self.db.refresh(existing_orm)
        return self.mapper.to_record(existing_orm)

    def delete_serie_by_id(self, serie_id: SerieId) -> None:
        """Delete a serie. Does nothing if it does not exist."""
        orm_model = self.db.get(SerieORM, serie_id.value)
        if orm_model is None:
            return
        self.db.delete(orm_model)
        self.db.commit()

    def exists_serie_by_id(self, serie_id: SerieId) -> bool:
        """Check whether a serie with this id is stored."""
        stmt = select(exists().where(SerieORM.id == serie_id.value))
        return bool(self.db.execute(stmt).scalar())

    def exists_serie_by_code(self, code: str, exclude_id: SerieId | None = None) -> bool:
        """Check whether a serie (other than ``exclude_id``) uses this code."""
        condition = SerieORM.code == code
        if exclude_id is not None:
            condition = and_(condition, SerieORM.id != exclude_id.value)
        return bool(self.db.execute(select(exists().where(condition))).scalar())

    def exists_serie_by_name(self, name: str, exclude_id: SerieId | None = None) -> bool:
        """Check whether a serie (other than ``exclude_id``) uses this name."""
        condition = SerieORM.name == name
        if exclude_id is not None:
            condition = and_(condition, SerieORM.id != exclude_id.value)
        return bool(self.db.execute(select(exists().where(condition))).scalar())

    def _commit(self, record: SerieRecord) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("serie_uniqueness_conflict", code=record.code, name=record.name)
            field, value = self._conflicting_field(record)
            raise SerieAlreadyExistsError(field, value) from e

    def _conflicting_field(self, record: SerieRecord) -> tuple[str, str]:
        exclude_id = SerieId(record.id) if record.id is not None else None
        if self.exists_serie_by_code(record.code, exclude_id=exclude_id):
            return "code", record.code
        return "name", record.name
