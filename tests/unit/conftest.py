"""Fixtures for unit tests that run without a database."""

import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime

import pytest

from tcg_catalog.application.catalog.protocols.serie_repository import SerieRecord
from tcg_catalog.application.common.pagination import Page, Pagination
from tcg_catalog.domain.common.value_objects.ids import SerieId


class InMemorySerieRepository:
    """Dict-backed serie repository that records every port call by name."""

    def __init__(self) -> None:
        self.records: dict[uuid.UUID, SerieRecord] = {}
        self.calls: list[str] = []

    def seed(
        self,
        code: str = "SV",
        name: str = "Scarlet & Violet",
        release_year: int = 2023,
        expansions: str | None = None,
        created_at: datetime | None = None,
    ) -> SerieRecord:
        """Store a record without recording a call."""
        record = SerieRecord(
            id=uuid.uuid4(),
            code=code,
            name=name,
            release_year=release_year,
            image_url=None,
            expansions=expansions,
            created_at=created_at or datetime(2024, 1, 1, tzinfo=UTC),
            updated_at=None,
        )
        self.records[record.id] = record
        return record

    def find_all_series(self, page: int, page_size: int) -> Page[SerieRecord]:
        self.calls.append("find_all_series")
        pagination = Pagination(page=page, page_size=page_size)
        ordered = sorted(self.records.values(), key=lambda r: r.code)
        content = ordered[pagination.offset : pagination.offset + pagination.limit]
        return Page.from_query_result(content, page, page_size, len(ordered))

    def find_serie_by_id(self, serie_id: SerieId) -> SerieRecord | None:
        self.calls.append("find_serie_by_id")
        return self.records.get(serie_id.value)

    def find_serie_by_code(self, code: str) -> SerieRecord | None:
        self.calls.append("find_serie_by_code")
        return next((r for r in self.records.values() if r.code == code), None)

    def create_serie(self, record: SerieRecord) -> SerieRecord:
        self.calls.append("create_serie")
        stored = replace(record, id=uuid.uuid4())
        self.records[stored.id] = stored
        return stored

    def update_serie(self, record: SerieRecord) -> SerieRecord:
        self.calls.append("update_serie")
        previous = self.records[record.id]
        stored = replace(record, created_at=previous.created_at)
        self.records[stored.id] = stored
        return stored

    def delete_serie_by_id(self, serie_id: SerieId) -> None:
        self.calls.append("delete_serie_by_id")
        self.records.pop(serie_id.value, None)

    def exists_serie_by_id(self, serie_id: SerieId) -> bool:
        self.calls.append("exists_serie_by_id")
        return serie_id.value in self.records

    def exists_serie_by_code(self, code: str, exclude_id: SerieId | None = None) -> bool:
        self.calls.append("exists_serie_by_code")
        return any(
            r.code == code for r in self.records.values() if not _is_excluded(r, exclude_id)
        )

    def exists_serie_by_name(self, name: str, exclude_id: SerieId | None = None) -> bool:
        self.calls.append("exists_serie_by_name")
        return any(
            r.name == name for r in self.records.values() if not _is_excluded(r, exclude_id)
        )


def _is_excluded(record: SerieRecord, exclude_id: SerieId | None) -> bool:
    return exclude_id is not None and record.id == exclude_id.value


@pytest.fixture
def serie_repository() -> InMemorySerieRepository:
    """An empty in-memory serie repository."""
    return InMemorySerieRepository()


@pytest.fixture
def new_serie_id() -> Callable[[], SerieId]:
    """Factory for random, never stored serie ids."""
    return lambda: SerieId(uuid.uuid4())
