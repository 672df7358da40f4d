"""Tests for validator strategies and validation pipelines."""

import uuid
from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from tcg_catalog.domain.catalog.entities import Serie
from tcg_catalog.domain.catalog.exceptions import (
    InvalidSerieDataError,
    SerieAlreadyExistsError,
    SerieNotFoundError,
)
from tcg_catalog.domain.catalog.validation import (
    CodeExistsCheck,
    IdExistsCheck,
    NameExistsCheck,
    SerieIdExistsCheck,
    ValidationPipeline,
    create_serie_pipeline,
    delete_serie_pipeline,
    update_serie_pipeline,
)
from tcg_catalog.domain.common.value_objects.ids import SerieId


@dataclass
class RecordingValidator:
    """Validator that appends its label to a shared log, optionally failing."""

    label: str
    log: list[str]
    error: Exception | None = None

    def execute(self, candidate: object) -> None:
        self.log.append(self.label)
        if self.error is not None:
            raise self.error


@dataclass
class StubReader:
    """Existence reader answering from fixed sets of ids, codes and names."""

    ids: set[uuid.UUID] = field(default_factory=set)
    codes: dict[str, uuid.UUID] = field(default_factory=dict)
    names: dict[str, uuid.UUID] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    def exists_serie_by_id(self, serie_id: SerieId) -> bool:
        self.calls.append("id")
        return serie_id.value in self.ids

    def exists_serie_by_code(self, code: str, exclude_id: SerieId | None = None) -> bool:
        self.calls.append("code")
        owner = self.codes.get(code)
        return owner is not None and (exclude_id is None or owner != exclude_id.value)

    def exists_serie_by_name(self, name: str, exclude_id: SerieId | None = None) -> bool:
        self.calls.append("name")
        owner = self.names.get(name)
        return owner is not None and (exclude_id is None or owner != exclude_id.value)


def _make_serie(
    serie_id: uuid.UUID | None = None, code: str = "SV", name: str = "Scarlet"
) -> Serie:
    return Serie(
        id=SerieId(serie_id) if serie_id else None,
        code=code,
        name=name,
        release_year=2023,
    )


class TestValidationPipeline:
    def test_runs_validators_in_order(self) -> None:
        """Test that every validator runs, in list order."""
        log: list[str] = []
        pipeline = ValidationPipeline(
            "test",
            [RecordingValidator(label, log) for label in ("a", "b", "c")],
        )

        pipeline.execute_validation(object())

        assert log == ["a", "b", "c"]

    def test_stops_at_first_failure(self) -> None:
        """Test that the first failure propagates and later validators never run."""
        log: list[str] = []
        failure = SerieNotFoundError("missing")
        pipeline = ValidationPipeline(
            "test",
            [
                RecordingValidator("a", log),
                RecordingValidator("b", log, error=failure),
                RecordingValidator("c", log),
            ],
        )

        with pytest.raises(SerieNotFoundError) as exc_info:
            pipeline.execute_validation(object())

        assert exc_info.value is failure
        assert log == ["a", "b"]

    def test_empty_pipeline_passes(self) -> None:
        """Test that a pipeline with no validators accepts anything."""
        pipeline: ValidationPipeline[object] = ValidationPipeline("noop")

        pipeline.execute_validation(object())

        assert len(pipeline) == 0


class TestSerieValidators:
    def test_code_check_conflict(self) -> None:
        """Test that a taken code is reported with the serie message."""
        reader = StubReader(codes={"SV": uuid.uuid4()})

        with pytest.raises(SerieAlreadyExistsError) as exc_info:
            CodeExistsCheck(reader).execute(_make_serie())

        assert exc_info.value.message == "The series 'SV' already exists in the system."

    def test_name_check_conflict(self) -> None:
        """Test that a taken name is reported."""
        reader = StubReader(names={"Scarlet": uuid.uuid4()})

        with pytest.raises(SerieAlreadyExistsError):
            NameExistsCheck(reader).execute(_make_serie())

    def test_exclude_self_ignores_own_record(self) -> None:
        """Test that an update keeping its own code and name passes."""
        own_id = uuid.uuid4()
        reader = StubReader(ids={own_id}, codes={"SV": own_id}, names={"Scarlet": own_id})
        candidate = _make_serie(own_id)

        CodeExistsCheck(reader, exclude_self=True).execute(candidate)
        NameExistsCheck(reader, exclude_self=True).execute(candidate)

    def test_id_check_without_id(self) -> None:
        """Test that a candidate without id is invalid data, not missing."""
        with pytest.raises(InvalidSerieDataError):
            IdExistsCheck(StubReader()).execute(_make_serie())

    def test_id_check_unknown_id(self) -> None:
        """Test that an unknown id is reported as not found."""
        missing = uuid.uuid4()

        with pytest.raises(SerieNotFoundError) as exc_info:
            IdExistsCheck(StubReader()).execute(_make_serie(missing))

        assert exc_info.value.message == f"The series '{missing}' was not found in the system."

    def test_serie_id_check(self) -> None:
        """Test the existence check for bare serie ids."""
        stored = uuid.uuid4()
        check = SerieIdExistsCheck(StubReader(ids={stored}))

        check.execute(SerieId(stored))
        with pytest.raises(SerieNotFoundError):
            check.execute(SerieId(uuid.uuid4()))


class TestOperationPipelines:
    def test_create_code_conflict_never_checks_name(self) -> None:
        """Test that create stops at the code check."""
        reader = StubReader(codes={"SV": uuid.uuid4()}, names={"Scarlet": uuid.uuid4()})

        with pytest.raises(SerieAlreadyExistsError) as exc_info:
            create_serie_pipeline(reader).execute_validation(_make_serie())

        assert exc_info.value.field == "code"
        assert reader.calls == ["code"]

    def test_update_not_found_before_uniqueness(self) -> None:
        """Test that update reports a missing serie before any code or name conflict."""
        reader = StubReader(codes={"SV": uuid.uuid4()}, names={"Scarlet": uuid.uuid4()})

        with pytest.raises(SerieNotFoundError):
            update_serie_pipeline(reader).execute_validation(_make_serie(uuid.uuid4()))

        assert reader.calls == ["id"]

    def test_update_conflict_with_other_serie(self) -> None:
        """Test that update rejects a code owned by a different serie."""
        own_id = uuid.uuid4()
        reader = StubReader(ids={own_id}, codes={"SV": uuid.uuid4()})

        with pytest.raises(SerieAlreadyExistsError):
            update_serie_pipeline(reader).execute_validation(_make_serie(own_id))

        assert reader.calls == ["id", "code"]

    @pytest.mark.parametrize(
        ("factory", "expected"),
        [(create_serie_pipeline, 2), (update_serie_pipeline, 3), (delete_serie_pipeline, 1)],
    )
    def test_pipeline_sizes(
        self, factory: Callable[..., ValidationPipeline], expected: int
    ) -> None:
        """Test the number of strategies wired for each operation."""
        assert len(factory(StubReader())) == expected
