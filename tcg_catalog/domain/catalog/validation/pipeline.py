"""
Validation pipelines.

A pipeline is the ordered list of validator strategies guarding one
operation. Strategies run in list order and the first failure aborts
the run: the error propagates as raised and the remaining strategies
are never invoked. Later strategies rely on this, e.g. the update
pipeline's code and name checks assume the id check already passed.

Pipelines are wired explicitly per operation:

    pipeline = update_serie_pipeline(repository)
    pipeline.execute_validation(candidate)
"""

from collections.abc import Sequence
from typing import Generic, TypeVar

import structlog

from tcg_catalog.domain.catalog.entities.serie import Serie
from tcg_catalog.domain.catalog.validation.serie_validators import (
    CodeExistsCheck,
    IdExistsCheck,
    NameExistsCheck,
    SerieIdExistsCheck,
)
from tcg_catalog.domain.catalog.validation.validator_strategy import (
    SerieExistenceReader,
    ValidatorStrategy,
)
from tcg_catalog.domain.common.value_objects.ids import SerieId

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class ValidationPipeline(Generic[T]):
    """Ordered, fail-fast sequence of validator strategies for one operation."""

    def __init__(self, operation: str, validators: Sequence[ValidatorStrategy[T]] = ()) -> None:
        self.operation = operation
        self.validators: tuple[ValidatorStrategy[T], ...] = tuple(validators)

    def __len__(self) -> int:
        return len(self.validators)

    def execute_validation(self, candidate: T) -> None:
        """
        Run every strategy against the candidate, in order.

        An empty pipeline always passes.

        Raises:
            DomainError: The first failure, unchanged
        """
        logger.debug(
            "running_validation_pipeline",
            operation=self.operation,
            validators=len(self.validators),
        )
        for validator in self.validators:
            validator.execute(candidate)


def create_serie_pipeline(repository: SerieExistenceReader) -> ValidationPipeline[Serie]:
    """Code, then name, must be free."""
    return ValidationPipeline(
        "create",
        [
            CodeExistsCheck(repository),
            NameExistsCheck(repository),
        ],
    )


def update_serie_pipeline(repository: SerieExistenceReader) -> ValidationPipeline[Serie]:
    """Id must be present and stored, then code and name must be free among other series."""
    return ValidationPipeline(
        "update",
        [
            IdExistsCheck(repository),
            CodeExistsCheck(repository, exclude_self=True),
            NameExistsCheck(repository, exclude_self=True),
        ],
    )


def delete_serie_pipeline(repository: SerieExistenceReader) -> ValidationPipeline[SerieId]:
    """Id must be stored."""
    return ValidationPipeline("delete", [SerieIdExistsCheck(repository)])
