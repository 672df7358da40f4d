"""
Validator strategy contract.

A validator strategy is a single business rule checked against a
candidate before a mutation is allowed. It either returns normally
(the rule holds) or raises a DomainError naming the violation.

Strategies only read: they may query existence through a
SerieExistenceReader but never change state.
"""

from typing import Protocol, TypeVar

from tcg_catalog.domain.common.value_objects.ids import SerieId

T_contra = TypeVar("T_contra", contravariant=True)


class ValidatorStrategy(Protocol[T_contra]):
    """A single-purpose rule applied to a candidate value."""

    def execute(self, candidate: T_contra) -> None:
        """
        Check the rule against the candidate.

        Raises:
            DomainError: When the rule is violated
        """
        ...


class SerieExistenceReader(Protocol):
    """Read-only existence queries the serie validators depend on."""

    def exists_serie_by_id(self, serie_id: SerieId) -> bool: ...

    def exists_serie_by_code(self, code: str, exclude_id: SerieId | None = None) -> bool: ...

    def exists_serie_by_name(self, name: str, exclude_id: SerieId | None = None) -> bool: ...
