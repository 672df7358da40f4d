"""
Domain error taxonomy.

Every failure raised by entities and validators is a DomainError of one
of three kinds: bad input (ValidationError), a missing record
(EntityNotFoundError) or a uniqueness clash (EntityAlreadyExistsError).
Use cases let them through untouched; the HTTP error handlers map each
kind to a status code.
"""


class DomainError(Exception):
    """Root of the taxonomy; ``details`` carries machine-readable context."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class ValidationError(DomainError):
    """
    Raised when data required by an operation is missing or malformed.

    Example: Update without a target id, blank code, release year too old.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when a referenced entity does not exist.

    Example: Deleting a serie by an id that was never stored.
    """

    def __init__(self, entity_type: str, entity_id: object, message: str | None = None) -> None:
        msg = message or f"{entity_type} with id {entity_id} not found"
        super().__init__(msg, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class EntityAlreadyExistsError(DomainError):
    """
    Raised when a uniqueness rule would be violated.

    Example: Creating a serie whose code is already taken.
    """

    def __init__(
        self, entity_type: str, field: str, value: object, message: str | None = None
    ) -> None:
        msg = message or f"{entity_type} with {field} '{value}' already exists"
        super().__init__(msg, {"entity_type": entity_type, "field": field})
        self.entity_type = entity_type
        self.field = field
        self.value = value
