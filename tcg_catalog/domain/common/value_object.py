"""Base class for value objects."""


class ValueObject:
    """
    Immutable value compared by its attributes, never by identity.

    Subclasses are ``@dataclass(frozen=True)`` and reject bad input in
    ``__post_init__``, so an instance that exists is always valid.
    """
